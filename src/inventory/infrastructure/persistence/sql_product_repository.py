"""SQLAlchemy-backed implementation of ProductRepository.

Storage-level rules are enforced by the database itself:

- a named unique constraint on ``products.name``; an IntegrityError that
  names it is translated into DuplicateNameError, any other
  IntegrityError propagates untouched;
- ``AUTOINCREMENT`` on SQLite, so deleted ids are never handed out again;
- ``price`` is ``Numeric(18, 6)``, wide enough for every amount Money
  accepts;
- ``version`` is the mapper's version_id_col, so every UPDATE carries
  ``WHERE version = <loaded version>`` and a lost race surfaces as
  StaleDataError, translated into ConcurrencyConflictError.
"""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import (
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    create_engine,
    delete,
    select,
)
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker
from sqlalchemy.orm.exc import StaleDataError

from inventory.domain.exceptions import (
    ConcurrencyConflictError,
    DuplicateNameError,
    NotFoundError,
)
from inventory.domain.model.product import Product
from inventory.domain.model.value_objects import Money
from inventory.domain.repository.product_repository import ProductRepository

NAME_CONSTRAINT = "uq_products_name"


class Base(DeclarativeBase):
    pass


class ProductRow(Base):
    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("name", name=NAME_CONSTRAINT),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 6), nullable=False)
    items_in_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    items_reserved: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    # we bump the counter ourselves so even a no-op change is versioned
    __mapper_args__ = {"version_id_col": version, "version_id_generator": False}


def _is_name_clash(exc: IntegrityError) -> bool:
    # SQLite reports the column, PostgreSQL the constraint name
    message = str(exc.orig)
    return NAME_CONSTRAINT in message or "products.name" in message


class SqlProductRepository(ProductRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        Base.metadata.create_all(engine)

    @classmethod
    def from_url(cls, url: str) -> SqlProductRepository:
        return cls(create_engine(url))

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        with self._session_factory() as session:
            row = session.get(ProductRow, product_id)
            return None if row is None else self._to_domain(row)

    def get_by_name(self, name: str) -> Product | None:
        with self._session_factory() as session:
            row = session.scalars(
                select(ProductRow).where(ProductRow.name == name)
            ).first()
            return None if row is None else self._to_domain(row)

    def list_all(self) -> list[Product]:
        with self._session_factory() as session:
            return [self._to_domain(row) for row in session.scalars(select(ProductRow))]

    def add(self, product: Product) -> Product:
        row = ProductRow(
            name=product.name,
            price=product.price.amount,
            items_in_stock=product.items_in_stock,
            items_reserved=product.items_reserved,
            version=1,
        )
        with self._session_factory() as session:
            session.add(row)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                if _is_name_clash(exc):
                    raise DuplicateNameError(
                        f"Product with name [{product.name}] already exists", product.name
                    ) from exc
                raise
            return self._to_domain(row)

    def update(self, product: Product) -> None:
        with self._session_factory() as session:
            row = session.get(ProductRow, product.id)
            if row is None:
                raise NotFoundError(f"Product ID does not exist: [{product.id}]")
            if row.version != product.version:
                raise ConcurrencyConflictError(
                    f"Product [{product.id}] is at version {row.version}, "
                    f"update was based on version {product.version}"
                )
            row.name = product.name
            row.price = product.price.amount
            row.items_in_stock = product.items_in_stock
            row.items_reserved = product.items_reserved
            row.version = product.version + 1
            try:
                session.commit()
            except StaleDataError as exc:
                session.rollback()
                raise ConcurrencyConflictError(
                    f"Product [{product.id}] changed while it was being updated"
                ) from exc
            except IntegrityError as exc:
                session.rollback()
                if _is_name_clash(exc):
                    raise DuplicateNameError(
                        f"Product Name already exists: [{product.name}]", product.name
                    ) from exc
                raise
        product.version += 1

    def delete(self, product_id: int) -> None:
        table = ProductRow.__table__
        with self._session_factory() as session:
            result = session.execute(delete(table).where(table.c.id == product_id))
            session.commit()
        if result.rowcount == 0:
            raise NotFoundError(f"Product ID does not exist: [{product_id}]")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            price=Money(Decimal(row.price)),
            items_in_stock=row.items_in_stock,
            items_reserved=row.items_reserved,
            version=row.version,
        )
