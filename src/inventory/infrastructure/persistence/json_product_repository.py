"""JSON-file-backed implementation of ProductRepository.

The file holds one document::

    {"next_id": 4, "products": [{"id": 1, "name": "...", ...}, ...]}

``next_id`` only ever grows, so ids of deleted products are not reused.
Every write goes to a sibling temp file which is then renamed over the
original, so readers never see a half-written document. Writers hold a
lock file next to the document for the whole load, check and replace
sequence, so two repositories (or two processes) sharing one file cannot
both pass the version check. A writer that cannot get the lock within
``lock_timeout`` seconds fails with ConcurrencyConflictError.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from decimal import Decimal
from pathlib import Path

from filelock import FileLock, Timeout

from inventory.domain.exceptions import (
    ConcurrencyConflictError,
    DuplicateNameError,
    NotFoundError,
)
from inventory.domain.model.product import Product
from inventory.domain.model.value_objects import Money
from inventory.domain.repository.product_repository import ProductRepository


DEFAULT_LOCK_TIMEOUT = 10.0


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        self._file_path = file_path
        self._lock_timeout = lock_timeout
        self._lock = FileLock(file_path.with_name(file_path.name + ".lock"))
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw()["products"]:
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw()["products"]:
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()["products"]]

    def add(self, product: Product) -> Product:
        with self._locked():
            document = self._load_raw()
            records = document["products"]
            if any(raw["name"] == product.name for raw in records):
                raise DuplicateNameError(
                    f"Product with name [{product.name}] already exists", product.name
                )
            stored = replace(product, id=document["next_id"], version=1)
            records.append(self._to_raw(stored))
            document["next_id"] = stored.id + 1  # type: ignore[operator]
            self._persist_raw(document)
            return stored

    def update(self, product: Product) -> None:
        with self._locked():
            document = self._load_raw()
            records = document["products"]
            for i, raw in enumerate(records):
                if raw["id"] != product.id:
                    continue
                if raw["version"] != product.version:
                    raise ConcurrencyConflictError(
                        f"Product [{product.id}] is at version {raw['version']}, "
                        f"update was based on version {product.version}"
                    )
                if any(
                    other["name"] == product.name and other["id"] != product.id
                    for other in records
                ):
                    raise DuplicateNameError(
                        f"Product Name already exists: [{product.name}]", product.name
                    )
                records[i] = self._to_raw(replace(product, version=product.version + 1))
                self._persist_raw(document)
                product.version += 1
                return
            raise NotFoundError(f"Product ID does not exist: [{product.id}]")

    def delete(self, product_id: int) -> None:
        with self._locked():
            document = self._load_raw()
            remaining = [raw for raw in document["products"] if raw["id"] != product_id]
            if len(remaining) == len(document["products"]):
                raise NotFoundError(f"Product ID does not exist: [{product_id}]")
            document["products"] = remaining
            self._persist_raw(document)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "price": str(product.price.amount),
            "items_in_stock": product.items_in_stock,
            "items_reserved": product.items_reserved,
            "version": product.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(Decimal(raw["price"])),
            items_in_stock=raw.get("items_in_stock", 0),
            items_reserved=raw.get("items_reserved", 0),
            version=raw.get("version", 1),
        )

    # --- File helpers ---------------------------------------------------------

    @contextmanager
    def _locked(self) -> Iterator[None]:
        try:
            self._lock.acquire(timeout=self._lock_timeout)
        except Timeout as exc:
            raise ConcurrencyConflictError(
                f"Product store {self._file_path} is locked by another writer"
            ) from exc
        try:
            yield
        finally:
            self._lock.release()

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, document: dict) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(document, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._locked():
            if not self._file_path.exists():
                self._persist_raw({"next_id": 1, "products": []})
