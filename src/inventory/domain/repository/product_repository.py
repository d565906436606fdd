"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer and in the test fakes.

Implementations must honour three storage-level rules:

- ids are assigned on ``add`` and never reused, even after ``delete``;
- names are unique (exact, case-sensitive match) and a clash raises
  ``DuplicateNameError``;
- ``update`` is a compare-and-swap on ``Product.version``: it raises
  ``ConcurrencyConflictError`` when the stored version no longer matches
  the one that was loaded, and bumps the version on success.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from inventory.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a new product, assigning its id and initial version."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist all fields of an existing product in one atomic write."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Hard-delete a product. Raises NotFoundError if it does not exist."""
