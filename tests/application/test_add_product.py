"""Integration tests for the AddProduct use case.

Uses in-memory fake repositories, no file I/O.
"""

import pytest

from inventory.application.add_product import AddProductHandler
from inventory.domain.exceptions import DuplicateNameError, InvalidArgumentError
from inventory.domain.model.value_objects import Money
from inventory.domain.service.product_gateway import ProductGateway
from tests.fakes import FakeProductRepository


def _setup() -> tuple[AddProductHandler, FakeProductRepository]:
    repo = FakeProductRepository()
    return AddProductHandler(ProductGateway(repo)), repo


class TestAddProductHappyPath:

    def test_returns_new_product(self):
        handler, _ = _setup()
        dto = handler.handle("Widget", 10.0)
        assert dto.id == 1
        assert dto.name == "Widget"
        assert dto.price == 10.0
        assert dto.items_in_stock == 0
        assert dto.items_reserved == 0

    def test_persists_product(self):
        handler, repo = _setup()
        dto = handler.handle("Widget", "15.00")
        saved = repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.price == Money.of("15.00")

    def test_sequential_ids(self):
        handler, _ = _setup()
        first = handler.handle("Widget", 1)
        second = handler.handle("Gadget", 2)
        assert second.id == first.id + 1


class TestAddProductValidation:

    def test_duplicate_name_rejected(self):
        handler, _ = _setup()
        handler.handle("X", 10.0)
        with pytest.raises(DuplicateNameError):
            handler.handle("X", 20.0)

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_rejected(self, name):
        handler, repo = _setup()
        with pytest.raises(InvalidArgumentError, match="Product Name is invalid"):
            handler.handle(name, 10.0)
        assert repo.list_all() == []

    @pytest.mark.parametrize(
        "price", [0, -1, -0.01, "0.00", "abc", None, "0.0000001", "1e400"]
    )
    def test_non_positive_or_garbage_price_rejected(self, price):
        handler, repo = _setup()
        with pytest.raises(InvalidArgumentError, match="Product Price is invalid"):
            handler.handle("Widget", price)
        assert repo.list_all() == []
