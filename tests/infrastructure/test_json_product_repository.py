"""File-level behaviour specific to the JSON repository."""

import json
from dataclasses import replace

import pytest

from inventory.domain.exceptions import ConcurrencyConflictError
from inventory.domain.model.product import Product
from inventory.domain.model.value_objects import Money
from inventory.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


class TestJsonFile:

    def test_creates_empty_document(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text()) == {"next_id": 1, "products": []}

    def test_state_survives_new_instance(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).add(Product.create("Widget", Money.of("2.50")))

        reopened = JsonProductRepository(path)
        product = reopened.get_by_name("Widget")
        assert product.price == Money.of("2.50")
        assert reopened.add(Product.create("Gadget", Money.of("1"))).id == 2

    def test_no_temp_files_left_behind(self, tmp_path):
        path = tmp_path / "products.json"
        repo = JsonProductRepository(path)
        repo.add(Product.create("Widget", Money.of("1")))
        assert [p.name for p in tmp_path.iterdir() if p.suffix == ".tmp"] == []

    def test_stored_document_has_no_currency(self, tmp_path):
        path = tmp_path / "products.json"
        JsonProductRepository(path).add(Product.create("Widget", Money.of("2.50")))
        [raw] = json.loads(path.read_text())["products"]
        assert raw == {
            "id": 1,
            "name": "Widget",
            "price": "2.50",
            "items_in_stock": 0,
            "items_reserved": 0,
            "version": 1,
        }


class TestSharedFile:
    """Two repositories on one file, as with a CLI call next to a running server."""

    def test_stale_instance_loses_to_fresh_write(self, tmp_path):
        path = tmp_path / "products.json"
        first = JsonProductRepository(path)
        second = JsonProductRepository(path)
        stored = first.add(Product.create("Widget", Money.of("1")))

        mine = first.get_by_id(stored.id)
        second.update(replace(second.get_by_id(stored.id), items_in_stock=99))

        with pytest.raises(ConcurrencyConflictError):
            first.update(replace(mine, items_in_stock=10))
        assert first.get_by_id(stored.id).items_in_stock == 99

    def test_second_writer_refused_while_first_holds_the_file(self, tmp_path, monkeypatch):
        path = tmp_path / "products.json"
        first = JsonProductRepository(path)
        second = JsonProductRepository(path, lock_timeout=0.1)
        stored = first.add(Product.create("Widget", Money.of("1")))
        mine = first.get_by_id(stored.id)
        load = first._load_raw

        def load_then_compete():
            # runs inside first.update, between its read and its write
            document = load()
            with pytest.raises(ConcurrencyConflictError, match="locked by another writer"):
                second.update(replace(second.get_by_id(stored.id), items_in_stock=99))
            return document

        monkeypatch.setattr(first, "_load_raw", load_then_compete)
        first.update(replace(mine, items_in_stock=10))
        monkeypatch.undo()

        reloaded = second.get_by_id(stored.id)
        assert (reloaded.items_in_stock, reloaded.version) == (10, 2)
