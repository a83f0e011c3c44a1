"""Integration tests for ProductMongoRepository against an in-memory collection."""

from __future__ import annotations

import pytest
from bson import ObjectId

from modules.products.repositories.mongo_repository import ProductMongoRepository

pytestmark = pytest.mark.integration


@pytest.fixture()
def repo(document_store):
    return ProductMongoRepository(document_store.products)


class TestProductMongoRepository:
    def test_create_assigns_id(self, repo, document_store):
        product = repo.create({"name": "Pen", "price": 10.0})

        assert isinstance(product["_id"], ObjectId)
        assert document_store.products.count_documents({}) == 1

    def test_get_by_id(self, repo):
        product = repo.create({"name": "Pen", "price": 10.0})

        found = repo.get_by_id(str(product["_id"]))
        assert found["name"] == "Pen"

    @pytest.mark.parametrize("bad_id", ["", "abc", None])
    def test_get_by_malformed_id_returns_none(self, repo, bad_id):
        assert repo.get_by_id(bad_id) is None

    def test_get_unknown_returns_none(self, repo):
        assert repo.get_by_id("ffffffffffffffffffffffff") is None

    def test_list_with_filter(self, repo):
        repo.create({"name": "Pen", "price": 10.0, "category": "stationery"})
        repo.create({"name": "Mug", "price": 7.0, "category": "kitchen"})

        assert len(repo.list()) == 2
        names = [p["name"] for p in repo.list({"category": "kitchen"})]
        assert names == ["Mug"]

    def test_update_returns_new_version(self, repo):
        product = repo.create({"name": "Pen", "price": 10.0})

        updated = repo.update(str(product["_id"]), {"price": 11.0})

        assert updated["price"] == 11.0
        assert updated["name"] == "Pen"

    def test_update_unknown_returns_none(self, repo):
        assert repo.update("ffffffffffffffffffffffff", {"price": 1.0}) is None

    def test_delete(self, repo, document_store):
        keep = repo.create({"name": "Mug", "price": 7.0})
        gone = repo.create({"name": "Pen", "price": 10.0})

        assert repo.delete(str(gone["_id"])) is True
        assert repo.delete(str(gone["_id"])) is False
        remaining = list(document_store.products.find())
        assert [p["_id"] for p in remaining] == [keep["_id"]]

    def test_delete_malformed_id(self, repo):
        assert repo.delete("bogus") is False
