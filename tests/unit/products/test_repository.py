"""Unit tests for ProductDjangoRepository.

Covers:
- CRUD operations (get_by_id, list, save, delete, exists).
- Soft-deleted rows are invisible to every read.
- Edge cases (unknown and malformed IDs).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


def _make_product(**overrides) -> Product:
    defaults = {
        "name": "Widget",
        "price": Decimal("19.99"),
        "stock": 10,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(product.id)
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999) is None

    def test_returns_none_for_malformed_id(self, repo):
        assert repo.get_by_id("not-a-number") is None

    def test_returns_none_for_id_beyond_column_range(self, repo):
        assert repo.get_by_id(10**20) is None

    def test_returns_none_for_soft_deleted_product(self, repo):
        product = _make_product()
        product.delete()
        assert repo.get_by_id(product.id) is None


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_returns_active_products_in_insertion_order(self, repo):
        first = _make_product(name="First")
        second = _make_product(name="Second")
        results = repo.list()
        assert [p.id for p in results] == [first.id, second.id]

    def test_returns_empty_list_when_no_products(self, repo):
        assert repo.list() == []

    def test_excludes_soft_deleted(self, repo):
        kept = _make_product(name="Kept")
        gone = _make_product(name="Gone")
        gone.delete()
        assert [p.id for p in repo.list()] == [kept.id]


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_creates_new_product(self, repo):
        product = Product(name="New Product", price=Decimal("9.99"), stock=5)
        saved = repo.save(product)
        assert saved.id is not None
        assert Product.objects.filter(id=saved.id).exists()

    def test_updates_existing_product(self, repo):
        product = _make_product()
        product.name = "Updated Name"
        repo.save(product)
        product.refresh_from_db()
        assert product.name == "Updated Name"

    def test_returns_same_entity(self, repo):
        product = Product(name="Return Test", price=Decimal("5.00"))
        assert repo.save(product) is product


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_soft_deletes_existing_product(self, repo):
        product = _make_product()
        assert repo.delete(product.id) is True
        product.refresh_from_db()
        assert product.is_active is False

    def test_row_is_kept(self, repo):
        product = _make_product()
        repo.delete(product.id)
        assert Product.objects.filter(pk=product.id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete(999) is False

    def test_returns_false_for_id_beyond_column_range(self, repo):
        assert repo.delete(10**20) is False

    def test_second_delete_returns_false(self, repo):
        product = _make_product()
        repo.delete(product.id)
        assert repo.delete(product.id) is False


# ===========================================================================
# exists
# ===========================================================================


class TestExists:
    def test_true_for_active_product(self, repo):
        product = _make_product()
        assert repo.exists(product.id) is True

    def test_false_for_unknown_id(self, repo):
        assert repo.exists(999) is False

    def test_false_for_id_beyond_column_range(self, repo):
        assert repo.exists(10**20) is False

    def test_false_after_soft_delete(self, repo):
        product = _make_product()
        product.delete()
        assert repo.exists(product.id) is False
