"""Unit tests for Product DRF serializers.

Covers:
- Field presence and read-only constraints.
- Rendering of ProductOutputDTO with camelCase keys.
- Delete acknowledgement body.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.dtos import ProductOutputDTO
from modules.products.models import Product
from modules.products.serializers import ProductDeletedSerializer, ProductSerializer

pytestmark = pytest.mark.unit


def _make_view(**overrides) -> ProductOutputDTO:
    defaults = {
        "name": "Widget",
        "price": Decimal("19.99"),
        "stock": 10,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return ProductOutputDTO.from_entity(product)


# ===========================================================================
# Field presence
# ===========================================================================


class TestSerializerFields:
    def test_expected_fields(self):
        serializer = ProductSerializer()
        assert set(serializer.fields.keys()) == {
            "id",
            "name",
            "description",
            "price",
            "stock",
            "createdAt",
            "updatedAt",
            "isActive",
        }

    def test_all_fields_read_only(self):
        serializer = ProductSerializer()
        assert all(field.read_only for field in serializer.fields.values())


# ===========================================================================
# Serialization (DTO -> JSON)
# ===========================================================================


class TestSerialization:
    def test_serializes_product_view(self):
        view = _make_view()
        data = ProductSerializer(view).data
        assert data["id"] == view.id
        assert data["name"] == "Widget"
        assert data["price"] == "19.99"
        assert data["stock"] == 10
        assert data["isActive"] is True
        assert data["description"] == ""

    def test_timestamps_are_equal_on_new_product(self):
        data = ProductSerializer(_make_view()).data
        assert data["createdAt"] == data["updatedAt"]

    def test_price_keeps_two_decimals(self):
        data = ProductSerializer(_make_view(price=Decimal("15000"))).data
        assert data["price"] == "15000.00"

    def test_serializes_many(self):
        views = [_make_view(name="A"), _make_view(name="B")]
        data = ProductSerializer(views, many=True).data
        assert [item["name"] for item in data] == ["A", "B"]


class TestProductDeletedSerializer:
    def test_renders_message_and_id(self):
        data = ProductDeletedSerializer(
            {"message": "Product deleted successfully.", "id": 4}
        ).data
        assert data == {"message": "Product deleted successfully.", "id": 4}
