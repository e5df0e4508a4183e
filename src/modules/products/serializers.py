"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and renders
``ProductOutputDTO`` instances.  Input is decoded by the Pydantic DTOs
in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read-only ProductView rendering."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    price = serializers.DecimalField(max_digits=18, decimal_places=2, read_only=True)
    stock = serializers.IntegerField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)


class ProductDeletedSerializer(serializers.Serializer):
    message = serializers.CharField(read_only=True)
    id = serializers.IntegerField(read_only=True)
