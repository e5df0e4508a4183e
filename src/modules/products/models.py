"""Product model for the catalog.

- ``id`` is a database-generated integer, immutable after creation.
- ``price`` is stored as ``decimal(18,2)``.
- ``stock`` has no lower bound at storage level.
- Soft delete via ``is_active`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import SoftDeleteModel


class Product(SoftDeleteModel):
    """Catalog product row."""

    name = models.CharField(max_length=100)
    description = models.CharField(max_length=500, blank=True, default="")
    price = models.DecimalField(max_digits=18, decimal_places=2)
    stock = models.IntegerField(default=0)

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
