"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Every read goes through ``_alive()``, so soft-deleted rows never leave
this module.  Missing rows follow the Null Object pattern: methods return
``None``/``False`` and the Service Layer decides what that means.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.db import transaction

from modules.core.models import SoftDeleteQuerySet
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _alive(self) -> SoftDeleteQuerySet:
        return Product.objects.alive()

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve an active product by primary key, or ``None``."""
        try:
            return self._alive().filter(pk=id).first()
        except (ValueError, TypeError, OverflowError):
            return None

    def list(self) -> List[Product]:
        """List active products in insertion order."""
        return list(self._alive().order_by("id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Soft-delete an active product by ID.

        Returns ``True`` if the product was found and soft-deleted,
        ``False`` if no active product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.soft_deleted", product_id=id)
        return True

    def exists(self, id: int) -> bool:
        try:
            return self._alive().filter(pk=id).exists()
        except (ValueError, TypeError, OverflowError):
            return False
