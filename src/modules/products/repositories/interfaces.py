"""Product repository interface.

Extends ``IRepository[Product]`` with the existence check used by
``HEAD /api/products/{id}``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    Every read only sees active rows.
    """

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Return whether an active product with ``id`` exists."""
