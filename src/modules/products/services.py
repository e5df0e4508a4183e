"""Product service layer (Use Cases).

Orchestrates the product lifecycle, delegating persistence to the
injected ``IProductRepository`` and notification to the injected
``IEventPublisher``.

Rules enforced here:
- Only active products are visible to reads, updates and deletes.
- Updates merge: blank strings and absent values leave stored fields alone.
- Every successful mutation emits exactly one product event.
- Storage failures are logged with context and re-raised unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.constants import ProductEventType
from modules.products.dtos import ProductOutputDTO
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository
    from shared.domain.bus import IEventPublisher

logger = structlog.get_logger(__name__)


def _has_text(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` and an ``IEventPublisher`` via
    constructor injection (DIP).  Not-found is reported as ``None`` or
    ``False``, never as an exception.
    """

    def __init__(
        self,
        repository: IProductRepository,
        publisher: IEventPublisher,
    ) -> None:
        self._repo = repository
        self._publisher = publisher

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductOutputDTO]:
        """Return every active product in insertion order."""
        try:
            products = self._repo.list()
        except Exception:
            logger.exception("product.list_failed", operation="list")
            raise
        return [ProductOutputDTO.from_entity(p) for p in products]

    def get_product(self, id: int) -> Optional[ProductOutputDTO]:
        """Retrieve a single active product, or ``None``."""
        try:
            product = self._repo.get_by_id(id)
        except Exception:
            logger.exception("product.retrieve_failed", operation="get", product_id=id)
            raise
        if product is None:
            return None
        return ProductOutputDTO.from_entity(product)

    def product_exists(self, id: int) -> bool:
        try:
            return self._repo.exists(id)
        except Exception:
            logger.exception("product.exists_failed", operation="exists", product_id=id)
            raise

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: CreateProductDTO) -> ProductOutputDTO:
        """Persist a new active product and emit ``ProductCreated``."""
        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock=dto.stock,
            is_active=True,
        )
        try:
            product = self._repo.save(product)
        except Exception:
            logger.exception("product.create_failed", operation="create")
            raise

        output = ProductOutputDTO.from_entity(product)
        self._publisher.publish_product_event(
            ProductEventType.CREATED, output.to_payload()
        )
        logger.info("product.created", product_id=product.id)
        return output

    def update_product(
        self, id: int, dto: UpdateProductDTO
    ) -> Optional[ProductOutputDTO]:
        """Merge the supplied fields into an active product.

        ``updated_at`` is refreshed even when no field changes.
        Returns ``None`` if the product does not exist or is inactive.
        """
        log = logger.bind(product_id=id)
        try:
            product = self._repo.get_by_id(id)
            if product is None:
                return None

            if _has_text(dto.name):
                product.name = dto.name
            if _has_text(dto.description):
                product.description = dto.description
            if dto.price is not None:
                product.price = dto.price
            if dto.stock is not None:
                product.stock = dto.stock
            if dto.is_active is not None:
                product.is_active = dto.is_active

            product = self._repo.save(product)
        except Exception:
            log.exception("product.update_failed", operation="update")
            raise

        output = ProductOutputDTO.from_entity(product)
        self._publisher.publish_product_event(
            ProductEventType.UPDATED, output.to_payload()
        )
        log.info("product.updated")
        return output

    def delete_product(self, id: int) -> bool:
        """Soft-delete an active product and emit ``ProductDeleted``.

        Returns ``False`` if the product does not exist or is already
        inactive; repeated deletes never succeed twice.
        """
        try:
            deleted = self._repo.delete(id)
        except Exception:
            logger.exception("product.delete_failed", operation="delete", product_id=id)
            raise
        if not deleted:
            return False

        self._publisher.publish_product_event(ProductEventType.DELETED, {"id": id})
        logger.info("product.deleted", product_id=id)
        return True
