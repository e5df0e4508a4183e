"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ProductOutputDTO``: output with all product fields.

Wire names are camelCase (``isActive``, ``createdAt``); Python attributes
stay snake_case and either form is accepted on input.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from modules.products.models import Product

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

Name = Annotated[str, Field(max_length=NAME_MAX_LENGTH)]
Description = Annotated[str, Field(max_length=DESCRIPTION_MAX_LENGTH)]
Price = Annotated[Decimal, Field(max_digits=18, decimal_places=2)]
Stock = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


_DTO_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is present, non-blank and at most 100 characters.
    - ``description`` is at most 500 characters.
    - ``price`` is present and fits ``decimal(18,2)``.
    - ``stock`` fits a 32-bit integer column.
    """

    model_config = _DTO_CONFIG

    name: Name
    price: Price
    description: Description = ""
    stock: Stock = 0

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional: ``None`` means "not provided" and leaves the
    stored value untouched.  Blank strings are accepted here and ignored by
    the service when merging.
    """

    model_config = _DTO_CONFIG

    name: Optional[Name] = None
    description: Optional[Description] = None
    price: Optional[Price] = None
    stock: Optional[Stock] = None
    is_active: Optional[bool] = None


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses and event payloads."""

    model_config = _DTO_CONFIG

    id: int
    name: str
    description: str
    price: Decimal
    stock: int
    created_at: datetime
    updated_at: datetime
    is_active: bool

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
            is_active=product.is_active,
        )

    def to_payload(self) -> Dict[str, Any]:
        """JSON-safe camelCase mapping, used as event data."""
        return self.model_dump(mode="json", by_alias=True)
