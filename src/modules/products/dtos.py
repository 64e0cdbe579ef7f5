"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the RPC layer and the Service layer.
DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ProductIdDTO``: input for single-product look-ups and removal.
- ``ValidateProductsDTO``: input for batch validation.
- ``PaginationDTO``: page / limit for listings.
- ``ProductOutputDTO``: output with all product fields.
- ``PaginatedResult``: a page of items plus ``meta``.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Annotated, Generic, List, TypeVar

from django.conf import settings
from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product

T = TypeVar("T")

# Range of the BigAutoField primary key.
MAX_ID = 2**63 - 1

ProductId = Annotated[int, Field(gt=0, le=MAX_ID)]

# Same precision as Product.price, so what is returned is what is stored.
Price = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]
CENTS = Decimal("0.01")


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-empty string.
    - ``price`` is a non-negative Decimal that fits the column
      (10 digits, 2 decimal places).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Price

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v.quantize(CENTS)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional: only supplied fields will be updated.
    ``id`` is accepted so a whole RPC payload can be parsed at once, but
    the service never writes it.
    """

    model_config = ConfigDict(frozen=True)

    id: ProductId | None = None
    name: str | None = None
    price: Price | None = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip() if v is not None else v

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Decimal | None) -> Decimal | None:
        if v is not None and v < 0:
            raise ValueError("Price cannot be negative.")
        return v.quantize(CENTS) if v is not None else v

    def changes(self) -> dict:
        """Fields explicitly supplied by the caller, minus ``id``."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class ProductIdDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: ProductId


class ValidateProductsDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    ids: List[ProductId]


class PaginationDTO(BaseModel):
    """Page request: ``page`` is 1-based, ``limit`` is the page size."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, gt=0, le=MAX_ID)
    limit: int = Field(
        default_factory=lambda: settings.PRODUCTS_DEFAULT_PAGE_SIZE, gt=0
    )

    @field_validator("limit")
    @classmethod
    def limit_within_maximum(cls, v: int) -> int:
        maximum = settings.PRODUCTS_MAX_PAGE_SIZE
        if v > maximum:
            raise ValueError(f"Limit cannot exceed {maximum}.")
        return v

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product RPC responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal
    available: bool
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            available=product.available,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class PaginationMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    total: int
    last_page: int = Field(serialization_alias="lastPage")


class PaginatedResult(BaseModel, Generic[T]):
    """One page of ``data`` plus listing metadata."""

    model_config = ConfigDict(frozen=True)

    data: List[T]
    meta: PaginationMeta
