"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Only available products can be read, updated, removed or validated.
- ``id`` is immutable: any ``id`` in an update payload is ignored.
- Removal is a soft delete (``available = False``).
- Batch validation compares the number of unique requested ids with
  the number of available products found.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterable, List

import structlog

from modules.products.dtos import PaginatedResult, PaginationMeta
from modules.products.exceptions import ProductNotFound, ProductValidationFailed

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, PaginationDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    The repository must already be connected; the service never opens
    or closes it.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreateProductDTO) -> Product:
        """Insert a new product; ``available`` defaults to ``True``."""
        product = self._repo.create(dto.model_dump())
        logger.info("product.created", product_id=product.id)
        return product

    def update(self, id: int, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an available product.

        Raises:
            ProductNotFound: if no available product has this id.
        """
        changes = dto.changes()
        if not changes:
            return self.find_one(id)

        product = self._repo.update(id, changes)
        if product is None:
            logger.warning("product.not_found", product_id=id, operation="update")
            raise ProductNotFound(id)

        logger.info("product.updated", product_id=id)
        return product

    def remove(self, id: int) -> Product:
        """Soft-delete an available product and return it.

        Raises:
            ProductNotFound: if no available product has this id.
        """
        product = self._repo.deactivate(id)
        if product is None:
            logger.warning("product.not_found", product_id=id, operation="remove")
            raise ProductNotFound(id)

        logger.info("product.removed", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self, pagination: PaginationDTO) -> PaginatedResult[Product]:
        """Return one page of available products plus listing metadata.

        A page past the end yields empty ``data``, not an error.
        """
        total = self._repo.count()
        last_page = math.ceil(total / pagination.limit)
        if pagination.offset >= total:
            data = []
        else:
            data = self._repo.page(pagination.offset, pagination.limit)
        return PaginatedResult(
            data=data,
            meta=PaginationMeta(
                page=pagination.page,
                total=total,
                last_page=last_page,
            ),
        )

    def find_one(self, id: int) -> Product:
        """Retrieve a single available product by ID.

        Raises:
            ProductNotFound: if no available product has this id.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=id, operation="find_one")
            raise ProductNotFound(id)
        return product

    def validate_products(self, ids: Iterable[int]) -> List[Product]:
        """Check that every requested id is an available product.

        Duplicates collapse; the returned list has one product per unique
        id, in store order.

        Raises:
            ProductValidationFailed: if any unique id is missing or unavailable.
        """
        unique_ids = set(ids)
        products = self._repo.list_by_ids(unique_ids)

        if len(products) != len(unique_ids):
            missing = unique_ids - {product.id for product in products}
            logger.warning(
                "products.validation_failed",
                requested=len(unique_ids),
                found=len(products),
                missing_ids=sorted(missing),
            )
            raise ProductValidationFailed(missing)

        return products
