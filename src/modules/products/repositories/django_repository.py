"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into a domain error.

Mutations are conditional on ``available = true`` inside the UPDATE
itself, so a row removed concurrently is never written.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from django.db import transaction

from modules.core.repositories.django_repository import DjangoStoreMixin
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(DjangoStoreMixin, IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _products(self):
        self._ensure_connected()
        return Product.objects.using(self.using)

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve an available product by primary key."""
        return self._products().available().filter(id=id).first()

    def count(self) -> int:
        return self._products().available().count()

    def page(self, offset: int, limit: int) -> List[Product]:
        """Window over available products, ordered by ``id``."""
        queryset = self._products().available().order_by("id")
        return list(queryset[offset : offset + limit])

    def list_by_ids(self, ids: Iterable[int]) -> List[Product]:
        return list(
            self._products().available().filter(id__in=list(ids)).order_by("id")
        )

    def create(self, fields: Dict[str, Any]) -> Product:
        product = Product(**fields)
        product.save(using=self.using)
        return product

    def update(self, id: int, fields: Dict[str, Any]) -> Optional[Product]:
        """Apply ``fields`` to an available product.

        Returns ``None`` if no available product has this id.
        """
        with transaction.atomic(using=self.using):
            matched = self._products().filter(id=id).update_available(**fields)
            if not matched:
                return None
            product = self._products().get(id=id)
        return product

    def deactivate(self, id: int) -> Optional[Product]:
        """Soft-delete an available product by ID.

        Returns ``None`` if the product is missing or already unavailable.
        """
        with transaction.atomic(using=self.using):
            matched = self._products().filter(id=id).deactivate()
            if not matched:
                return None
            product = self._products().get(id=id)
        return product
