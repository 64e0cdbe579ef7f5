"""Product repository interface.

Extends ``IRepository[Product]`` with the batch look-up required by
product validation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list_by_ids(self, ids: Iterable[int]) -> List[Product]:
        """Return the available products whose id is in ``ids``."""
