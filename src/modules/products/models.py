"""Product model with availability-based soft delete.

Business rules implemented:
- ``id`` is store-assigned and never changes after creation.
- ``available`` is ``True`` on creation and flipped to ``False`` by
  removal (inherited from AvailabilityModel).
- Unavailable products stay in the table for history.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import AvailabilityModel


class Product(AvailabilityModel):
    """Catalog product.

    Rows are ordered by ``id`` so pagination windows are stable across
    requests (insertion order).
    """

    name = models.CharField(max_length=255)
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = "products"
        ordering = ["id"]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
