"""Base abstract models for the catalog.

Provides:
- ``BaseModel``: integer primary key + created_at / updated_at timestamps.
- ``AvailabilityModel``: Extends BaseModel with soft-delete via ``available``.

Design decisions:
- A single ``available`` flag is the liveness marker (no ``deleted_at``
  or tombstone).  Unavailable rows stay in the table for history.
- ``objects`` manager returns ALL records (unfiltered).  Use
  ``.available()`` explicitly to exclude soft-deleted rows.
- Nothing here flips ``available`` back to ``True``.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with store-assigned integer PK and timestamps."""

    id = models.BigAutoField(primary_key=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Soft delete infrastructure
# ---------------------------------------------------------------------------


class AvailabilityQuerySet(models.QuerySet):
    """QuerySet with availability helpers."""

    def available(self) -> AvailabilityQuerySet:
        """Return only live records."""
        return self.filter(available=True)

    def unavailable(self) -> AvailabilityQuerySet:
        """Return only soft-deleted records."""
        return self.filter(available=False)

    def update_available(self, **fields) -> int:
        """Conditional update restricted to live rows.

        Returns the number of rows matched, so callers can tell a missing
        (or already removed) row from a successful write.
        """
        fields.setdefault("updated_at", timezone.now())
        return self.available().update(**fields)

    def deactivate(self) -> int:
        """Bulk soft-delete: flips ``available`` on every live row."""
        return self.update_available(available=False)


class AvailabilityManager(models.Manager):
    """Manager that exposes ``.available()`` / ``.unavailable()``."""

    def get_queryset(self) -> AvailabilityQuerySet:
        return AvailabilityQuerySet(self.model, using=self._db)

    def available(self) -> AvailabilityQuerySet:
        return self.get_queryset().available()

    def unavailable(self) -> AvailabilityQuerySet:
        return self.get_queryset().unavailable()


class AvailabilityModel(BaseModel):
    """Abstract model with soft-delete via the ``available`` flag.

    - ``objects`` is **unfiltered** (returns all rows).
    - Use ``Model.objects.available()`` to exclude soft-deleted rows.
    """

    available = models.BooleanField(default=True, db_index=True)

    objects = AvailabilityManager()

    class Meta:
        abstract = True
