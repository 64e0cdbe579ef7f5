"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Repositories are explicit store handles: they must be opened with
``connect()`` before any query and released with ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract for soft-deletable entities.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).  Every read skips unavailable rows.
    """

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @abstractmethod
    def connect(self) -> None:
        """Open the underlying store connection."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying store connection."""

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """``True`` between ``connect()`` and ``close()``."""

    def __enter__(self) -> IRepository[T]:
        self.connect()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an available entity by its primary key."""

    @abstractmethod
    def count(self) -> int:
        """Count available entities."""

    @abstractmethod
    def page(self, offset: int, limit: int) -> List[T]:
        """Fetch a window of available entities in a stable order."""

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @abstractmethod
    def create(self, fields: Dict[str, Any]) -> T:
        """Insert a new entity."""

    @abstractmethod
    def update(self, id: int, fields: Dict[str, Any]) -> Optional[T]:
        """Update an available entity; ``None`` when no available row matched."""

    @abstractmethod
    def deactivate(self, id: int) -> Optional[T]:
        """Soft-delete an available entity; ``None`` when no available row matched."""
