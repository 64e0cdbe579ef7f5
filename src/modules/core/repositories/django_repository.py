"""Connection handling shared by Django ORM repositories."""

from __future__ import annotations

import structlog
from django.db import connections

from modules.core.exceptions import StoreNotConnected

logger = structlog.get_logger(__name__)


class DjangoStoreMixin:
    """Binds a repository to one Django database alias.

    ``connect()`` eagerly opens the connection so that a misconfigured
    ``DATABASE_URL`` surfaces at start-up rather than on the first query.
    ``close()`` only retires the handle; the underlying connection is
    left to Django so ``CONN_MAX_AGE`` reuse keeps working.
    """

    def __init__(self, using: str = "default") -> None:
        self._using = using
        self._connected = False

    @property
    def using(self) -> str:
        return self._using

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self) -> None:
        connections[self._using].ensure_connection()
        self._connected = True
        logger.info("store.connected", alias=self._using)

    def close(self) -> None:
        if not self._connected:
            return
        self._connected = False
        logger.info("store.closed", alias=self._using)

    def _ensure_connected(self) -> None:
        if not self._connected:
            raise StoreNotConnected("Product store is not connected")
