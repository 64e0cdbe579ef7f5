"""Store-level exceptions shared by every repository.

Django ``DatabaseError``s raised by the ORM are never wrapped; these
classes only cover failures detected by our own store handles.
"""

from __future__ import annotations

from http import HTTPStatus


class StoreFailure(Exception):
    """Base class for errors raised by a store handle."""

    status = HTTPStatus.SERVICE_UNAVAILABLE

    @property
    def message(self) -> str:
        return str(self)


class StoreNotConnected(StoreFailure):
    """A query was issued on a store handle before ``connect()``."""
