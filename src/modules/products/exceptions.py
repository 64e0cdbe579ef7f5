"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The RPC dispatcher catches these and translates them into tagged
error responses carrying ``status`` and ``message``.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Iterable, List


class ProductNotFound(Exception):
    """The requested product does not exist or is no longer available."""

    status = HTTPStatus.NOT_FOUND

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product with id {product_id} not found")

    @property
    def message(self) -> str:
        return str(self)


class ProductValidationFailed(Exception):
    """Some of the ids passed to batch validation are not available products.

    The message stays generic; ``missing_ids`` is extra detail only.
    """

    status = HTTPStatus.BAD_REQUEST

    def __init__(self, missing_ids: Iterable[int] = ()) -> None:
        self.missing_ids: List[int] = sorted(missing_ids)
        super().__init__("Some products were not found")

    @property
    def message(self) -> str:
        return str(self)

    @property
    def details(self) -> dict:
        return {"missing_ids": self.missing_ids}
