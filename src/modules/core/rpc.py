"""Message-pattern RPC dispatch with tagged results.

Each command name maps to one handler.  Handlers return plain data or
raise; ``RpcDispatcher.dispatch`` is the single place where exceptions
become an ``RpcResult`` with ``ok=False`` and a structured ``RpcError``.
Only exception types listed in ``handled`` (plus payload validation
errors) are translated; anything else propagates to the transport.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Callable, Dict, Optional, Tuple, Type

import structlog
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

logger = structlog.get_logger(__name__)

Handler = Callable[[Any, Dict[str, Any]], Any]


class RpcError(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: int
    message: str
    details: Optional[Dict[str, Any]] = None


class RpcResult(BaseModel):
    """Tagged response envelope: either ``data`` or ``error``."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    data: Any = None
    error: Optional[RpcError] = None

    @classmethod
    def success(cls, data: Any) -> RpcResult:
        return cls(ok=True, data=data)

    @classmethod
    def failure(
        cls, status: int, message: str, details: Optional[Dict[str, Any]] = None
    ) -> RpcResult:
        return cls(
            ok=False,
            error=RpcError(status=int(status), message=message, details=details),
        )

    @property
    def http_status(self) -> int:
        return HTTPStatus.OK if self.ok else self.error.status

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class RpcDispatcher:
    """Registry of command handlers.

    Usage::

        dispatcher = RpcDispatcher(handled=(ProductNotFound,))

        @dispatcher.command("find_one_product")
        def find_one(service, payload): ...

        result = dispatcher.dispatch(service, "find_one_product", {"id": 1})
    """

    def __init__(self, handled: Tuple[Type[Exception], ...] = ()) -> None:
        self._handlers: Dict[str, Handler] = {}
        self._handled = handled

    @property
    def commands(self) -> list[str]:
        return sorted(self._handlers)

    def command(self, name: str) -> Callable[[Handler], Handler]:
        def register(handler: Handler) -> Handler:
            if name in self._handlers:
                raise ValueError(f"Command '{name}' is already registered.")
            self._handlers[name] = handler
            return handler

        return register

    def dispatch(self, target: Any, cmd: str, payload: Any) -> RpcResult:
        handler = self._handlers.get(cmd)
        if handler is None:
            logger.warning("rpc.unknown_command", cmd=cmd)
            return RpcResult.failure(
                HTTPStatus.BAD_REQUEST, f"Unknown command '{cmd}'"
            )

        log = logger.bind(cmd=cmd)
        try:
            data = handler(target, payload if payload is not None else {})
        except PydanticValidationError as exc:
            log.warning("rpc.failed", status=HTTPStatus.BAD_REQUEST)
            return RpcResult.failure(
                HTTPStatus.BAD_REQUEST,
                "Invalid payload",
                {
                    "errors": exc.errors(
                        include_url=False, include_context=False, include_input=False
                    )
                },
            )
        except self._handled as exc:
            log.warning("rpc.failed", status=int(exc.status), error=str(exc))
            return RpcResult.failure(
                exc.status, exc.message, getattr(exc, "details", None)
            )

        log.info("rpc.dispatched")
        return RpcResult.success(data)
