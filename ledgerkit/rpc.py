"""Request dispatch for the external RPC interface."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Optional

Handler = Callable[[dict[str, str]], str]


@dataclass
class RpcRequest:
    """A call of ``method`` with string parameters."""

    method: str
    params: dict[str, str] = field(default_factory=dict)
    id: int = 0


@dataclass
class RpcResponse:
    """The result or error of a request, tagged with its id."""

    result: Optional[str]
    error: Optional[str]
    id: int


def _get_block(params: Mapping[str, str]) -> str:
    return f"block_{params.get('height', '0')}"


def _get_balance(params: Mapping[str, str]) -> str:
    return f"balance_{params.get('address', '0x0')}"


class RpcServer:
    """Dispatches requests to registered handlers; a handler reports failure by raising."""

    def __init__(self, port: int) -> None:
        self.port = port
        self.methods: dict[str, Handler] = {
            "get_block": _get_block,
            "get_balance": _get_balance,
            "send_tx": lambda _params: "tx_sent",
        }

    def handle_request(self, request: RpcRequest) -> RpcResponse:
        """Run the handler for ``request`` and wrap its outcome."""
        handler = self.methods.get(request.method)
        if handler is None:
            return RpcResponse(None, "method not found", request.id)
        try:
            result = handler(dict(request.params))
        except Exception as exc:  # a failing handler becomes an error response
            return RpcResponse(None, str(exc), request.id)
        return RpcResponse(result, None, request.id)

    def register_method(self, method: str, handler: Handler) -> None:
        """Register or replace the handler for ``method``."""
        self.methods[method] = handler