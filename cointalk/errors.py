from __future__ import annotations

from typing import Any


class ServerError(Exception):
    pass


class NoServersAvailable(ServerError):
    def __init__(self) -> None:
        super().__init__("No Server instances available in the pool.")


class RpcError(ServerError):
    def __init__(self, code: int | None, message: str, data: Any = None) -> None:
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data
