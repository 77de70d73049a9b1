from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cointalk.errors import NoServersAvailable
from cointalk.protocols import Queryable


class Pool:
    """Round-robin dispatcher over Queryable members.

    A pool is itself Queryable: each query goes to exactly one member, picked
    in insertion order. Members are never removed, and the pool does not close
    them. Rotation order is deterministic only under non-concurrent mutation.
    """

    def __init__(self) -> None:
        self._servers: list[Queryable] = []
        self._count = 0
        self._index = 0

    def add(self, server: Queryable) -> Pool:
        self._servers.append(server)
        self._count += 1
        return self

    def get(self) -> Queryable | None:
        if self._count == 0:
            return None
        server = self._servers[self._index]
        self._index += 1
        if self._index > self._count - 1:
            self._index = 0
        return server

    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def query(self, method: str, params: Sequence[Any] = ()) -> Any:
        server = self.get()
        if server is None:
            raise NoServersAvailable()
        return server.execute(method, params)

    def execute(self, method: str, params: Sequence[Any] = ()) -> Any:
        return self.query(method, params)
