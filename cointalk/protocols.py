from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Queryable(Protocol):
    def execute(self, method: str, params: Sequence[Any] = ()) -> Any: ...
