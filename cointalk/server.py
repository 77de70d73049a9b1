from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from cointalk.errors import RpcError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 9332


@dataclass(frozen=True)
class ServerConfig:
    user: str
    password: str
    host: str = "localhost"
    port: int = DEFAULT_PORT
    timeout: float = 10.0
    scheme: str = "http"

    @property
    def url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}/"

    @classmethod
    def from_url(cls, url: str, timeout: float = 10.0) -> ServerConfig:
        parsed = httpx.URL(url)
        if not parsed.host:
            raise ValueError(f"Invalid wallet RPC url {url!r}")
        return cls(
            user=parsed.username,
            password=parsed.password or "",
            host=parsed.host,
            port=parsed.port or DEFAULT_PORT,
            timeout=timeout,
            scheme=parsed.scheme or "http",
        )


def _is_rpc_error(response: httpx.Response) -> bool:
    # bitcoind-style wallets send JSON-RPC errors with 4xx/5xx statuses and a body
    try:
        body = response.json()
    except ValueError:
        return False
    return isinstance(body, dict) and body.get("error") is not None


class Server:
    """JSON-RPC 1.0 client for a single wallet daemon."""

    def __init__(self, config: ServerConfig, transport: httpx.BaseTransport | None = None) -> None:
        self.config = config
        self._ids = itertools.count(1)
        self._client = httpx.Client(
            auth=(config.user, config.password),
            timeout=config.timeout,
            transport=transport,
        )

    def execute(self, method: str, params: Sequence[Any] = ()) -> Any:
        payload = {
            "jsonrpc": "1.0",
            "id": next(self._ids),
            "method": method,
            "params": list(params),
        }
        logger.debug("rpc %s -> %s:%s id=%s", method, self.config.host, self.config.port, payload["id"])
        response = self._client.post(self.config.url, json=payload)
        if response.is_error and not _is_rpc_error(response):
            response.raise_for_status()
        body = response.json()
        if not isinstance(body, dict):
            raise RpcError(None, f"Unexpected response body: {body!r}")
        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                raise RpcError(error.get("code"), str(error.get("message", "")), error.get("data"))
            raise RpcError(None, str(error))
        return body.get("result")

    query = execute

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Server({self.config.host}:{self.config.port})"
