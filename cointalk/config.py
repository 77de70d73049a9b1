from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cointalk.pool import Pool
from cointalk.server import Server, ServerConfig


class PoolSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    rpc_urls: str = Field(..., alias="WALLET_RPC_URLS")
    rpc_timeout: float = Field(10.0, alias="WALLET_RPC_TIMEOUT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    def urls(self) -> list[str]:
        return [url.strip() for url in self.rpc_urls.split(",") if url.strip()]


def load_settings() -> PoolSettings:
    return PoolSettings()


def build_servers(settings: PoolSettings) -> list[Server]:
    return [Server(ServerConfig.from_url(url, timeout=settings.rpc_timeout)) for url in settings.urls()]


def build_pool(settings: PoolSettings) -> Pool:
    pool = Pool()
    for server in build_servers(settings):
        pool.add(server)
    return pool
