"""
Dependency checkers used by the readiness probe.

A checker exposes a single coroutine, ``ping()``, which returns when the
dependency answers and raises when it does not. The readiness probe runs it
inside the request task, so request cancellation reaches the in-flight call.
"""
import logging
from typing import Optional, Protocol
import redis.asyncio as redis
from lucid_gateway.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class DependencyChecker(Protocol):
    async def ping(self) -> None:
        ...


class RedisDependencyChecker:
    """Redis-backed checker; one client shared by all readiness calls."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings
        self._redis: Optional[redis.Redis] = None

    async def connect(self):
        """Create the Redis client and make sure the server answers."""
        cfg = self._settings
        self._redis = redis.Redis(
            host=cfg.REDIS_HOST,
            port=cfg.REDIS_PORT,
            db=cfg.REDIS_DB,
            password=cfg.REDIS_PASSWORD,
            socket_timeout=cfg.REDIS_SOCKET_TIMEOUT_SECONDS,
            socket_connect_timeout=cfg.REDIS_SOCKET_TIMEOUT_SECONDS,
        )
        await self._redis.ping()
        logger.info(
            "Redis dependency checker connected",
            extra={"host": cfg.REDIS_HOST, "port": cfg.REDIS_PORT, "db": cfg.REDIS_DB},
        )

    async def disconnect(self):
        """Close the Redis client."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None

    async def ping(self) -> None:
        if not self._redis:
            raise RuntimeError("RedisDependencyChecker not connected")
        await self._redis.ping()

    @property
    def connected(self) -> bool:
        return self._redis is not None
