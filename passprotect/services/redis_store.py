from __future__ import annotations

from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError

from passprotect.core.settings import Setting, get_setting
from passprotect.services.storage import StorageBackend

KEY_PREFIX = "passprotect"

_redis_client: Redis | None = None


def _require_redis_url() -> str:
    redis_url = get_setting(Setting.REDIS_URL)
    if not redis_url:
        raise RuntimeError("REDIS_URL not set")
    return redis_url


def get_redis() -> Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = Redis.from_url(
            _require_redis_url(),
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
    return _redis_client


def build_key(namespace: str, key: str) -> str:
    # Keys are already digests, so they are stored as-is
    return f"{KEY_PREFIX}:{namespace}:{key}"


class RedisStore(StorageBackend):
    """
    Redis-backed tier. With ttl_seconds set, markers expire, which
    bounds a "session" tier shared across processes.
    """

    def __init__(
        self,
        namespace: str,
        ttl_seconds: int | None = None,
        client: Redis | None = None,
    ):
        self.namespace = namespace
        self.ttl_seconds = ttl_seconds
        self._client = client

    @property
    def client(self) -> Redis:
        if self._client is None:
            try:
                self._client = get_redis()
            except (RuntimeError, ValueError) as exc:
                raise RedisConnectionError(f"Redis unavailable: {exc}") from exc
        return self._client

    def get(self, key: str) -> str | None:
        value = self.client.get(build_key(self.namespace, key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self.client.set(build_key(self.namespace, key), value, ex=self.ttl_seconds or None)
