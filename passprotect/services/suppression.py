from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

from redis.exceptions import RedisError

from passprotect.core.settings import (
    BACKEND_REDIS,
    Setting,
    get_setting,
    normalize_backend,
)
from passprotect.services.redis_store import RedisStore
from passprotect.services.storage import MemoryStore, StorageBackend

logger = logging.getLogger(__name__)

SUPPRESSED = "true"


class Tier(str, Enum):
    SESSION = "session"
    PERSISTENT = "persistent"


class SuppressionCache:
    """
    "Already warned" markers per cache key.

    Tiers are read in the order of the mapping passed in, so the
    lookup order is part of the configuration.
    """

    def __init__(self, tiers: Mapping[Tier, StorageBackend]):
        if not tiers:
            raise ValueError("SuppressionCache needs at least one tier")
        self.tiers: dict[Tier, StorageBackend] = dict(tiers)

    def is_suppressed(self, key: str) -> bool:
        for tier, backend in self.tiers.items():
            try:
                value = backend.get(key)
            except RedisError as exc:
                logger.warning("suppression_read_failed tier=%s error=%s", tier.value, exc)
                continue
            if value == SUPPRESSED:
                return True
        return False

    def suppress(self, key: str, tier: Tier) -> None:
        backend = self.tiers[tier]
        try:
            backend.set(key, SUPPRESSED)
        except RedisError as exc:
            logger.warning("suppression_write_failed tier=%s error=%s", tier.value, exc)
            return
        logger.info("suppression_recorded tier=%s", tier.value)


def build_suppression_cache(backend: str | None = None) -> SuppressionCache:
    """
    Session tier first, then persistent tier.
    memory: both tiers in process. redis: both tiers in Redis, the
    session tier expiring after SESSION_TTL_SECONDS.
    """
    selected = normalize_backend(backend or get_setting(Setting.SUPPRESSION_BACKEND))

    if selected == BACKEND_REDIS:
        return SuppressionCache({
            Tier.SESSION: RedisStore(
                "suppress:session",
                ttl_seconds=get_setting(Setting.SESSION_TTL_SECONDS),
            ),
            Tier.PERSISTENT: RedisStore("suppress:persistent"),
        })

    return SuppressionCache({
        Tier.SESSION: MemoryStore(),
        Tier.PERSISTENT: MemoryStore(),
    })
