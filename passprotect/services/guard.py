from __future__ import annotations

import asyncio
import logging
import weakref
from enum import Enum
from typing import Any, Callable, Optional

from passprotect.core.hashing import email_cache_key, password_cache_key
from passprotect.models.breach import Alert
from passprotect.services.alerts import (
    AlertPresenter,
    build_email_alert,
    build_password_alert,
)
from passprotect.services.breach.base import BreachProvider
from passprotect.services.suppression import SuppressionCache, Tier

logger = logging.getLogger(__name__)


class InputKind(str, Enum):
    EMAIL = "email"
    PASSWORD = "password"

    @classmethod
    def from_input_type(cls, input_type: Optional[str]) -> Optional["InputKind"]:
        if not input_type:
            return None
        try:
            return cls(input_type.strip().lower())
        except ValueError:
            return None


# Email breach status rarely changes, so it is suppressed persistently.
# An unsafe password should nag again next session.
TIER_FOR_KIND: dict[InputKind, Tier] = {
    InputKind.EMAIL: Tier.PERSISTENT,
    InputKind.PASSWORD: Tier.SESSION,
}


class InputGuard:
    """
    Runs the breach check for one input change event:
    cache key -> suppression check -> lookup -> alert -> suppress on acknowledge.
    """

    def __init__(
        self,
        provider: BreachProvider,
        cache: SuppressionCache,
        presenter: AlertPresenter,
        scope_resolver: Callable[[], str],
        discard_stale: bool = True,
    ):
        self.provider = provider
        self.cache = cache
        self.presenter = presenter
        self.scope_resolver = scope_resolver
        self.discard_stale = discard_stale
        self._tokens: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()

    def _next_token(self, element: Any) -> int:
        token = self._tokens.get(element, 0) + 1
        self._tokens[element] = token
        return token

    def _is_current(self, element: Any, token: int) -> bool:
        return self._tokens.get(element) == token

    def cache_key(self, kind: InputKind, value: str, scope: str) -> str:
        if kind == InputKind.EMAIL:
            return email_cache_key(value, scope)
        return password_cache_key(value, scope)

    async def _lookup(self, kind: InputKind, value: str, scope: str) -> list[Alert]:
        loop = asyncio.get_running_loop()

        if kind == InputKind.EMAIL:
            records = await loop.run_in_executor(None, self.provider.check_email, value, scope)
            return [build_email_alert(r) for r in records]

        entries = await loop.run_in_executor(None, self.provider.check_password, value)
        return [build_password_alert(e) for e in entries]

    def _present(self, alert: Alert, key: str, tier: Tier) -> None:
        acknowledged = False

        def on_acknowledge() -> None:
            nonlocal acknowledged
            if acknowledged:
                return
            acknowledged = True
            self.cache.suppress(key, tier)

        self.presenter.show(alert.title, alert.html_message, on_acknowledge)

    async def handle_change(self, element: Any) -> list[Alert]:
        kind = InputKind.from_input_type(getattr(element, "type", None))
        if kind is None:
            return []

        value = getattr(element, "value", "") or ""
        if not value:
            return []

        token = self._next_token(element)
        scope = self.scope_resolver()
        key = self.cache_key(kind, value, scope)
        tier = TIER_FOR_KIND[kind]

        # ---------- ALREADY ACKNOWLEDGED ----------
        if self.cache.is_suppressed(key):
            logger.debug("check_suppressed kind=%s scope=%s", kind.value, scope)
            return []

        alerts = await self._lookup(kind, value, scope)

        if self.discard_stale and not self._is_current(element, token):
            logger.debug("stale_response_discarded kind=%s scope=%s", kind.value, scope)
            return []

        if alerts:
            logger.info(
                "breach_alert kind=%s scope=%s alerts=%s",
                kind.value,
                scope,
                len(alerts),
            )

        for alert in alerts:
            self._present(alert, key, tier)

        return alerts
