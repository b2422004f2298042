from __future__ import annotations

import os
from enum import Enum
from typing import Any


class Setting(str, Enum):
    HIBP_EMAIL_API = "HIBP_EMAIL_API"
    PWNED_PASSWORDS_API = "PWNED_PASSWORDS_API"
    USER_AGENT = "USER_AGENT"
    HTTP_TIMEOUT_SECONDS = "HTTP_TIMEOUT_SECONDS"
    SUPPRESSION_BACKEND = "SUPPRESSION_BACKEND"
    REDIS_URL = "REDIS_URL"
    SESSION_TTL_SECONDS = "SESSION_TTL_SECONDS"
    DISCARD_STALE_RESPONSES = "DISCARD_STALE_RESPONSES"
    LOG_LEVEL = "LOG_LEVEL"


BACKEND_MEMORY = "memory"
BACKEND_REDIS = "redis"


DEFAULTS: dict[Setting, Any] = {
    Setting.HIBP_EMAIL_API: "https://haveibeenpwned.com/api/v2/breachedaccount",
    Setting.PWNED_PASSWORDS_API: "https://api.pwnedpasswords.com/range",
    Setting.USER_AGENT: "passprotect",
    Setting.HTTP_TIMEOUT_SECONDS: 8.0,
    Setting.SUPPRESSION_BACKEND: BACKEND_MEMORY,
    Setting.REDIS_URL: None,
    Setting.SESSION_TTL_SECONDS: 86400,
    Setting.DISCARD_STALE_RESPONSES: True,
    Setting.LOG_LEVEL: "INFO",
}


_TRUTHY = {"1", "true", "yes", "on"}


def _coerce(raw: str, default: Any) -> Any:
    if isinstance(default, bool):
        return raw.strip().lower() in _TRUTHY
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, float):
        return float(raw)
    return raw.strip()


def get_setting(setting: Setting | str) -> Any:
    """
    Resolve a setting from the environment, falling back to DEFAULTS.
    Values are coerced to the type of their default.
    """
    resolved = Setting(setting) if isinstance(setting, str) else setting
    default = DEFAULTS[resolved]
    raw = os.getenv(resolved.value)
    if raw is None or raw.strip() == "":
        return default
    return _coerce(raw, default)


def get_timeout() -> float | None:
    timeout = get_setting(Setting.HTTP_TIMEOUT_SECONDS)
    if not timeout:
        return None
    return timeout


def normalize_backend(raw_backend: str | None) -> str:
    if not raw_backend:
        return BACKEND_MEMORY
    normalized = str(raw_backend).strip().lower()
    if normalized == BACKEND_REDIS:
        return BACKEND_REDIS
    return BACKEND_MEMORY
