import logging
from typing import Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from passprotect.core.hashing import split_password_hash
from passprotect.core.settings import Setting, get_setting, get_timeout
from passprotect.models.breach import BreachRecord, RangeEntry
from passprotect.services.breach.base import BreachProvider
from passprotect.services.breach.errors import (
    BreachLookupError,
    MalformedResponse,
    NetworkFailure,
    UnexpectedStatus,
)

logger = logging.getLogger(__name__)

# Statuses meaning "nothing on record", not failures
NOT_FOUND_STATUSES = {204, 404}


class HIBPProvider(BreachProvider):
    """
    Have I Been Pwned provider.
    Every failure is converted to "no breach found" at this boundary.
    """

    def __init__(
        self,
        email_api: Optional[str] = None,
        password_api: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.email_api = (email_api or get_setting(Setting.HIBP_EMAIL_API)).rstrip("/")
        self.password_api = (password_api or get_setting(Setting.PWNED_PASSWORDS_API)).rstrip("/")
        self.timeout = timeout if timeout is not None else get_timeout()

        self.headers = {
            "user-agent": user_agent or get_setting(Setting.USER_AGENT),
        }

    def _get(self, url: str) -> Optional[requests.Response]:
        try:
            resp = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkFailure(str(exc)) from exc

        if resp.status_code in NOT_FOUND_STATUSES:
            logger.debug("lookup_not_found status=%s", resp.status_code)
            return None
        if resp.status_code != 200:
            raise UnexpectedStatus(resp.status_code)
        return resp

    # ==================================================
    # EMAIL BREACH CHECK
    # ==================================================
    def fetch_breaches(self, email: str) -> list[BreachRecord]:
        resp = self._get(f"{self.email_api}/{quote(email, safe='')}")
        if resp is None:
            return []

        try:
            payload = resp.json()
        except ValueError as exc:
            raise MalformedResponse("Breach response is not valid JSON") from exc

        if not isinstance(payload, list):
            raise MalformedResponse("Breach response is not a JSON array")

        try:
            return [BreachRecord.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise MalformedResponse("Breach record has unexpected shape") from exc

    def check_email(self, email: str, scope: str) -> list[BreachRecord]:
        try:
            breaches = self.fetch_breaches(email)
        except BreachLookupError as exc:
            logger.warning("email_lookup_failed scope=%s error=%s", scope, exc)
            return []

        # ---------- SCOPE + VERIFIED ONLY ----------
        matches = [b for b in breaches if b.domain == scope and b.is_verified]
        logger.debug(
            "email_lookup_completed scope=%s breaches=%s alertable=%s",
            scope,
            len(breaches),
            len(matches),
        )
        return matches

    # ==================================================
    # PASSWORD BREACH CHECK (K-ANONYMITY)
    # ==================================================
    def fetch_range(self, prefix: str) -> list[RangeEntry]:
        resp = self._get(f"{self.password_api}/{prefix}")
        if resp is None:
            return []

        entries = []
        for line in resp.text.splitlines():
            hash_suffix, sep, count = line.strip().partition(":")
            if not sep:
                continue
            try:
                entries.append(RangeEntry(hash_suffix=hash_suffix, count=int(count)))
            except (ValueError, ValidationError):
                logger.debug("range_line_skipped prefix=%s", prefix)
        return entries

    def check_password(self, password: str) -> list[RangeEntry]:
        prefix, suffix = split_password_hash(password)

        try:
            entries = self.fetch_range(prefix)
        except BreachLookupError as exc:
            logger.warning("password_lookup_failed error=%s", exc)
            return []

        return [e for e in entries if e.hash_suffix.upper().startswith(suffix)]
