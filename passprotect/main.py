import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from passprotect.core.scope import current_scope
from passprotect.core.settings import Setting, get_setting
from passprotect.dom.page import Page, protect_inputs
from passprotect.services.alerts import AlertPresenter
from passprotect.services.breach.base import BreachProvider
from passprotect.services.breach.manager import get_breach_provider
from passprotect.services.guard import InputGuard
from passprotect.services.suppression import SuppressionCache, build_suppression_cache

BASE_DIR = Path(__file__).resolve().parent.parent

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=str(get_setting(Setting.LOG_LEVEL)).upper(),
        format="%(asctime)s | %(levelname)s | %(message)s"
    )


def build_guard(
    page: Page,
    presenter: AlertPresenter,
    provider: Optional[BreachProvider] = None,
    cache: Optional[SuppressionCache] = None,
) -> InputGuard:
    return InputGuard(
        provider=provider or get_breach_provider(),
        cache=cache or build_suppression_cache(),
        presenter=presenter,
        scope_resolver=lambda: current_scope(page),
        discard_stale=get_setting(Setting.DISCARD_STALE_RESPONSES),
    )


def install(
    page: Page,
    presenter: AlertPresenter,
    provider: Optional[BreachProvider] = None,
    cache: Optional[SuppressionCache] = None,
) -> InputGuard:
    """
    Protect a page's inputs once it has loaded.
    Any load handlers registered earlier still run.
    """
    load_dotenv(BASE_DIR / ".env")
    configure_logging()

    guard = build_guard(page, presenter, provider=provider, cache=cache)
    page.on_load(lambda loaded: protect_inputs(loaded, guard))
    logger.info("passprotect_installed host=%s", page.host)
    return guard
