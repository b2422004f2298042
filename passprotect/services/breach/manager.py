from passprotect.core.settings import Setting, get_setting, get_timeout
from passprotect.services.breach.base import BreachProvider
from passprotect.services.breach.hibp_provider import HIBPProvider


def get_breach_provider() -> BreachProvider:
    """
    Returns a new provider configured from settings.
    """
    return HIBPProvider(
        email_api=get_setting(Setting.HIBP_EMAIL_API),
        password_api=get_setting(Setting.PWNED_PASSWORDS_API),
        user_agent=get_setting(Setting.USER_AGENT),
        timeout=get_timeout(),
    )
