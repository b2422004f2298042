from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from passprotect.core.formatting import format_number
from passprotect.models.breach import Alert, BreachRecord, RangeEntry

EMAIL_ALERT_TITLE = "Breach detected!"
PASSWORD_ALERT_TITLE = "Unsafe password detected!"
HIBP_HOME = "https://haveibeenpwned.com/"


@dataclass(frozen=True)
class AlertOptions:
    """
    Presenter configuration. Only the confirm button acknowledges;
    escape and overlay clicks must not dismiss the alert.
    """
    confirm_text: str = "I Understand"
    escape_closes: bool = False
    overlay_closes: bool = False


class AlertPresenter(ABC):

    options = AlertOptions()

    @abstractmethod
    def show(self, title: str, html_message: str, on_acknowledge: Callable[[], None]) -> None:
        """
        Display a modal. on_acknowledge is called once, and only when
        the user explicitly confirms.
        """
        pass


def build_email_alert(record: BreachRecord) -> Alert:
    # Descriptions come from the breach service as HTML
    message = "".join([
        f"<p>{record.description}</p>",
        "<p>The email you entered was one of the "
        f"<b>{format_number(record.pwn_count)}</b> that were compromised. "
        "If you haven't done so already, you should change your password.</p>",
    ])
    return Alert(title=EMAIL_ALERT_TITLE, html_message=message)


def build_password_alert(entry: RangeEntry) -> Alert:
    message = "".join([
        "<p>The password you just entered has been found in "
        f"<b>{format_number(entry.count)}</b> data breaches. "
        "<b>This password is not safe to use</b>.</p>",
        "<p>This means attackers can easily find this password online and "
        "will often try to access accounts with it.</p>",
        "<p>If you are currently using this password, please change it "
        "immediately to protect yourself. For more information, visit "
        f'<a href="{HIBP_HOME}" title="haveibeenpwned">Have I Been Pwned?</a></p>',
        "<p>This notice will not show again for the duration of this session "
        "to give you time to update this password.</p>",
    ])
    return Alert(title=PASSWORD_ALERT_TITLE, html_message=message)
