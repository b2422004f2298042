import json
from unittest.mock import MagicMock

import pytest
import requests

from passprotect.core.settings import Setting
from passprotect.services.alerts import AlertPresenter
from passprotect.services.storage import MemoryStore
from passprotect.services.suppression import SuppressionCache, Tier


class RecordingPresenter(AlertPresenter):
    """Records shown alerts; acknowledges immediately when auto_ack is set."""

    def __init__(self, auto_ack: bool = False):
        self.auto_ack = auto_ack
        self.shown = []

    def show(self, title, html_message, on_acknowledge):
        self.shown.append((title, html_message, on_acknowledge))
        if self.auto_ack:
            on_acknowledge()


def make_response(status_code=200, body=None, text=None):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    if body is not None:
        resp.text = json.dumps(body)
        resp.json.return_value = body
    else:
        resp.text = text or ""
        resp.json.side_effect = ValueError("not json")
    return resp


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for setting in Setting:
        monkeypatch.delenv(setting.value, raising=False)


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def cache():
    return SuppressionCache({
        Tier.SESSION: MemoryStore(),
        Tier.PERSISTENT: MemoryStore(),
    })
