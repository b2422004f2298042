import asyncio
from unittest.mock import MagicMock

from passprotect.dom.page import InputElement, Page, protect_inputs
from passprotect.main import build_guard, install
from passprotect.models.breach import RangeEntry
from passprotect.services.alerts import AlertOptions
from passprotect.services.breach.base import BreachProvider
from passprotect.services.guard import InputGuard


def test_load_handlers_compose():
    page = Page("example.com")
    calls = []

    page.on_load(lambda p: calls.append("first"))

    async def second(p):
        calls.append("second")

    page.on_load(second)
    asyncio.run(page.load())

    assert calls == ["first", "second"]


def test_protect_inputs_binds_email_and_password_only():
    inputs = [
        InputElement("email"),
        InputElement("password"),
        InputElement("text"),
        InputElement("checkbox"),
    ]
    page = Page("example.com", inputs)
    guard = MagicMock()

    assert protect_inputs(page, guard) == 2
    assert inputs[0]._listeners == [guard.handle_change]
    assert inputs[1]._listeners == [guard.handle_change]
    assert inputs[2]._listeners == []


def test_change_sets_value_and_runs_listeners():
    element = InputElement("email")
    seen = []
    element.add_change_listener(lambda el: seen.append(el.value))

    asyncio.run(element.change("me@example.com"))
    assert element.value == "me@example.com"
    assert seen == ["me@example.com"]


def test_install_keeps_existing_load_handlers(cache, presenter):
    provider = MagicMock(spec=BreachProvider)
    provider.check_password.return_value = [RangeEntry(hash_suffix="X", count=3)]

    password = InputElement("password")
    page = Page("accounts.example.com", [password])
    earlier = []
    page.on_load(lambda p: earlier.append(p.host))

    guard = install(page, presenter, provider=provider, cache=cache)

    async def scenario():
        await page.load()
        return await password.change("hunter2")

    results = asyncio.run(scenario())

    assert isinstance(guard, InputGuard)
    assert earlier == ["accounts.example.com"]
    assert len(results) == 1 and len(results[0]) == 1
    assert len(presenter.shown) == 1


def test_build_guard_resolves_scope_from_page(cache, presenter, monkeypatch):
    monkeypatch.setenv("DISCARD_STALE_RESPONSES", "false")
    page = Page("login.example.org")
    guard = build_guard(page, presenter, provider=MagicMock(spec=BreachProvider), cache=cache)

    assert guard.scope_resolver() == "example.org"
    assert guard.discard_stale is False
    page.host = "shop.example.net"
    assert guard.scope_resolver() == "example.net"


def test_presenter_options_disable_implicit_dismissal(presenter):
    assert presenter.options == AlertOptions()
    assert presenter.options.confirm_text == "I Understand"
    assert presenter.options.escape_closes is False
    assert presenter.options.overlay_closes is False
