from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable, Iterable, Optional, Union

logger = logging.getLogger(__name__)

Handler = Callable[..., Union[None, Awaitable[Any]]]

PROTECTED_TYPES = {"email", "password"}


async def _call(handler: Handler, *args: Any) -> Any:
    result = handler(*args)
    if inspect.isawaitable(result):
        return await result
    return result


class InputElement:
    """A form input with a type, a value and change listeners."""

    def __init__(self, type: str, value: str = "", name: Optional[str] = None):
        self.type = type
        self.value = value
        self.name = name
        self._listeners: list[Handler] = []

    def add_change_listener(self, callback: Handler) -> None:
        self._listeners.append(callback)

    async def change(self, value: str) -> list[Any]:
        self.value = value
        return [await _call(listener, self) for listener in list(self._listeners)]

    def __repr__(self) -> str:
        return f"InputElement(type={self.type!r}, name={self.name!r})"


class Page:
    """
    The page a guard is attached to. Load handlers compose:
    registering one never replaces another.
    """

    def __init__(self, host: str, inputs: Optional[Iterable[InputElement]] = None):
        self.host = host
        self.inputs: list[InputElement] = list(inputs or [])
        self._load_handlers: list[Handler] = []

    def on_load(self, handler: Handler) -> Handler:
        self._load_handlers.append(handler)
        return handler

    async def load(self) -> None:
        for handler in list(self._load_handlers):
            await _call(handler, self)


def protect_inputs(page: Page, guard: Any) -> int:
    """Bind the guard to every email and password input. Returns the count bound."""
    bound = 0
    for element in page.inputs:
        if (element.type or "").lower() in PROTECTED_TYPES:
            element.add_change_listener(guard.handle_change)
            bound += 1
    logger.info("inputs_protected host=%s count=%s", page.host, bound)
    return bound
