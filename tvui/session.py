"""A page session that evaluates scripts and dispatches input events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping

Transport = Callable[[str, dict], Mapping[str, Any]]


class UIError(Exception):
    """Raised when a page interaction cannot be carried out."""


@dataclass(frozen=True)
class KeyEvent:
    """A single keyboard event to dispatch to the page."""

    type: str
    key: str
    code: str
    modifiers: int = 0
    windows_virtual_key_code: int = 0

    def to_params(self) -> dict:
        params: dict[str, Any] = {"type": self.type, "key": self.key, "code": self.code}
        if self.modifiers:
            params["modifiers"] = self.modifiers
        if self.windows_virtual_key_code:
            params["windowsVirtualKeyCode"] = self.windows_virtual_key_code
        return params


@dataclass(frozen=True)
class MouseEvent:
    """A single mouse event to dispatch to the page."""

    type: str
    x: float
    y: float
    button: str = ""
    buttons: int = 0
    click_count: int = 0
    delta_x: float = 0.0
    delta_y: float = 0.0

    def to_params(self) -> dict:
        params: dict[str, Any] = {"type": self.type, "x": self.x, "y": self.y}
        if self.button:
            params["button"] = self.button
        if self.buttons:
            params["buttons"] = self.buttons
        if self.click_count:
            params["clickCount"] = self.click_count
        if self.type == "mouseWheel" or self.delta_x or self.delta_y:
            params["deltaX"] = self.delta_x
            params["deltaY"] = self.delta_y
        return params


def _describe_exception(details: Mapping[str, Any]) -> str:
    exception = details.get("exception") or {}
    return (
        exception.get("description")
        or details.get("text")
        or "JavaScript evaluation failed"
    )


class PageSession:
    """Talks to one page through a ``send(method, params) -> reply`` transport."""

    def __init__(self, send: Transport) -> None:
        self._send = send

    def evaluate(self, expression: str, await_promise: bool = False) -> Any:
        """Evaluate ``expression`` in the page and return its JSON value."""
        reply = self._send(
            "Runtime.evaluate",
            {
                "expression": expression,
                "returnByValue": True,
                "awaitPromise": bool(await_promise),
            },
        )
        details = reply.get("exceptionDetails")
        if details:
            raise UIError(_describe_exception(details))
        remote = reply.get("result") or {}
        return remote.get("value")

    def dispatch_key_event(self, event: KeyEvent) -> None:
        self._send("Input.dispatchKeyEvent", event.to_params())

    def dispatch_mouse_event(self, event: MouseEvent) -> None:
        self._send("Input.dispatchMouseEvent", event.to_params())

    def insert_text(self, text: str) -> None:
        self._send("Input.insertText", {"text": text})


def evaluate_value(session: PageSession, expression: str, await_promise: bool = False) -> Any:
    """Evaluate ``expression`` and return the decoded value."""
    return session.evaluate(expression, await_promise)


def _js_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def evaluate_object(session: PageSession, expression: str) -> dict:
    """Evaluate ``expression`` and require a JavaScript object as the result."""
    value = evaluate_value(session, expression)
    if not isinstance(value, dict):
        raise UIError(f"expected object, got {_js_type_name(value)}")
    return value