"""Keyboard, text, scroll and mouse input sent to the page."""

from __future__ import annotations

import time
from typing import Iterable

from tvui.keys import button_number, modifier_mask, normalize_button, resolve_key
from tvui.session import KeyEvent, MouseEvent, PageSession, UIError, evaluate_value

DEFAULT_SCROLL_AMOUNT = 300
_TYPED_PREVIEW = 100
_DOUBLE_CLICK_PAUSE = 0.05

_CENTER_SCRIPT = """(function() {
    var el = document.querySelector('[data-name="pane-canvas"]') || document.querySelector('[class*="chart-container"]') || document.querySelector('canvas');
    if (!el) return { x: window.innerWidth / 2, y: window.innerHeight / 2 };
    var rect = el.getBoundingClientRect();
    return { x: rect.x + rect.width / 2, y: rect.y + rect.height / 2 };
})()"""

_SCROLL_DIRECTIONS = {
    "up": (0.0, -1.0),
    "down": (0.0, 1.0),
    "left": (-1.0, 0.0),
    "right": (1.0, 0.0),
}


def keyboard(session: PageSession, key: str, modifiers: Iterable[str] | None = None) -> dict:
    """Press and release ``key`` while holding the given modifiers."""
    modifier_list = list(modifiers) if modifiers is not None else None
    spec = resolve_key(key)
    session.dispatch_key_event(
        KeyEvent(
            "keyDown",
            key,
            spec.code,
            modifiers=modifier_mask(modifier_list),
            windows_virtual_key_code=spec.vk,
        )
    )
    session.dispatch_key_event(KeyEvent("keyUp", key, spec.code))
    return {"success": True, "key": key, "modifiers": modifier_list}


def type_text(session: PageSession, text: str) -> dict:
    """Insert ``text`` at the current focus point."""
    session.insert_text(text)
    return {"success": True, "typed": text[:_TYPED_PREVIEW], "length": len(text)}


def _as_float(value: object) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def scroll(session: PageSession, direction: str, amount: int = DEFAULT_SCROLL_AMOUNT) -> dict:
    """Scroll the chart by ``amount`` pixels; non-positive amounts use the default."""
    if amount <= 0:
        amount = DEFAULT_SCROLL_AMOUNT
    center = evaluate_value(session, _CENTER_SCRIPT)
    if not isinstance(center, dict):
        center = {}
    try:
        sign_x, sign_y = _SCROLL_DIRECTIONS[direction]
    except KeyError:
        raise UIError(
            f'invalid direction "{direction}"; use up, down, left, right'
        ) from None
    session.dispatch_mouse_event(
        MouseEvent(
            "mouseWheel",
            _as_float(center.get("x")),
            _as_float(center.get("y")),
            delta_x=sign_x * amount,
            delta_y=sign_y * amount,
        )
    )
    return {"success": True, "direction": direction, "amount": amount}


def mouse_click(
    session: PageSession,
    x: float,
    y: float,
    button: str | None = "left",
    double_click: bool = False,
) -> dict:
    """Click (or double click) at page coordinates ``x``, ``y``."""
    btn = normalize_button(button)
    pressed = button_number(btn)

    def press_and_release(click_count: int) -> None:
        session.dispatch_mouse_event(
            MouseEvent("mousePressed", x, y, button=btn, buttons=pressed, click_count=click_count)
        )
        session.dispatch_mouse_event(MouseEvent("mouseReleased", x, y, button=btn))

    session.dispatch_mouse_event(MouseEvent("mouseMoved", x, y))
    press_and_release(1)
    if double_click:
        time.sleep(_DOUBLE_CLICK_PAUSE)
        press_and_release(2)
    return {"success": True, "x": x, "y": y, "button": btn, "double_click": double_click}