"""The tool registry exposing page interactions as named, schema-described tools."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from tvui import elements, interaction, layouts, panels
from tvui.session import PageSession, UIError

Handler = Callable[[PageSession, dict], dict]


@dataclass(frozen=True)
class ToolDef:
    """A named tool with its input schema and the handler that runs it."""

    name: str
    description: str
    handler: Handler
    schema: dict = field(default_factory=lambda: {"type": "object"})


class ToolRegistry:
    """Tools kept by name, in registration order."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolDef] = {}

    def register(self, tool: ToolDef) -> None:
        self._tools[tool.name] = tool

    def list(self) -> list[ToolDef]:
        return list(self._tools.values())

    def get(self, name: str) -> ToolDef:
        try:
            return self._tools[name]
        except KeyError:
            raise KeyError(f"unknown tool: {name}") from None

    def call(self, name: str, session: PageSession, arguments: Any = None) -> dict:
        """Run a tool; failures come back as ``{"success": False, "error": ...}``."""
        tool = self.get(name)
        try:
            return tool.handler(session, _decode(arguments))
        except (UIError, OSError) as exc:
            return {"success": False, "error": str(exc)}


def _decode(arguments: Any) -> dict:
    if isinstance(arguments, (bytes, bytearray)):
        arguments = arguments.decode("utf-8")
    if isinstance(arguments, str):
        try:
            arguments = json.loads(arguments)
        except json.JSONDecodeError as exc:
            raise UIError(f"invalid arguments: {exc}") from None
    if arguments is None:
        return {}
    if not isinstance(arguments, Mapping):
        raise UIError("arguments must be a JSON object")
    return dict(arguments)


def _string(args: dict, key: str) -> str:
    value = args.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise UIError(f"argument {key!r} must be a string")
    return value


def _number(args: dict, key: str) -> float:
    value = args.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise UIError(f"argument {key!r} must be a number")
    return float(value)


def _integer(args: dict, key: str) -> int:
    value = args.get(key)
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise UIError(f"argument {key!r} must be an integer")


def _boolean(args: dict, key: str) -> bool:
    value = args.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise UIError(f"argument {key!r} must be a boolean")
    return value


def _strings(args: dict, key: str) -> list[str] | None:
    value = args.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise UIError(f"argument {key!r} must be an array of strings")
    return value


def _schema(required: tuple[str, ...] = (), **properties: tuple[str, str]) -> dict:
    schema: dict[str, Any] = {"type": "object"}
    if properties:
        schema["properties"] = {
            name: {"type": kind, "description": text}
            for name, (kind, text) in properties.items()
        }
    if required:
        schema["required"] = list(required)
    return schema


_SELECTOR_HELP = "Selector strategy: aria-label, data-name, text, class-contains"
_PANEL_HELP = "Panel name: pine-editor, strategy-tester, watchlist, alerts, trading"


def _tool_defs() -> list[ToolDef]:
    return [
        ToolDef(
            "ui_click",
            "Click a UI element by aria-label, data-name, text content, or class substring",
            lambda s, a: elements.click(s, _string(a, "by"), _string(a, "value")),
            _schema(
                ("by", "value"),
                by=("string", _SELECTOR_HELP),
                value=("string", "Value to match against the chosen selector strategy"),
            ),
        ),
        ToolDef(
            "ui_open_panel",
            "Open, close, or toggle TradingView panels "
            "(pine-editor, strategy-tester, watchlist, alerts, trading)",
            lambda s, a: panels.open_panel(s, _string(a, "panel"), _string(a, "action")),
            _schema(
                ("panel", "action"),
                panel=("string", _PANEL_HELP),
                action=("string", "Action: open, close, toggle"),
            ),
        ),
        ToolDef(
            "ui_fullscreen",
            "Toggle TradingView fullscreen mode",
            lambda s, a: panels.fullscreen(s),
        ),
        ToolDef(
            "layout_list",
            "List saved chart layouts",
            lambda s, a: layouts.layout_list(s),
        ),
        ToolDef(
            "layout_switch",
            "Switch to a saved chart layout by name or ID",
            lambda s, a: layouts.layout_switch(s, _string(a, "name")),
            _schema(("name",), name=("string", "Name or ID of the layout to switch to")),
        ),
        ToolDef(
            "ui_keyboard",
            "Press keyboard keys or shortcuts (e.g., Enter, Escape, Alt+S, Ctrl+Z)",
            lambda s, a: interaction.keyboard(s, _string(a, "key"), _strings(a, "modifiers")),
            _schema(
                ("key",),
                key=("string", "Key to press (e.g., Enter, Escape, Tab, a, ArrowUp)"),
                modifiers=("array", "Modifier keys to hold: ctrl, alt, shift, meta"),
            ),
        ),
        ToolDef(
            "ui_type_text",
            "Type text into the currently focused input/textarea element",
            lambda s, a: interaction.type_text(s, _string(a, "text")),
            _schema(("text",), text=("string", "Text to type into the focused element")),
        ),
        ToolDef(
            "ui_hover",
            "Hover over a UI element by aria-label, data-name, or text content",
            lambda s, a: elements.hover(s, _string(a, "by"), _string(a, "value")),
            _schema(
                ("by", "value"),
                by=("string", _SELECTOR_HELP),
                value=("string", "Value to match"),
            ),
        ),
        ToolDef(
            "ui_scroll",
            "Scroll the chart or page up/down/left/right",
            lambda s, a: interaction.scroll(s, _string(a, "direction"), _integer(a, "amount")),
            _schema(
                ("direction",),
                direction=("string", "Scroll direction: up, down, left, right"),
                amount=("number", "Scroll amount in pixels (default 300)"),
            ),
        ),
        ToolDef(
            "ui_mouse_click",
            "Click at specific x,y coordinates on the TradingView window",
            lambda s, a: interaction.mouse_click(
                s,
                _number(a, "x"),
                _number(a, "y"),
                _string(a, "button"),
                _boolean(a, "double_click"),
            ),
            _schema(
                ("x", "y"),
                x=("number", "X coordinate (pixels from left)"),
                y=("number", "Y coordinate (pixels from top)"),
                button=("string", "Mouse button: left, right, middle (default left)"),
                double_click=("boolean", "Double click (default false)"),
            ),
        ),
        ToolDef(
            "ui_find_element",
            "Find UI elements by text, aria-label, or CSS selector and return their positions",
            lambda s, a: elements.find_element(s, _string(a, "query"), _string(a, "strategy")),
            _schema(
                ("query",),
                query=("string", "Text content, aria-label value, or CSS selector to search for"),
                strategy=("string", "Search strategy: text, aria-label, css (default: text)"),
            ),
        ),
        ToolDef(
            "ui_evaluate",
            "Execute JavaScript code in the TradingView page context for advanced automation",
            lambda s, a: elements.evaluate(s, _string(a, "expression")),
            _schema(
                ("expression",),
                expression=(
                    "string",
                    "JavaScript expression to evaluate in the page context. "
                    "Wrap in IIFE for complex logic.",
                ),
            ),
        ),
    ]


def register_tools(registry: ToolRegistry) -> None:
    """Register the twelve UI and layout tools."""
    for tool in _tool_defs():
        registry.register(tool)