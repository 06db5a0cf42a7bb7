"""Locating, clicking and hovering page elements, and running page scripts."""

from __future__ import annotations

import json
from typing import Any

from tvui.js import safe_string
from tvui.session import MouseEvent, PageSession, UIError, evaluate_object, evaluate_value

_MAX_RESULTS = 20


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _click_script(by: str, value: str) -> str:
    return f"""(function() {{
        var by = {safe_string(by)};
        var value = {safe_string(value)};
        var el = null;
        if (by === 'aria-label') el = document.querySelector('[aria-label="' + value.replace(/"/g, '\\\\"') + '"]');
        else if (by === 'data-name') el = document.querySelector('[data-name="' + value.replace(/"/g, '\\\\"') + '"]');
        else if (by === 'text') {{
            var candidates = document.querySelectorAll('button, a, [role="button"], [role="menuitem"], [role="tab"]');
            for (var i = 0; i < candidates.length; i++) {{
                var text = candidates[i].textContent.trim();
                if (text === value || text.toLowerCase() === value.toLowerCase()) {{ el = candidates[i]; break; }}
            }}
        }} else if (by === 'class-contains') el = document.querySelector('[class*="' + value.replace(/"/g, '\\\\"') + '"]');
        if (!el) return {{ found: false }};
        el.click();
        return {{ found: true, tag: el.tagName.toLowerCase(), text: (el.textContent || '').trim().substring(0, 80), aria_label: el.getAttribute('aria-label') || null, data_name: el.getAttribute('data-name') || null }};
    }})()"""


def _hover_script(by: str, value: str) -> str:
    return f"""(function() {{
        var by = {safe_string(by)};
        var value = {safe_string(value)};
        var el = null;
        if (by === 'aria-label') {{
            el = document.querySelector('[aria-label="' + value.replace(/"/g, '\\\\"') + '"]');
            if (!el) el = document.querySelector('[aria-label*="' + value.replace(/"/g, '\\\\"') + '"]');
        }} else if (by === 'data-name') el = document.querySelector('[data-name="' + value.replace(/"/g, '\\\\"') + '"]');
        else if (by === 'text') {{
            var candidates = document.querySelectorAll('button, a, [role="button"], [role="menuitem"], [role="tab"], span, div');
            for (var i = 0; i < candidates.length; i++) {{ var text = candidates[i].textContent.trim(); if (text === value || text.toLowerCase() === value.toLowerCase()) {{ el = candidates[i]; break; }} }}
        }} else if (by === 'class-contains') el = document.querySelector('[class*="' + value.replace(/"/g, '\\\\"') + '"]');
        if (!el) return null;
        var rect = el.getBoundingClientRect();
        return {{ x: rect.x + rect.width / 2, y: rect.y + rect.height / 2, tag: el.tagName.toLowerCase() }};
    }})()"""


_ELEMENT_INFO = (
    "{ tag: EL.tagName.toLowerCase(), text: TEXT, "
    "aria_label: EL.getAttribute('aria-label') || null, "
    "data_name: EL.getAttribute('data-name') || null, "
    "x: rect.x, y: rect.y, width: rect.width, height: rect.height, "
    "visible: EL.offsetParent !== null }"
)


def _element_info(el: str, text: str) -> str:
    return _ELEMENT_INFO.replace("EL", el).replace("TEXT", text)


def _find_script(query: str, strategy: str) -> str:
    listed = _element_info("els[i]", "(els[i].textContent || '').trim().substring(0, 80)")
    matched = _element_info("all[i]", "text.substring(0, 80)")
    return f"""(function() {{
        var query = {safe_string(query)};
        var strategy = {safe_string(strategy)};
        var results = [];
        if (strategy === 'css') {{
            var els = document.querySelectorAll(query);
            for (var i = 0; i < Math.min(els.length, {_MAX_RESULTS}); i++) {{
                var rect = els[i].getBoundingClientRect();
                results.push({listed});
            }}
        }} else if (strategy === 'aria-label') {{
            var els = document.querySelectorAll('[aria-label*="' + query.replace(/"/g, '\\\\"') + '"]');
            for (var i = 0; i < Math.min(els.length, {_MAX_RESULTS}); i++) {{
                var rect = els[i].getBoundingClientRect();
                results.push({listed});
            }}
        }} else {{
            var all = document.querySelectorAll('button, a, [role="button"], [role="menuitem"], [role="tab"], input, select, label, span, div, h1, h2, h3, h4');
            for (var i = 0; i < all.length; i++) {{
                var text = all[i].textContent.trim();
                if (text.toLowerCase().indexOf(query.toLowerCase()) !== -1 && text.length < 200) {{
                    var rect = all[i].getBoundingClientRect();
                    if (rect.width > 0 && rect.height > 0) {{
                        results.push({matched});
                        if (results.length >= {_MAX_RESULTS}) break;
                    }}
                }}
            }}
        }}
        return results;
    }})()"""


def click(session: PageSession, by: str, value: str) -> dict:
    """Click the element selected by aria-label, data-name, text or class-contains."""
    found = evaluate_object(session, _click_script(by, value))
    if not found.get("found"):
        raise UIError(f"no matching element found for {by}={_quote(value)}")
    return {"success": True, "clicked": found}


def _coordinate(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return 0.0


def hover(session: PageSession, by: str, value: str) -> dict:
    """Move the mouse over the centre of the selected element."""
    coords = evaluate_value(session, _hover_script(by, value))
    if not isinstance(coords, dict):
        raise UIError(f"element not found for {by}={_quote(value)}")
    x = _coordinate(coords.get("x"))
    y = _coordinate(coords.get("y"))
    if x == 0 and y == 0:
        raise UIError(f"element not found for {by}={_quote(value)}")
    tag = coords.get("tag")
    session.dispatch_mouse_event(MouseEvent("mouseMoved", x, y))
    return {
        "success": True,
        "hovered": {
            "by": by,
            "value": value,
            "tag": tag if isinstance(tag, str) else "",
            "x": x,
            "y": y,
        },
    }


def find_element(session: PageSession, query: str, strategy: str | None = "text") -> dict:
    """Find up to 20 elements by text, aria-label or CSS selector."""
    strategy = strategy or "text"
    found = evaluate_value(session, _find_script(query, strategy))
    elements = found if isinstance(found, list) else None
    return {
        "success": True,
        "query": query,
        "strategy": strategy,
        "count": len(elements) if elements is not None else 0,
        "elements": elements,
    }


def evaluate(session: PageSession, expression: str) -> dict:
    """Run arbitrary JavaScript in the page and return its value."""
    return {"success": True, "result": evaluate_value(session, expression)}


def evaluate_await(session: PageSession, expression: str) -> dict:
    """Run JavaScript in the page, waiting for a returned promise to settle."""
    return {"success": True, "result": evaluate_value(session, expression, await_promise=True)}