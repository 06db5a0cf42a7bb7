"""Opening and closing chart panels and toggling fullscreen mode."""

from __future__ import annotations

import json
from string import Template
from typing import Mapping

from tvui.js import safe_string
from tvui.session import PageSession, UIError, evaluate_object

BOTTOM_PANELS = ("pine-editor", "strategy-tester")
VALID_PANELS = ("pine-editor", "strategy-tester", "watchlist", "alerts", "trading")

# Sidebar panels: (data-name of the toggle button, aria-label fallback).
_SIDEBAR_BUTTONS: Mapping[str, tuple[str, str]] = {
    "watchlist": ("base-watchlist-widget-button", "Watchlist"),
    "alerts": ("alerts-button", "Alerts"),
    "trading": ("trading-button", "Trading Panel"),
}

_BOTTOM_SCRIPT = Template(
    """(function () {
  var bar = window.TradingView && window.TradingView.bottomWidgetBar;
  if (!bar) {
    return { error: 'bottomWidgetBar not available' };
  }
  var panel = $panel;
  var widget = $widget;
  var action = $action;
  var area = document.querySelector('[class*="layout__area--bottom"]');
  var open = Boolean(area) && area.offsetHeight > 50;
  switch (panel) {
    case 'pine-editor':
      open = open && document.querySelector('.monaco-editor.pine-editor-monaco') !== null;
      break;
    case 'strategy-tester':
      var report = document.querySelector('[data-name="backtesting"]')
        || document.querySelector('[class*="strategyReport"]');
      open = open && Boolean(report && report.offsetParent);
      break;
  }
  if (action === 'open' || (action === 'toggle' && !open)) {
    if (panel === 'pine-editor' && typeof bar.activateScriptEditorTab === 'function') {
      bar.activateScriptEditorTab();
    } else if (typeof bar.showWidget === 'function') {
      bar.showWidget(widget);
    }
    return { was_open: open, performed: 'opened' };
  }
  if (action === 'close' || (action === 'toggle' && open)) {
    if (typeof bar.hideWidget === 'function') {
      bar.hideWidget(widget);
    }
    return { was_open: open, performed: 'closed' };
  }
  return { was_open: open, performed: 'none' };
})()"""
)

_SIDEBAR_SCRIPT = Template(
    """(function () {
  var action = $action;
  var button = document.querySelector('[data-name="' + $data_name + '"]')
    || document.querySelector('[aria-label="' + $aria_label + '"]');
  if (!button) {
    return { error: 'Button not found for panel: ' + $panel };
  }
  var classes = button.classList.toString();
  var active = button.getAttribute('aria-pressed') === 'true'
    || button.classList.contains('isActive')
    || classes.indexOf('active') >= 0
    || classes.indexOf('Active') >= 0;
  var sidebar = document.querySelector('[class*="layout__area--right"]');
  var open = active && Boolean(sidebar) && sidebar.offsetWidth > 50;
  var performed;
  if (action === 'toggle' || (action === 'open' && !open) || (action === 'close' && open)) {
    button.click();
    performed = open ? 'closed' : 'opened';
  } else {
    performed = open ? 'already_open' : 'already_closed';
  }
  return { was_open: open, performed: performed };
})()"""
)

_FULLSCREEN_SCRIPT = """(function () {
  var toggle = document.querySelector('[data-name="header-toolbar-fullscreen"]');
  if (toggle) {
    toggle.click();
  }
  return { found: Boolean(toggle) };
})()"""


def _fill(template: Template, **values: str) -> str:
    """Substitute placeholders with JavaScript string literals."""
    return template.substitute({key: safe_string(value) for key, value in values.items()})


def _panel_script(panel: str, action: str) -> str:
    if panel in BOTTOM_PANELS:
        widget = "backtesting" if panel == "strategy-tester" else panel
        return _fill(_BOTTOM_SCRIPT, panel=panel, widget=widget, action=action)
    try:
        data_name, aria_label = _SIDEBAR_BUTTONS[panel]
    except KeyError:
        raise UIError(
            f"unknown panel {json.dumps(panel, ensure_ascii=False)}; "
            f"valid: {', '.join(VALID_PANELS)}"
        ) from None
    return _fill(
        _SIDEBAR_SCRIPT,
        data_name=data_name,
        aria_label=aria_label,
        action=action,
        panel=panel,
    )


def open_panel(session: PageSession, panel: str, action: str) -> dict:
    """Open, close or toggle one of the chart panels."""
    outcome = evaluate_object(session, _panel_script(panel, action))
    message = outcome.get("error")
    if isinstance(message, str):
        raise UIError(message)
    return {
        "success": True,
        "panel": panel,
        "action": action,
        "was_open": outcome.get("was_open"),
        "performed": outcome.get("performed"),
    }


def fullscreen(session: PageSession) -> dict:
    """Toggle fullscreen mode with the header toolbar button."""
    outcome = evaluate_object(session, _FULLSCREEN_SCRIPT)
    if not outcome.get("found"):
        raise UIError("fullscreen button not found")
    return {"success": True, "action": "fullscreen_toggled"}