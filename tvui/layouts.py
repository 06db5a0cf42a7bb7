"""Listing saved chart layouts and switching between them."""

from __future__ import annotations

import time
from string import Template
from typing import Any

from tvui.js import safe_string
from tvui.session import PageSession, UIError, evaluate_value

_SWITCH_PAUSE = 0.5
_DISMISS_PAUSE = 1.0

_LIST_SCRIPT = """new Promise(function (resolve) {
  var SOURCE = 'internal_api';
  function fail(message) {
    resolve({ layouts: [], source: SOURCE, error: message });
  }
  function describe(chart) {
    return {
      id: chart.id || chart.chartId || null,
      name: chart.name || chart.title || 'Untitled',
      symbol: chart.symbol || null,
      resolution: chart.resolution || null,
      modified: chart.timestamp || chart.modified || null
    };
  }
  try {
    window.TradingViewApi.getSavedCharts(function (charts) {
      if (!Array.isArray(charts)) {
        fail('getSavedCharts returned no data');
        return;
      }
      resolve({ layouts: charts.map(describe), source: SOURCE });
    });
    setTimeout(function () { fail('getSavedCharts timed out'); }, 5000);
  } catch (e) {
    fail(e.message);
  }
})"""

_SWITCH_SCRIPT = Template(
    r"""new Promise(function (resolve) {
  var SOURCE = 'internal_api';
  function fail(message) {
    resolve({ success: false, error: message, source: SOURCE });
  }
  function title(chart) {
    return chart.name || chart.title || '';
  }
  try {
    var target = $target;
    var wanted = target.toLowerCase();
    if (/^\d+$$/.test(target)) {
      window.TradingViewApi.loadChartFromServer(target);
      resolve({ success: true, method: 'loadChartFromServer', id: target, source: SOURCE });
      return;
    }
    window.TradingViewApi.getSavedCharts(function (charts) {
      if (!Array.isArray(charts)) {
        fail('getSavedCharts returned no data');
        return;
      }
      var match = charts.find(function (chart) {
          var label = title(chart);
          return label === target || label.toLowerCase() === wanted;
        })
        || charts.find(function (chart) {
          return title(chart).toLowerCase().indexOf(wanted) !== -1;
        });
      if (!match) {
        fail('Layout "' + target + '" not found.');
        return;
      }
      var chartId = match.id || match.chartId;
      window.TradingViewApi.loadChartFromServer(chartId);
      resolve({
        success: true,
        method: 'loadChartFromServer',
        id: chartId,
        name: match.name || match.title,
        source: SOURCE
      });
    });
    setTimeout(function () { fail('getSavedCharts timed out'); }, 5000);
  } catch (e) {
    fail(e.message);
  }
})"""
)

_DISMISS_SCRIPT = """(function () {
  var pattern = /open anyway|don't save|discard/i;
  var button = Array.prototype.find.call(document.querySelectorAll('button'), function (candidate) {
    return pattern.test(candidate.textContent.trim());
  });
  if (!button) {
    return false;
  }
  button.click();
  return true;
})()"""


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def layout_list(session: PageSession) -> dict:
    """Return the saved chart layouts known to the page."""
    reply = evaluate_value(session, _LIST_SCRIPT, await_promise=True)
    if reply is None:
        reply = {}
    if not isinstance(reply, dict):
        raise UIError("parse layout list: expected object")
    layouts = reply.get("layouts")
    if layouts is not None and not isinstance(layouts, list):
        raise UIError("parse layout list: layouts is not an array")
    result = {
        "success": True,
        "layout_count": len(layouts) if layouts is not None else 0,
        "source": _text(reply.get("source")),
        "layouts": layouts,
    }
    error = _text(reply.get("error"))
    if error:
        result["error"] = error
    return result


def _dismiss_unsaved_dialog(session: PageSession) -> bool:
    try:
        dismissed = evaluate_value(session, _DISMISS_SCRIPT)
    except (UIError, OSError):
        return False
    return dismissed is True


def layout_switch(session: PageSession, name: str) -> dict:
    """Switch to the saved layout with the given name or numeric id."""
    script = _SWITCH_SCRIPT.substitute(target=safe_string(name))
    reply = evaluate_value(session, script, await_promise=True)
    if reply is not None and not isinstance(reply, dict):
        raise UIError("parse layout switch: expected object")
    reply = reply or {}
    if reply.get("success") is not True:
        raise UIError(_text(reply.get("error")) or "unknown error switching layout")

    time.sleep(_SWITCH_PAUSE)
    dismissed = _dismiss_unsaved_dialog(session)
    if dismissed:
        time.sleep(_DISMISS_PAUSE)

    return {
        "success": True,
        "layout": _text(reply.get("name")) or name,
        "layout_id": reply.get("id"),
        "source": reply.get("source"),
        "action": "switched",
        "unsaved_dialog_dismissed": dismissed,
    }