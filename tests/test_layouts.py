from unittest import mock

import pytest

from tvui.js import safe_string
from tvui.layouts import layout_list, layout_switch
from tvui.session import PageSession, UIError


class FakePage:
    """Transport whose evaluate replies come from a queue; exceptions become script errors."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = []

    def __call__(self, method, params):
        self.calls.append((method, params))
        if method != "Runtime.evaluate":
            return {}
        value = self.values.pop(0)
        if isinstance(value, Exception):
            return {"exceptionDetails": {"text": str(value)}}
        return {"result": {"value": value}}


def test_layout_list_counts_layouts():
    layouts = [{"id": 1, "name": "Main"}, {"id": 2, "name": "Gold"}]
    page = FakePage({"layouts": layouts, "source": "internal_api"})
    result = layout_list(PageSession(page))
    assert result["success"] is True
    assert result["layout_count"] == len(layouts)
    assert result["layouts"] == layouts
    assert result["source"] == "internal_api"
    assert "error" not in result
    assert page.calls[0][1]["awaitPromise"] is True


def test_layout_list_passes_error_through():
    page = FakePage({"layouts": [], "source": "internal_api", "error": "getSavedCharts timed out"})
    result = layout_list(PageSession(page))
    assert result["error"] == "getSavedCharts timed out"
    assert result["layout_count"] == 0


def test_layout_list_null_reply_is_empty():
    result = layout_list(PageSession(FakePage(None)))
    assert result["layouts"] is None
    assert result["layout_count"] == 0
    assert result["source"] == ""


def test_layout_list_rejects_non_object():
    with pytest.raises(UIError, match="parse layout list"):
        layout_list(PageSession(FakePage([1, 2])))


@mock.patch("tvui.layouts.time.sleep")
def test_layout_switch_success(sleep):
    page = FakePage(
        {"success": True, "id": 42, "name": "Main", "source": "internal_api"},
        False,
    )
    result = layout_switch(PageSession(page), "main")
    assert result == {
        "success": True,
        "layout": "Main",
        "layout_id": 42,
        "source": "internal_api",
        "action": "switched",
        "unsaved_dialog_dismissed": False,
    }
    assert sleep.call_count == 1
    assert page.calls[0][1]["awaitPromise"] is True
    assert safe_string("main") in page.calls[0][1]["expression"]


@mock.patch("tvui.layouts.time.sleep")
def test_layout_switch_uses_requested_name_when_missing(sleep):
    page = FakePage({"success": True, "id": "7", "source": "internal_api"}, False)
    result = layout_switch(PageSession(page), "7")
    assert result["layout"] == "7"
    assert result["layout_id"] == "7"


@mock.patch("tvui.layouts.time.sleep")
def test_layout_switch_dismisses_dialog(sleep):
    page = FakePage({"success": True, "id": 3, "name": "Gold"}, True)
    result = layout_switch(PageSession(page), "Gold")
    assert result["unsaved_dialog_dismissed"] is True
    assert sleep.call_count == 2


@mock.patch("tvui.layouts.time.sleep")
def test_layout_switch_ignores_dismiss_failure(sleep):
    page = FakePage({"success": True, "id": 3, "name": "Gold"}, Exception("boom"))
    result = layout_switch(PageSession(page), "Gold")
    assert result["unsaved_dialog_dismissed"] is False


@mock.patch("tvui.layouts.time.sleep")
def test_layout_switch_failure_raises_message(sleep):
    page = FakePage({"success": False, "error": 'Layout "x" not found.'})
    with pytest.raises(UIError, match="not found"):
        layout_switch(PageSession(page), "x")
    assert sleep.call_count == 0
    assert len(page.calls) == 1


@mock.patch("tvui.layouts.time.sleep")
def test_layout_switch_failure_without_message(sleep):
    with pytest.raises(UIError, match="unknown error switching layout"):
        layout_switch(PageSession(FakePage({"success": False})), "x")


@mock.patch("tvui.layouts.time.sleep")
def test_layout_switch_null_reply(sleep):
    with pytest.raises(UIError, match="unknown error switching layout"):
        layout_switch(PageSession(FakePage(None)), "x")