import pytest

from tvui.session import (
    KeyEvent,
    MouseEvent,
    PageSession,
    UIError,
    evaluate_object,
    evaluate_value,
)


class RecordingTransport:
    def __init__(self, replies=None):
        self.calls = []
        self.replies = list(replies or [])

    def __call__(self, method, params):
        self.calls.append((method, params))
        return self.replies.pop(0) if self.replies else {}


def test_evaluate_sends_expression_and_returns_value():
    transport = RecordingTransport([{"result": {"type": "object", "value": {"found": True}}}])
    session = PageSession(transport)
    value = session.evaluate("1 + 1", False)
    assert value == {"found": True}
    method, params = transport.calls[0]
    assert method == "Runtime.evaluate"
    assert params["expression"] == "1 + 1"
    assert params["returnByValue"] is True
    assert params["awaitPromise"] is False


def test_evaluate_await_flag_is_forwarded():
    transport = RecordingTransport([{"result": {"value": [1, 2]}}])
    session = PageSession(transport)
    assert session.evaluate("p()", True) == [1, 2]
    assert transport.calls[0][1]["awaitPromise"] is True


def test_evaluate_undefined_result_is_none():
    transport = RecordingTransport([{"result": {"type": "undefined"}}])
    assert PageSession(transport).evaluate("void 0", False) is None


def test_evaluate_exception_raises_ui_error_with_description():
    reply = {
        "result": {"type": "object"},
        "exceptionDetails": {"text": "Uncaught", "exception": {"description": "ReferenceError: foo"}},
    }
    session = PageSession(RecordingTransport([reply]))
    with pytest.raises(UIError, match="ReferenceError: foo"):
        session.evaluate("foo", False)


def test_evaluate_exception_falls_back_to_text():
    reply = {"exceptionDetails": {"text": "Uncaught boom"}}
    session = PageSession(RecordingTransport([reply]))
    with pytest.raises(UIError, match="Uncaught boom"):
        session.evaluate("x", False)


def test_evaluate_value_delegates_to_session():
    transport = RecordingTransport([{"result": {"value": "abc"}}])
    session = PageSession(transport)
    assert evaluate_value(session, "'abc'", False) == "abc"
    assert transport.calls[0][1]["expression"] == "'abc'"


def test_evaluate_object_returns_mapping():
    transport = RecordingTransport([{"result": {"value": {"was_open": False}}}])
    assert evaluate_object(PageSession(transport), "x") == {"was_open": False}


@pytest.mark.parametrize("value", [None, [1], "text", 3, True])
def test_evaluate_object_rejects_non_objects(value):
    transport = RecordingTransport([{"result": {"value": value}}])
    with pytest.raises(UIError, match="expected object"):
        evaluate_object(PageSession(transport), "x")


def test_dispatch_key_event_forwards_params():
    transport = RecordingTransport()
    session = PageSession(transport)
    event = KeyEvent(type="keyDown", key="Enter", code="Enter", modifiers=2, windows_virtual_key_code=13)
    session.dispatch_key_event(event)
    method, params = transport.calls[0]
    assert method == "Input.dispatchKeyEvent"
    assert params == event.to_params()
    assert params["key"] == "Enter"
    assert params["modifiers"] == 2
    assert params["windowsVirtualKeyCode"] == 13


def test_key_event_omits_zero_fields():
    params = KeyEvent(type="keyUp", key="a", code="KeyA").to_params()
    assert "modifiers" not in params
    assert "windowsVirtualKeyCode" not in params
    assert params["type"] == "keyUp"


def test_dispatch_mouse_event_forwards_params():
    transport = RecordingTransport()
    session = PageSession(transport)
    event = MouseEvent(type="mousePressed", x=10.5, y=20.0, button="right", buttons=2, click_count=1)
    session.dispatch_mouse_event(event)
    method, params = transport.calls[0]
    assert method == "Input.dispatchMouseEvent"
    assert params["x"] == 10.5 and params["y"] == 20.0
    assert params["button"] == "right"
    assert params["buttons"] == 2
    assert params["clickCount"] == 1
    assert "deltaX" not in params


def test_mouse_wheel_carries_deltas():
    params = MouseEvent(type="mouseWheel", x=1.0, y=2.0, delta_y=-300.0).to_params()
    assert params["deltaY"] == -300.0
    assert params["deltaX"] == 0.0
    assert "button" not in params


def test_insert_text_sends_text():
    transport = RecordingTransport()
    PageSession(transport).insert_text("hello world")
    method, params = transport.calls[0]
    assert method == "Input.insertText"
    assert params["text"] == "hello world"


def test_transport_errors_propagate():
    def failing(method, params):
        raise ConnectionError("closed")

    with pytest.raises(ConnectionError):
        PageSession(failing).insert_text("x")