# tvui

`tvui` drives the TradingView Desktop chart page from Python. It builds
JavaScript for the page, evaluates it through a page session, and sends
keyboard, mouse and text-input events. On top of that it offers ready-made
operations: clicking, hovering and finding elements, pressing keys, typing,
scrolling, clicking at coordinates, opening panels, toggling fullscreen,
and listing and switching saved layouts. All of them are also available as
named tools that take JSON-style arguments.

It has no dependencies outside the standard library.

## The page session

Every operation takes a `tvui.session.PageSession` as its first argument.
A session is built from a transport: a callable
`send(method, params) -> reply` that delivers a DevTools-protocol command
to the page and returns the reply as a mapping. The session sends these
commands:

- `Runtime.evaluate` with `expression`, `returnByValue: true` and
  `awaitPromise`. The session returns `reply["result"]["value"]`. If the
  reply carries `exceptionDetails`, it raises `UIError` with the exception
  description (or the details' text).
- `Input.dispatchKeyEvent` with the parameters of a `KeyEvent`.
- `Input.dispatchMouseEvent` with the parameters of a `MouseEvent`.
- `Input.insertText` with `{"text": ...}`.

`KeyEvent` and `MouseEvent` are frozen dataclasses. Their `to_params()`
method gives the protocol parameters, leaving out zero or empty fields. A
mouse wheel event always carries `deltaX` and `deltaY`.

Two helpers wrap evaluation:

- `evaluate_value(session, expression, await_promise=False)` returns the
  decoded value.
- `evaluate_object(session, expression)` requires a JavaScript object and
  raises `UIError` (for example "expected object, got null") otherwise.

```python
from tvui.session import PageSession

def send(method, params):
    # deliver the command to the chart page and return its reply
    ...

session = PageSession(send)
```

## Operations

The operations return a dictionary with `"success": True` and the details
of what was done. When the page does not hold what they look for, they
raise `tvui.session.UIError`. Errors from the transport itself pass
through unchanged.

| Module | Functions |
| --- | --- |
| `tvui.elements` | `click`, `hover`, `find_element`, `evaluate`, `evaluate_await` |
| `tvui.interaction` | `keyboard`, `type_text`, `scroll`, `mouse_click` |
| `tvui.panels` | `open_panel`, `fullscreen` |
| `tvui.layouts` | `layout_list`, `layout_switch` |

### Elements

- `click(session, by, value)` selects an element by `aria-label`,
  `data-name`, `text` or `class-contains` and clicks it. It returns the
  element's tag, its text (first 80 characters), its aria-label and its
  data-name under `"clicked"`.
- `hover(session, by, value)` selects an element the same way and moves the
  mouse to the centre of it. With `aria-label` it also falls back to a
  substring match. With `text` it searches a wider set of elements.
- `find_element(session, query, strategy="text")` searches by `text`
  (case-insensitive substring, visible elements only), by `aria-label`
  (substring) or by `css` selector. It returns at most 20 matches with
  their position, size and visibility, plus a `count`.
- `evaluate(session, expression)` runs arbitrary JavaScript and returns its
  value under `"result"`. `evaluate_await` does the same but first waits
  for a returned promise to settle.

### Input

- `keyboard(session, key, modifiers=None)` sends a key-down and a key-up.
  Named keys (`Enter`, `Escape`, `Tab`, `Backspace`, `Delete`, the arrows,
  `Space`, `Home`, `End`, `PageUp`, `PageDown`, `F1`, `F2`, `F5`) use their
  own code and virtual key code. Any other key becomes `"Key" + key.upper()`.
  A single ASCII character also gets its virtual key code.
- `type_text(session, text)` inserts text at the focus. It reports the
  first 100 characters and the full length.
- `scroll(session, direction, amount=300)` sends a wheel event at the
  centre of the chart. The direction is `up`, `down`, `left` or `right`. An
  amount of zero or less means 300.
- `mouse_click(session, x, y, button="left", double_click=False)` moves
  the mouse, then presses and releases. With `double_click` it presses and
  releases a second time with a click count of 2. Any button other than
  `right` or `middle` is treated as `left`.

### Panels

- `open_panel(session, panel, action)` handles the panels `pine-editor`,
  `strategy-tester`, `watchlist`, `alerts` and `trading`, with the actions
  `open`, `close` and `toggle`. It reports `was_open` and `performed`. An
  unknown panel raises `UIError`.
- `fullscreen(session)` clicks the header toolbar's fullscreen button.

### Layouts

- `layout_list(session)` returns the saved layouts (`id`, `name`,
  `symbol`, `resolution`, `modified`) and a `layout_count`. If the page
  could not supply them, an `error` entry is included.
- `layout_switch(session, name)` loads a layout. A name made only of digits
  is used directly as the layout id. Otherwise it matches the name exactly
  or ignoring case, then falls back to a substring match. After switching
  it clicks away an "open anyway", "don't save" or "discard" prompt if one
  appears, and reports whether it did so in `unsaved_dialog_dismissed`.

## Key helpers

`tvui.keys` holds the logic behind keyboard and mouse input:

- `modifier_mask(modifiers)` gives alt 1, ctrl 2, meta 4 and shift 8. Names
  are matched case-insensitively and unknown names are ignored.
- `resolve_key(key)` returns a `KeySpec(code, vk)`.
- `normalize_button(button)` returns `right`, `middle` or `left`.
- `button_number(button)` returns 1 for middle, 2 for right and 0 for left.

```python
from tvui.keys import modifier_mask, normalize_button, resolve_key

assert modifier_mask(["ctrl", "shift"]) == 10
assert normalize_button("unknown") == "left"
assert resolve_key("Enter").vk == 13
```

## Tools

`tvui.tools` exposes the operations as named tools. Each tool is a
`ToolDef` with a name, a description, a JSON-schema-style input schema and
a handler.

```python
from tvui.tools import ToolRegistry, register_tools

registry = ToolRegistry()
register_tools(registry)

for tool in registry.list():
    print(tool.name, tool.schema.get("required", []))

result = registry.call("ui_scroll", session, {"direction": "down", "amount": 600})
```

`register_tools` registers these tools: `ui_click`, `ui_open_panel`,
`ui_fullscreen`, `layout_list`, `layout_switch`, `ui_keyboard`,
`ui_type_text`, `ui_hover`, `ui_scroll`, `ui_mouse_click`,
`ui_find_element` and `ui_evaluate`.

`ToolRegistry.call(name, session, arguments)` accepts its arguments as a
mapping, a JSON string, JSON bytes or `None`. If the arguments are
malformed or an operation raises `UIError` or `OSError`, `call` returns
`{"success": False, "error": ...}` instead of raising. An unknown tool name
raises `KeyError` from both `get` and `call`.

## Safe strings

Values placed into the generated JavaScript always pass through
`tvui.js.safe_string`. It turns a string into a double-quoted,
JSON-escaped literal. It also escapes `<`, `>`, `&`, U+2028 and U+2029,
and replaces lone surrogates with U+FFFD.

```python
from tvui.js import safe_string

assert safe_string('say "hi"') == '"say \\"hi\\""'
```

## What it does not do

`tvui` does not connect to TradingView itself. It has no DevTools
websocket client, it does not discover or launch the desktop application,
and it ships no command-line program or tool server. You provide the
`send` transport that carries commands to the page. You also provide
whatever serves the tool registry to an agent.