"""Key names, modifier masks and mouse button handling for input events."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping


@dataclass(frozen=True)
class KeySpec:
    """The DOM code and Windows virtual key code for a key."""

    code: str
    vk: int


KEY_MAP: Mapping[str, KeySpec] = MappingProxyType(
    {
        "Enter": KeySpec("Enter", 13),
        "Escape": KeySpec("Escape", 27),
        "Tab": KeySpec("Tab", 9),
        "Backspace": KeySpec("Backspace", 8),
        "Delete": KeySpec("Delete", 46),
        "ArrowUp": KeySpec("ArrowUp", 38),
        "ArrowDown": KeySpec("ArrowDown", 40),
        "ArrowLeft": KeySpec("ArrowLeft", 37),
        "ArrowRight": KeySpec("ArrowRight", 39),
        "Space": KeySpec("Space", 32),
        "Home": KeySpec("Home", 36),
        "End": KeySpec("End", 35),
        "PageUp": KeySpec("PageUp", 33),
        "PageDown": KeySpec("PageDown", 34),
        "F1": KeySpec("F1", 112),
        "F2": KeySpec("F2", 113),
        "F5": KeySpec("F5", 116),
    }
)

_MODIFIER_BITS = {"alt": 1, "ctrl": 2, "meta": 4, "shift": 8}


def modifier_mask(modifiers: Iterable[str] | None) -> int:
    """Combine modifier names (alt, ctrl, meta, shift) into a bit mask.

    Names are matched case-insensitively; unknown names are ignored.
    """
    mask = 0
    for name in modifiers or ():
        mask |= _MODIFIER_BITS.get(name.lower(), 0)
    return mask


def resolve_key(key: str) -> KeySpec:
    """Return the key spec for a named key, or derive one for a character key."""
    spec = KEY_MAP.get(key)
    if spec is not None:
        return spec
    upper = key.upper()
    encoded = upper.encode("utf-8")
    vk = encoded[0] if len(encoded) == 1 else 0
    return KeySpec("Key" + upper, vk)


def normalize_button(button: str | None) -> str:
    """Map a button name to left, right or middle; anything else is left."""
    return button if button in ("right", "middle") else "left"


def button_number(button: str | None) -> int:
    """Return the pressed-buttons number for a button name."""
    return {"middle": 1, "right": 2}.get(normalize_button(button), 0)