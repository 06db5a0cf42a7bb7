import pytest

from tvui.keys import KEY_MAP, KeySpec, button_number, modifier_mask, normalize_button, resolve_key

NAMED_KEYS = [
    "Enter", "Escape", "Tab", "Backspace", "Delete",
    "ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight",
    "Space", "Home", "End", "PageUp", "PageDown",
    "F1", "F2", "F5",
]


@pytest.mark.parametrize("name", NAMED_KEYS)
def test_key_map_entries_resolve_to_themselves(name):
    spec = resolve_key(name)
    assert spec == KEY_MAP[name]
    assert spec.code == name


def test_key_map_has_exactly_the_listed_keys():
    resolved = {name: resolve_key(name) for name in KEY_MAP}
    assert sorted(resolved) == sorted(NAMED_KEYS)
    assert all(spec.code == name for name, spec in resolved.items())


@pytest.mark.parametrize(
    "name, vk",
    [("Enter", 13), ("Escape", 27), ("Tab", 9), ("Backspace", 8), ("Delete", 46),
     ("Space", 32), ("F1", 112), ("F5", 116), ("PageDown", 34)],
)
def test_key_map_virtual_codes(name, vk):
    assert resolve_key(name).vk == vk


@pytest.mark.parametrize(
    "mods, want",
    [
        ([], 0),
        (["alt"], 1),
        (["ctrl"], 2),
        (["meta"], 4),
        (["shift"], 8),
        (["ctrl", "shift"], 10),
        (["ctrl", "alt"], 3),
    ],
)
def test_modifier_bitfield(mods, want):
    assert modifier_mask(mods) == want


def test_modifier_mask_is_case_insensitive_and_ignores_unknown():
    assert modifier_mask(["CTRL", "Shift", "hyper"]) == 10


def test_modifier_mask_accepts_none_and_duplicates():
    assert modifier_mask(None) == 0
    assert modifier_mask(["alt", "alt"]) == 1


def test_character_key_resolution():
    assert resolve_key("a") == KeySpec("KeyA", 65)
    assert resolve_key("Z") == KeySpec("KeyZ", 90)


def test_multi_character_unknown_key_has_zero_vk():
    spec = resolve_key("foo")
    assert spec.code == "KeyFOO"
    assert spec.vk == 0


def test_non_ascii_character_has_zero_vk():
    spec = resolve_key("é")
    assert spec.code == "KeyÉ"
    assert spec.vk == 0


@pytest.mark.parametrize(
    "raw, want",
    [("left", "left"), ("right", "right"), ("middle", "middle"), ("", "left"), ("unknown", "left"), (None, "left")],
)
def test_mouse_click_button_normalise(raw, want):
    assert normalize_button(raw) == want


@pytest.mark.parametrize(
    "raw, want",
    [("left", 0), ("middle", 1), ("right", 2), ("", 0), ("other", 0)],
)
def test_button_number(raw, want):
    assert button_number(raw) == want