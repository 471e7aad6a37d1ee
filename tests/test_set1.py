import pytest

from pc_keyboard.events import KeyCode, KeyEvent, KeyState, UnknownKeyCode
from pc_keyboard.set1 import (
    ScancodeSet1,
    set1_extended2_keycode,
    set1_extended_keycode,
    set1_keycode,
)


def run(sequence):
    s = ScancodeSet1()
    for byte, expected in sequence:
        assert s.advance_state(byte) == expected, f"0x{byte:02x}"


def test_validate_scancodes():
    codes = []
    errs = []
    for code in range(0x80):
        try:
            codes.append(set1_keycode(code))
        except UnknownKeyCode:
            errs.append(code)
    assert len(codes) == 87
    assert len(errs) == 41
    assert len(set(codes)) == 87


def test_table_values():
    assert set1_keycode(0x1E) == KeyCode.A
    assert set1_keycode(0x58) == KeyCode.F12
    assert set1_extended_keycode(0x1C) == KeyCode.NUMPAD_ENTER
    assert set1_extended_keycode(0x7D) == KeyCode.OEM13
    assert set1_extended2_keycode(0x1D) == KeyCode.RCONTROL2


@pytest.mark.parametrize(
    "lookup, code",
    [(set1_keycode, 0x55), (set1_extended_keycode, 0x11), (set1_extended2_keycode, 0x14)],
)
def test_unknown_codes(lookup, code):
    with pytest.raises(UnknownKeyCode):
        lookup(code)


def test_set_1_down_up_down():
    run([
        (0x1E, KeyEvent(KeyCode.A, KeyState.DOWN)),
        (0x9E, KeyEvent(KeyCode.A, KeyState.UP)),
        (0x1F, KeyEvent(KeyCode.S, KeyState.DOWN)),
    ])


def test_set_1_ext_down_up_down():
    run([
        (0xE0, None),
        (0x1C, KeyEvent(KeyCode.NUMPAD_ENTER, KeyState.DOWN)),
        (0xE0, None),
        (0x9C, KeyEvent(KeyCode.NUMPAD_ENTER, KeyState.UP)),
    ])


def test_pause_set1():
    run([
        (0xE1, None),
        (0x1D, KeyEvent(KeyCode.RCONTROL2, KeyState.DOWN)),
        (0x45, KeyEvent(KeyCode.NUMPAD_LOCK, KeyState.DOWN)),
        (0xE1, None),
        (0x9D, KeyEvent(KeyCode.RCONTROL2, KeyState.UP)),
        (0xC5, KeyEvent(KeyCode.NUMPAD_LOCK, KeyState.UP)),
    ])


def test_print_screen_set1():
    run([
        (0xE0, None),
        (0x2A, KeyEvent(KeyCode.RALT2, KeyState.DOWN)),
        (0xE0, None),
        (0x37, KeyEvent(KeyCode.PRINT_SCREEN, KeyState.DOWN)),
        (0xE0, None),
        (0xB7, KeyEvent(KeyCode.PRINT_SCREEN, KeyState.UP)),
        (0xE0, None),
        (0xAA, KeyEvent(KeyCode.RALT2, KeyState.UP)),
    ])


def test_unknown_make_code_raises():
    with pytest.raises(UnknownKeyCode):
        ScancodeSet1().advance_state(0x55)


def test_unknown_break_code_raises():
    with pytest.raises(UnknownKeyCode):
        ScancodeSet1().advance_state(0xD5)


def test_unknown_extended_code_returns_to_start():
    s = ScancodeSet1()
    assert s.advance_state(0xE0) is None
    with pytest.raises(UnknownKeyCode):
        s.advance_state(0x11)
    assert s.advance_state(0x1C) == KeyEvent(KeyCode.RETURN, KeyState.DOWN)


def test_unknown_extended2_code_returns_to_start():
    s = ScancodeSet1()
    assert s.advance_state(0xE1) is None
    with pytest.raises(UnknownKeyCode):
        s.advance_state(0x45)
    assert s.advance_state(0x45) == KeyEvent(KeyCode.NUMPAD_LOCK, KeyState.DOWN)