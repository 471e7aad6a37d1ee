import pytest

from pc_keyboard.events import KeyCode, KeyEvent, KeyState, UnknownKeyCode
from pc_keyboard.set2 import (
    ScancodeSet2,
    set2_extended2_keycode,
    set2_extended_keycode,
    set2_keycode,
)


def _feed(decoder, sequence):
    for byte, expected in sequence:
        assert decoder.advance_state(byte) == expected, f"0x{byte:02x}"


def test_validate_scancodes():
    codes = []
    errs = []
    for code in range(0x00, 0x100):
        try:
            codes.append(set2_keycode(code))
        except UnknownKeyCode:
            errs.append(code)
    assert len(codes) == 94
    assert len(errs) == 162


def test_single_lookups():
    assert set2_keycode(0x01) is KeyCode.F9
    assert set2_keycode(0x83) is KeyCode.F7
    assert set2_keycode(0x1C) is KeyCode.A


def test_extended_lookups():
    assert set2_extended_keycode(0x6C) is KeyCode.HOME
    assert set2_extended_keycode(0x7C) is KeyCode.PRINT_SCREEN
    assert set2_extended2_keycode(0x14) is KeyCode.RCONTROL2


def test_unknown_extended_raises():
    with pytest.raises(UnknownKeyCode):
        set2_extended_keycode(0x01)
    with pytest.raises(UnknownKeyCode):
        set2_extended2_keycode(0x77)


def test_f9_byte():
    _feed(ScancodeSet2(), [(0x01, KeyEvent(KeyCode.F9, KeyState.DOWN))])


def test_keyup_keydown():
    _feed(
        ScancodeSet2(),
        [
            (0x01, KeyEvent(KeyCode.F9, KeyState.DOWN)),
            (0x01, KeyEvent(KeyCode.F9, KeyState.DOWN)),
            (0xF0, None),
            (0x01, KeyEvent(KeyCode.F9, KeyState.UP)),
        ],
    )


def test_poweron():
    _feed(
        ScancodeSet2(),
        [(0xAA, KeyEvent(KeyCode.POWER_ON_TEST_OK, KeyState.SINGLE_SHOT))],
    )


def test_toomanykeys():
    _feed(
        ScancodeSet2(),
        [(0x00, KeyEvent(KeyCode.TOO_MANY_KEYS, KeyState.SINGLE_SHOT))],
    )


def test_down_up():
    space_down = KeyEvent(KeyCode.SPACEBAR, KeyState.DOWN)
    space_up = KeyEvent(KeyCode.SPACEBAR, KeyState.UP)
    _feed(
        ScancodeSet2(),
        [(0x29, space_down), (0xF0, None), (0x29, space_up)] * 3,
    )


def test_ext_down_up():
    _feed(
        ScancodeSet2(),
        [
            (0xE0, None),
            (0x6C, KeyEvent(KeyCode.HOME, KeyState.DOWN)),
            (0xE0, None),
            (0xF0, None),
            (0x6C, KeyEvent(KeyCode.HOME, KeyState.UP)),
        ],
    )


def test_pause_set2():
    _feed(
        ScancodeSet2(),
        [
            (0xE1, None),
            (0x14, KeyEvent(KeyCode.RCONTROL2, KeyState.DOWN)),
            (0x77, KeyEvent(KeyCode.NUMPAD_LOCK, KeyState.DOWN)),
            (0xE1, None),
            (0xF0, None),
            (0x14, KeyEvent(KeyCode.RCONTROL2, KeyState.UP)),
            (0xF0, None),
            (0x77, KeyEvent(KeyCode.NUMPAD_LOCK, KeyState.UP)),
        ],
    )


def test_print_screen_set2():
    _feed(
        ScancodeSet2(),
        [
            (0xE0, None),
            (0x12, KeyEvent(KeyCode.RALT2, KeyState.DOWN)),
            (0xE0, None),
            (0x7C, KeyEvent(KeyCode.PRINT_SCREEN, KeyState.DOWN)),
            (0xE0, None),
            (0xF0, None),
            (0x7C, KeyEvent(KeyCode.PRINT_SCREEN, KeyState.UP)),
            (0xE0, None),
            (0xF0, None),
            (0x12, KeyEvent(KeyCode.RALT2, KeyState.UP)),
        ],
    )


def test_unknown_code_raises():
    with pytest.raises(UnknownKeyCode):
        ScancodeSet2().advance_state(0x02)


def test_state_resets_after_unknown_release():
    decoder = ScancodeSet2()
    assert decoder.advance_state(0xF0) is None
    with pytest.raises(UnknownKeyCode):
        decoder.advance_state(0x02)
    assert decoder.advance_state(0x1C) == KeyEvent(KeyCode.A, KeyState.DOWN)


def test_state_resets_after_unknown_extended():
    decoder = ScancodeSet2()
    assert decoder.advance_state(0xE0) is None
    with pytest.raises(UnknownKeyCode):
        decoder.advance_state(0x01)
    assert decoder.advance_state(0x01) == KeyEvent(KeyCode.F9, KeyState.DOWN)