"""Scan Code Set 2, as sent by a PS/2 keyboard on the wire."""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from pc_keyboard.events import KeyCode, KeyEvent, KeyState, UnknownKeyCode
from pc_keyboard.layout import ScancodeSet

_EXTENDED_KEY_CODE = 0xE0
_EXTENDED2_KEY_CODE = 0xE1
_KEY_RELEASE_CODE = 0xF0

K = KeyCode

_SINGLE: Mapping[int, KeyCode] = MappingProxyType({
    0x00: K.TOO_MANY_KEYS,
    0x01: K.F9,
    0x03: K.F5,
    0x04: K.F3,
    0x05: K.F1,
    0x06: K.F2,
    0x07: K.F12,
    0x09: K.F10,
    0x0A: K.F8,
    0x0B: K.F6,
    0x0C: K.F4,
    0x0D: K.TAB,
    0x0E: K.OEM8,
    0x11: K.LALT,
    0x12: K.LSHIFT,
    0x13: K.OEM11,
    0x14: K.LCONTROL,
    0x15: K.Q,
    0x16: K.KEY1,
    0x1A: K.Z,
    0x1B: K.S,
    0x1C: K.A,
    0x1D: K.W,
    0x1E: K.KEY2,
    0x21: K.C,
    0x22: K.X,
    0x23: K.D,
    0x24: K.E,
    0x25: K.KEY4,
    0x26: K.KEY3,
    0x29: K.SPACEBAR,
    0x2A: K.V,
    0x2B: K.F,
    0x2C: K.T,
    0x2D: K.R,
    0x2E: K.KEY5,
    0x31: K.N,
    0x32: K.B,
    0x33: K.H,
    0x34: K.G,
    0x35: K.Y,
    0x36: K.KEY6,
    0x3A: K.M,
    0x3B: K.J,
    0x3C: K.U,
    0x3D: K.KEY7,
    0x3E: K.KEY8,
    0x41: K.OEM_COMMA,
    0x42: K.K,
    0x43: K.I,
    0x44: K.O,
    0x45: K.KEY0,
    0x46: K.KEY9,
    0x49: K.OEM_PERIOD,
    0x4A: K.OEM2,
    0x4B: K.L,
    0x4C: K.OEM1,
    0x4D: K.P,
    0x4E: K.OEM_MINUS,
    0x51: K.OEM12,
    0x52: K.OEM3,
    0x54: K.OEM4,
    0x55: K.OEM_PLUS,
    0x58: K.CAPS_LOCK,
    0x59: K.RSHIFT,
    0x5A: K.RETURN,
    0x5B: K.OEM6,
    0x5D: K.OEM7,
    0x61: K.OEM5,
    0x64: K.OEM10,
    0x66: K.BACKSPACE,
    0x67: K.OEM9,
    0x69: K.NUMPAD1,
    0x6A: K.OEM13,
    0x6B: K.NUMPAD4,
    0x6C: K.NUMPAD7,
    0x70: K.NUMPAD0,
    0x71: K.NUMPAD_PERIOD,
    0x72: K.NUMPAD2,
    0x73: K.NUMPAD5,
    0x74: K.NUMPAD6,
    0x75: K.NUMPAD8,
    0x76: K.ESCAPE,
    0x77: K.NUMPAD_LOCK,
    0x78: K.F11,
    0x79: K.NUMPAD_ADD,
    0x7A: K.NUMPAD3,
    0x7B: K.NUMPAD_SUBTRACT,
    0x7C: K.NUMPAD_MULTIPLY,
    0x7D: K.NUMPAD9,
    0x7E: K.SCROLL_LOCK,
    0x7F: K.SYS_RQ,
    0x83: K.F7,
    0xAA: K.POWER_ON_TEST_OK,
})

_EXTENDED: Mapping[int, KeyCode] = MappingProxyType({
    0x11: K.RALT_GR,
    0x12: K.RALT2,
    0x14: K.RCONTROL,
    0x15: K.PREV_TRACK,
    0x1F: K.LWIN,
    0x21: K.VOLUME_DOWN,
    0x23: K.MUTE,
    0x27: K.RWIN,
    0x2B: K.CALCULATOR,
    0x2F: K.APPS,
    0x32: K.VOLUME_UP,
    0x34: K.PLAY,
    0x3A: K.WWW_HOME,
    0x3B: K.STOP,
    0x4A: K.NUMPAD_DIVIDE,
    0x4D: K.NEXT_TRACK,
    0x5A: K.NUMPAD_ENTER,
    0x69: K.END,
    0x6B: K.ARROW_LEFT,
    0x6C: K.HOME,
    0x70: K.INSERT,
    0x71: K.DELETE,
    0x72: K.ARROW_DOWN,
    0x74: K.ARROW_RIGHT,
    0x75: K.ARROW_UP,
    0x7A: K.PAGE_DOWN,
    0x7C: K.PRINT_SCREEN,
    0x7D: K.PAGE_UP,
})

_EXTENDED2: Mapping[int, KeyCode] = MappingProxyType({
    0x14: K.RCONTROL2,
})

_SINGLE_SHOT_KEYS = frozenset({K.TOO_MANY_KEYS, K.POWER_ON_TEST_OK})

del K


def _lookup(table: Mapping[int, KeyCode], code: int, kind: str) -> KeyCode:
    try:
        return table[code]
    except KeyError:
        raise UnknownKeyCode(f"unknown {kind} scan code 0x{code:02x}") from None


def set2_keycode(code: int) -> KeyCode:
    """Key for a single-byte Set 2 code."""
    return _lookup(_SINGLE, code, "set 2")


def set2_extended_keycode(code: int) -> KeyCode:
    """Key for a Set 2 code that follows an E0 prefix."""
    return _lookup(_EXTENDED, code, "set 2 extended")


def set2_extended2_keycode(code: int) -> KeyCode:
    """Key for a Set 2 code that follows an E1 prefix."""
    return _lookup(_EXTENDED2, code, "set 2 extended2")


class _DecodeState(enum.Enum):
    START = enum.auto()
    RELEASE = enum.auto()
    EXTENDED = enum.auto()
    EXTENDED_RELEASE = enum.auto()
    EXTENDED2 = enum.auto()
    EXTENDED2_RELEASE = enum.auto()


# For each prefix state: the state after an F0, and the table lookup to use.
_PREFIXED: Mapping[_DecodeState, tuple] = MappingProxyType({
    _DecodeState.EXTENDED: (_DecodeState.EXTENDED_RELEASE, set2_extended_keycode),
    _DecodeState.EXTENDED2: (_DecodeState.EXTENDED2_RELEASE, set2_extended2_keycode),
})

_RELEASES: Mapping[_DecodeState, Callable[[int], KeyCode]] = MappingProxyType({
    _DecodeState.RELEASE: set2_keycode,
    _DecodeState.EXTENDED_RELEASE: set2_extended_keycode,
    _DecodeState.EXTENDED2_RELEASE: set2_extended2_keycode,
})


class ScancodeSet2(ScancodeSet):
    """Stateful decoder for Scan Code Set 2.

    E0 and E1 select the extended tables for the next code, and an F0 prefix
    turns the following code into a break (key up) event.
    """

    def __init__(self) -> None:
        self._state = _DecodeState.START

    def advance_state(self, code: int) -> Optional[KeyEvent]:
        state = self._state

        if state is _DecodeState.START:
            if code == _EXTENDED_KEY_CODE:
                self._state = _DecodeState.EXTENDED
                return None
            if code == _EXTENDED2_KEY_CODE:
                self._state = _DecodeState.EXTENDED2
                return None
            if code == _KEY_RELEASE_CODE:
                self._state = _DecodeState.RELEASE
                return None
            keycode = set2_keycode(code)
            if keycode in _SINGLE_SHOT_KEYS:
                return KeyEvent(keycode, KeyState.SINGLE_SHOT)
            return KeyEvent(keycode, KeyState.DOWN)

        if state in _RELEASES:
            self._state = _DecodeState.START
            return KeyEvent(_RELEASES[state](code), KeyState.UP)

        release_state, lookup = _PREFIXED[state]
        if code == _KEY_RELEASE_CODE:
            self._state = release_state
            return None
        self._state = _DecodeState.START
        return KeyEvent(lookup(code), KeyState.DOWN)