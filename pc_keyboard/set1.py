"""Scan Code Set 1, as produced by the i8042 PC keyboard controller."""

from __future__ import annotations

import enum
from types import MappingProxyType
from typing import Mapping, Optional

from pc_keyboard.events import KeyCode, KeyEvent, KeyState, UnknownKeyCode
from pc_keyboard.layout import ScancodeSet

_EXTENDED_KEY_CODE = 0xE0
_EXTENDED2_KEY_CODE = 0xE1
_BREAK_BIT = 0x80

K = KeyCode

_SINGLE: Mapping[int, KeyCode] = MappingProxyType({
    0x01: K.ESCAPE,
    0x02: K.KEY1,
    0x03: K.KEY2,
    0x04: K.KEY3,
    0x05: K.KEY4,
    0x06: K.KEY5,
    0x07: K.KEY6,
    0x08: K.KEY7,
    0x09: K.KEY8,
    0x0A: K.KEY9,
    0x0B: K.KEY0,
    0x0C: K.OEM_MINUS,
    0x0D: K.OEM_PLUS,
    0x0E: K.BACKSPACE,
    0x0F: K.TAB,
    0x10: K.Q,
    0x11: K.W,
    0x12: K.E,
    0x13: K.R,
    0x14: K.T,
    0x15: K.Y,
    0x16: K.U,
    0x17: K.I,
    0x18: K.O,
    0x19: K.P,
    0x1A: K.OEM4,
    0x1B: K.OEM6,
    0x1C: K.RETURN,
    0x1D: K.LCONTROL,
    0x1E: K.A,
    0x1F: K.S,
    0x20: K.D,
    0x21: K.F,
    0x22: K.G,
    0x23: K.H,
    0x24: K.J,
    0x25: K.K,
    0x26: K.L,
    0x27: K.OEM1,
    0x28: K.OEM3,
    0x29: K.OEM8,
    0x2A: K.LSHIFT,
    0x2B: K.OEM7,
    0x2C: K.Z,
    0x2D: K.X,
    0x2E: K.C,
    0x2F: K.V,
    0x30: K.B,
    0x31: K.N,
    0x32: K.M,
    0x33: K.OEM_COMMA,
    0x34: K.OEM_PERIOD,
    0x35: K.OEM2,
    0x36: K.RSHIFT,
    0x37: K.NUMPAD_MULTIPLY,
    0x38: K.LALT,
    0x39: K.SPACEBAR,
    0x3A: K.CAPS_LOCK,
    0x3B: K.F1,
    0x3C: K.F2,
    0x3D: K.F3,
    0x3E: K.F4,
    0x3F: K.F5,
    0x40: K.F6,
    0x41: K.F7,
    0x42: K.F8,
    0x43: K.F9,
    0x44: K.F10,
    0x45: K.NUMPAD_LOCK,
    0x46: K.SCROLL_LOCK,
    0x47: K.NUMPAD7,
    0x48: K.NUMPAD8,
    0x49: K.NUMPAD9,
    0x4A: K.NUMPAD_SUBTRACT,
    0x4B: K.NUMPAD4,
    0x4C: K.NUMPAD5,
    0x4D: K.NUMPAD6,
    0x4E: K.NUMPAD_ADD,
    0x4F: K.NUMPAD1,
    0x50: K.NUMPAD2,
    0x51: K.NUMPAD3,
    0x52: K.NUMPAD0,
    0x53: K.NUMPAD_PERIOD,
    0x54: K.SYS_RQ,
    0x56: K.OEM5,
    0x57: K.F11,
    0x58: K.F12,
})

_EXTENDED: Mapping[int, KeyCode] = MappingProxyType({
    0x10: K.PREV_TRACK,
    0x19: K.NEXT_TRACK,
    0x1C: K.NUMPAD_ENTER,
    0x1D: K.RCONTROL,
    0x20: K.MUTE,
    0x21: K.CALCULATOR,
    0x22: K.PLAY,
    0x24: K.STOP,
    0x2A: K.RALT2,
    0x2E: K.VOLUME_DOWN,
    0x30: K.VOLUME_UP,
    0x32: K.WWW_HOME,
    0x35: K.NUMPAD_DIVIDE,
    0x37: K.PRINT_SCREEN,
    0x38: K.RALT_GR,
    0x47: K.HOME,
    0x48: K.ARROW_UP,
    0x49: K.PAGE_UP,
    0x4B: K.ARROW_LEFT,
    0x4D: K.ARROW_RIGHT,
    0x4F: K.END,
    0x50: K.ARROW_DOWN,
    0x51: K.PAGE_DOWN,
    0x52: K.INSERT,
    0x53: K.DELETE,
    0x5B: K.LWIN,
    0x5C: K.RWIN,
    0x5D: K.APPS,
    0x70: K.OEM11,
    0x73: K.OEM12,
    0x79: K.OEM10,
    0x7B: K.OEM9,
    0x7D: K.OEM13,
})

_EXTENDED2: Mapping[int, KeyCode] = MappingProxyType({
    0x1D: K.RCONTROL2,
})

del K


def _lookup(table: Mapping[int, KeyCode], code: int, kind: str) -> KeyCode:
    try:
        return table[code]
    except KeyError:
        raise UnknownKeyCode(f"unknown {kind} scan code 0x{code:02x}") from None


def set1_keycode(code: int) -> KeyCode:
    """Key for a single-byte Set 1 make code."""
    return _lookup(_SINGLE, code, "set 1")


def set1_extended_keycode(code: int) -> KeyCode:
    """Key for a Set 1 make code that follows an E0 prefix."""
    return _lookup(_EXTENDED, code, "set 1 extended")


def set1_extended2_keycode(code: int) -> KeyCode:
    """Key for a Set 1 make code that follows an E1 prefix."""
    return _lookup(_EXTENDED2, code, "set 1 extended2")


class _DecodeState(enum.Enum):
    START = enum.auto()
    EXTENDED = enum.auto()
    EXTENDED2 = enum.auto()


class ScancodeSet1(ScancodeSet):
    """Stateful decoder for Scan Code Set 1.

    E0 and E1 select the extended tables for the next byte; a byte with its
    top bit set is the break (key up) code of the key in its low seven bits.
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
            return self._event(set1_keycode, code)

        self._state = _DecodeState.START
        if state is _DecodeState.EXTENDED:
            return self._event(set1_extended_keycode, code)
        return self._event(set1_extended2_keycode, code)

    @staticmethod
    def _event(lookup, code: int) -> KeyEvent:
        if code & _BREAK_BIT:
            return KeyEvent(lookup(code - _BREAK_BIT), KeyState.UP)
        return KeyEvent(lookup(code), KeyState.DOWN)