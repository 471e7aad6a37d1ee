"""The United States 101/104-key keyboard layout."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from pc_keyboard.events import DecodedKey, HandleControl, KeyCode, RawKey, Unicode
from pc_keyboard.layout import KeyboardLayout, Modifiers

K = KeyCode

# Keys whose character depends only on the shift keys: (plain, shifted).
_SHIFTED: Mapping[KeyCode, Tuple[str, str]] = MappingProxyType({
    K.OEM8: ("`", "~"),
    K.KEY1: ("1", "!"),
    K.KEY2: ("2", "@"),
    K.KEY3: ("3", "#"),
    K.KEY4: ("4", "$"),
    K.KEY5: ("5", "%"),
    K.KEY6: ("6", "^"),
    K.KEY7: ("7", "&"),
    K.KEY8: ("8", "*"),
    K.KEY9: ("9", "("),
    K.KEY0: ("0", ")"),
    K.OEM_MINUS: ("-", "_"),
    K.OEM_PLUS: ("=", "+"),
    K.OEM4: ("[", "{"),
    K.OEM6: ("]", "}"),
    K.OEM7: ("\\", "|"),
    K.OEM1: (";", ":"),
    K.OEM3: ("'", '"'),
    K.OEM_COMMA: (",", "<"),
    K.OEM_PERIOD: (".", ">"),
    K.OEM2: ("/", "?"),
})

# Letter keys, as their upper-case letter.
_LETTERS: Mapping[KeyCode, str] = MappingProxyType({
    K.Q: "Q", K.W: "W", K.E: "E", K.R: "R", K.T: "T", K.Y: "Y", K.U: "U",
    K.I: "I", K.O: "O", K.P: "P",
    K.A: "A", K.S: "S", K.D: "D", K.F: "F", K.G: "G", K.H: "H", K.J: "J",
    K.K: "K", K.L: "L",
    K.Z: "Z", K.X: "X", K.C: "C", K.V: "V", K.B: "B", K.N: "N", K.M: "M",
})

# Keys that always give the same character. Enter gives LF, not CR or CRLF.
_FIXED: Mapping[KeyCode, str] = MappingProxyType({
    K.ESCAPE: "\x1b",
    K.BACKSPACE: "\x08",
    K.TAB: "\t",
    K.RETURN: "\n",
    K.SPACEBAR: " ",
    K.DELETE: "\x7f",
    K.NUMPAD_DIVIDE: "/",
    K.NUMPAD_MULTIPLY: "*",
    K.NUMPAD_SUBTRACT: "-",
    K.NUMPAD_ADD: "+",
    K.NUMPAD5: "5",
    K.NUMPAD_ENTER: "\n",
})

# Numpad keys: (with Num Lock on, with Num Lock off).
_NUMPAD: Mapping[KeyCode, Tuple[DecodedKey, DecodedKey]] = MappingProxyType({
    K.NUMPAD7: (Unicode("7"), RawKey(K.HOME)),
    K.NUMPAD8: (Unicode("8"), RawKey(K.ARROW_UP)),
    K.NUMPAD9: (Unicode("9"), RawKey(K.PAGE_UP)),
    K.NUMPAD4: (Unicode("4"), RawKey(K.ARROW_LEFT)),
    K.NUMPAD6: (Unicode("6"), RawKey(K.ARROW_RIGHT)),
    K.NUMPAD1: (Unicode("1"), RawKey(K.END)),
    K.NUMPAD2: (Unicode("2"), RawKey(K.ARROW_DOWN)),
    K.NUMPAD3: (Unicode("3"), RawKey(K.PAGE_DOWN)),
    K.NUMPAD0: (Unicode("0"), RawKey(K.INSERT)),
    K.NUMPAD_PERIOD: (Unicode("."), Unicode("\x7f")),
})

del K


class Us104Key(KeyboardLayout):
    """A standard US 101-key (104 with Windows keys) ANSI keyboard."""

    def map_keycode(
        self, keycode: KeyCode, modifiers: Modifiers, handle_ctrl: HandleControl
    ) -> DecodedKey:
        letter = _LETTERS.get(keycode)
        if letter is not None:
            if handle_ctrl is HandleControl.MAP_LETTERS_TO_UNICODE and modifiers.is_ctrl():
                return Unicode(chr(ord(letter) - 0x40))
            return Unicode(letter if modifiers.is_caps() else letter.lower())

        pair = _SHIFTED.get(keycode)
        if pair is not None:
            return Unicode(pair[1] if modifiers.is_shifted() else pair[0])

        fixed = _FIXED.get(keycode)
        if fixed is not None:
            return Unicode(fixed)

        numpad = _NUMPAD.get(keycode)
        if numpad is not None:
            return numpad[0] if modifiers.numlock else numpad[1]

        return RawKey(keycode)