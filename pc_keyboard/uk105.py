"""The United Kingdom 102/105-key keyboard layout."""

from __future__ import annotations

from pc_keyboard.events import DecodedKey, HandleControl, KeyCode, Unicode
from pc_keyboard.layout import KeyboardLayout, Modifiers
from pc_keyboard.us104 import Us104Key

_US = Us104Key()


class Uk105Key(KeyboardLayout):
    """A standard UK 102-key (105 with Windows keys) ISO keyboard.

    Keys that match the US layout are passed through to it.
    """

    def map_keycode(
        self, keycode: KeyCode, modifiers: Modifiers, handle_ctrl: HandleControl
    ) -> DecodedKey:
        shifted = modifiers.is_shifted()
        if keycode is KeyCode.OEM8:
            if modifiers.is_altgr():
                return Unicode("|")
            return Unicode("¬" if shifted else "`")
        if keycode is KeyCode.KEY2:
            return Unicode('"' if shifted else "2")
        if keycode is KeyCode.OEM3:
            return Unicode("@" if shifted else "'")
        if keycode is KeyCode.KEY3:
            return Unicode("£" if shifted else "3")
        if keycode is KeyCode.KEY4:
            if modifiers.is_altgr():
                return Unicode("€")
            return Unicode("$" if shifted else "4")
        if keycode is KeyCode.OEM7:
            return Unicode("~" if shifted else "#")
        if keycode is KeyCode.OEM5:
            return Unicode("|" if shifted else "\\")
        return _US.map_keycode(keycode, modifiers, handle_ctrl)