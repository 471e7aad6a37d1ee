"""Turning key events into characters with a keyboard layout."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from pc_keyboard.events import (
    DecodedKey,
    HandleControl,
    KeyCode,
    KeyEvent,
    KeyState,
    RawKey,
)
from pc_keyboard.layout import KeyboardLayout, Modifiers

# Keys that are held: the Modifiers field each one sets while it is down.
_HELD_MODIFIERS: Mapping[KeyCode, str] = MappingProxyType({
    KeyCode.LSHIFT: "lshift",
    KeyCode.RSHIFT: "rshift",
    KeyCode.LCONTROL: "lctrl",
    KeyCode.RCONTROL: "rctrl",
    KeyCode.LALT: "lalt",
    KeyCode.RALT_GR: "ralt",
    KeyCode.RCONTROL2: "rctrl2",
})


class EventDecoder:
    """Tracks modifier state and maps key events through a layout.

    ``handle_ctrl`` and ``layout`` may be changed at any time; ``modifiers``
    holds the current modifier and lock state, with Num Lock on at start.
    """

    def __init__(self, layout: KeyboardLayout, handle_ctrl: HandleControl) -> None:
        self.layout = layout
        self.handle_ctrl = handle_ctrl
        self.modifiers = Modifiers(numlock=True)

    def process_keyevent(self, ev: KeyEvent) -> Optional[DecodedKey]:
        """Update the modifiers for ``ev`` and return the key it produces, if any."""
        code, state = ev.code, ev.state

        field = _HELD_MODIFIERS.get(code)
        if field is not None:
            if state is KeyState.DOWN:
                setattr(self.modifiers, field, True)
                return RawKey(code)
            if state is KeyState.UP:
                setattr(self.modifiers, field, False)
            return None

        if state is not KeyState.DOWN:
            return None

        if code is KeyCode.CAPS_LOCK:
            self.modifiers.capslock = not self.modifiers.capslock
            return RawKey(code)

        if code is KeyCode.NUMPAD_LOCK:
            if self.modifiers.rctrl2:
                # Preceded by the hidden right-control: this is Pause.
                return RawKey(KeyCode.PAUSE_BREAK)
            self.modifiers.numlock = not self.modifiers.numlock
            return RawKey(code)

        return self.layout.map_keycode(code, self.modifiers, self.handle_ctrl)

    def change_layout(self, new_layout: KeyboardLayout) -> None:
        """Use ``new_layout`` for all further key events."""
        self.layout = new_layout