"""Modifier state and the interfaces for layouts and scan code sets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from pc_keyboard.events import DecodedKey, HandleControl, KeyCode, KeyEvent


@dataclass
class Modifiers:
    """The state of the modifier keys and lock toggles."""

    lshift: bool = False
    rshift: bool = False
    lctrl: bool = False
    rctrl: bool = False
    numlock: bool = False
    capslock: bool = False
    lalt: bool = False
    ralt: bool = False
    rctrl2: bool = False

    def is_shifted(self) -> bool:
        return self.lshift or self.rshift

    def is_ctrl(self) -> bool:
        return self.lctrl or self.rctrl

    def is_alt(self) -> bool:
        return self.lalt or self.ralt

    def is_altgr(self) -> bool:
        return self.ralt or (self.lalt and self.is_ctrl())

    def is_caps(self) -> bool:
        return self.is_shifted() != self.capslock


class KeyboardLayout(ABC):
    """Maps key codes to characters for one keyboard layout."""

    @abstractmethod
    def map_keycode(
        self, keycode: KeyCode, modifiers: Modifiers, handle_ctrl: HandleControl
    ) -> DecodedKey:
        """Return the character for a key, or the raw key if there is none."""


class ScancodeSet(ABC):
    """Turns a stream of scan code bytes into key events."""

    @abstractmethod
    def advance_state(self, code: int) -> Optional[KeyEvent]:
        """Feed one byte; return a key event once one is complete."""