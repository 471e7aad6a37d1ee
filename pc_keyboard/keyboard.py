"""A complete keyboard: PS/2 bit decoding, scan codes and layout mapping."""

from __future__ import annotations

from typing import Optional

from pc_keyboard.decoder import EventDecoder
from pc_keyboard.events import DecodedKey, HandleControl, KeyEvent
from pc_keyboard.layout import KeyboardLayout, Modifiers, ScancodeSet
from pc_keyboard.ps2 import Ps2Decoder


class Keyboard:
    """Combines a PS/2 decoder, a scan code set and an event decoder."""

    def __init__(
        self,
        scancode_set: ScancodeSet,
        layout: KeyboardLayout,
        handle_ctrl: HandleControl,
    ) -> None:
        self._ps2 = Ps2Decoder()
        self._scancode_set = scancode_set
        self._events = EventDecoder(layout, handle_ctrl)

    @property
    def modifiers(self) -> Modifiers:
        """The current modifier and lock state."""
        return self._events.modifiers

    @property
    def handle_ctrl(self) -> HandleControl:
        """How letters are treated while Ctrl is held."""
        return self._events.handle_ctrl

    @handle_ctrl.setter
    def handle_ctrl(self, value: HandleControl) -> None:
        self._events.handle_ctrl = value

    def clear(self) -> None:
        """Drop any partly received word, e.g. after a read timeout."""
        self._ps2.clear()

    def add_word(self, word: int) -> Optional[KeyEvent]:
        """Process an 11-bit PS/2 word (start, 8 data, parity, stop)."""
        return self.add_byte(self._ps2.add_word(word))

    def add_byte(self, byte: int) -> Optional[KeyEvent]:
        """Process a byte whose framing has already been checked."""
        return self._scancode_set.advance_state(byte)

    def add_bit(self, bit: bool) -> Optional[KeyEvent]:
        """Shift in one bit; returns None until a word and event are complete."""
        byte = self._ps2.add_bit(bit)
        if byte is None:
            return None
        return self._scancode_set.advance_state(byte)

    def process_keyevent(self, ev: KeyEvent) -> Optional[DecodedKey]:
        """Turn a key event into the key it produces, if any."""
        return self._events.process_keyevent(ev)