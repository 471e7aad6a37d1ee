"""Decoding of the 11-bit words of the PS/2 keyboard protocol."""

from __future__ import annotations

from typing import Optional

from pc_keyboard.events import BadStartBit, BadStopBit, ParityError

_WORD_BITS = 11
_START_BIT = 0
_PARITY_BIT = 9
_STOP_BIT = 10


def _bit(word: int, offset: int) -> bool:
    return bool((word >> offset) & 1)


def check_word(word: int) -> int:
    """Check an 11-bit word and return its data byte.

    The word needs a 0 start bit in bit 0, data in bits 1 to 8 (LSB first),
    an odd-parity bit in bit 9 and a 1 stop bit in bit 10.
    """
    data = (word >> 1) & 0xFF
    if _bit(word, _START_BIT):
        raise BadStartBit(f"start bit set in word 0x{word:04x}")
    if not _bit(word, _STOP_BIT):
        raise BadStopBit(f"stop bit clear in word 0x{word:04x}")
    # Odd parity: an even count of data bits needs the parity bit set.
    needs_parity = bin(data).count("1") % 2 == 0
    if needs_parity != _bit(word, _PARITY_BIT):
        raise ParityError(f"bad parity in word 0x{word:04x}")
    return data


class Ps2Decoder:
    """Assembles PS/2 bit streams into checked data bytes."""

    def __init__(self) -> None:
        self._register = 0
        self._num_bits = 0

    def clear(self) -> None:
        """Drop any bits collected so far, e.g. after a read timeout."""
        self._register = 0
        self._num_bits = 0

    def add_bit(self, bit: bool) -> Optional[int]:
        """Shift in one bit; return the data byte once a whole word has arrived."""
        self._register |= int(bool(bit)) << self._num_bits
        self._num_bits += 1
        if self._num_bits < _WORD_BITS:
            return None
        word = self._register
        self.clear()
        return check_word(word)

    def add_word(self, word: int) -> int:
        """Check a whole word packed into its bottom 11 bits and return its byte."""
        return check_word(word)