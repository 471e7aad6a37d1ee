"""Key codes, key states, key events, decoded keys and decoding errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class KeyboardError(Exception):
    """Base class for every error raised while decoding keyboard input."""


class BadStartBit(KeyboardError):
    """The start bit of a PS/2 word was not 0."""


class BadStopBit(KeyboardError):
    """The stop bit of a PS/2 word was not 1."""


class ParityError(KeyboardError):
    """The parity bit of a PS/2 word did not give odd parity."""


class UnknownKeyCode(KeyboardError):
    """A scan code has no known key."""


class KeyCode(enum.IntEnum):
    """Keys a keyboard can report, independent of the scan code set.

    Values follow the physical layout, row by row, starting at 0.
    """

    def _generate_next_value_(name, start, count, last_values):  # noqa: N805
        return count

    # Row 1 (the F-keys)
    ESCAPE = enum.auto()
    F1 = enum.auto()
    F2 = enum.auto()
    F3 = enum.auto()
    F4 = enum.auto()
    F5 = enum.auto()
    F6 = enum.auto()
    F7 = enum.auto()
    F8 = enum.auto()
    F9 = enum.auto()
    F10 = enum.auto()
    F11 = enum.auto()
    F12 = enum.auto()
    PRINT_SCREEN = enum.auto()
    SYS_RQ = enum.auto()
    SCROLL_LOCK = enum.auto()
    PAUSE_BREAK = enum.auto()

    # Row 2 (the numbers)
    OEM8 = enum.auto()
    KEY1 = enum.auto()
    KEY2 = enum.auto()
    KEY3 = enum.auto()
    KEY4 = enum.auto()
    KEY5 = enum.auto()
    KEY6 = enum.auto()
    KEY7 = enum.auto()
    KEY8 = enum.auto()
    KEY9 = enum.auto()
    KEY0 = enum.auto()
    OEM_MINUS = enum.auto()
    OEM_PLUS = enum.auto()
    BACKSPACE = enum.auto()
    INSERT = enum.auto()
    HOME = enum.auto()
    PAGE_UP = enum.auto()
    NUMPAD_LOCK = enum.auto()
    NUMPAD_DIVIDE = enum.auto()
    NUMPAD_MULTIPLY = enum.auto()
    NUMPAD_SUBTRACT = enum.auto()

    # Row 3 (QWERTY)
    TAB = enum.auto()
    Q = enum.auto()
    W = enum.auto()
    E = enum.auto()
    R = enum.auto()
    T = enum.auto()
    Y = enum.auto()
    U = enum.auto()
    I = enum.auto()  # noqa: E741
    O = enum.auto()  # noqa: E741
    P = enum.auto()
    OEM4 = enum.auto()
    OEM6 = enum.auto()
    OEM5 = enum.auto()
    OEM7 = enum.auto()
    DELETE = enum.auto()
    END = enum.auto()
    PAGE_DOWN = enum.auto()
    NUMPAD7 = enum.auto()
    NUMPAD8 = enum.auto()
    NUMPAD9 = enum.auto()
    NUMPAD_ADD = enum.auto()

    # Row 4 (ASDF)
    CAPS_LOCK = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    F = enum.auto()
    G = enum.auto()
    H = enum.auto()
    J = enum.auto()
    K = enum.auto()
    L = enum.auto()
    OEM1 = enum.auto()
    OEM3 = enum.auto()
    RETURN = enum.auto()
    NUMPAD4 = enum.auto()
    NUMPAD5 = enum.auto()
    NUMPAD6 = enum.auto()

    # Row 5 (ZXCV)
    LSHIFT = enum.auto()
    Z = enum.auto()
    X = enum.auto()
    C = enum.auto()
    V = enum.auto()
    B = enum.auto()
    N = enum.auto()
    M = enum.auto()
    OEM_COMMA = enum.auto()
    OEM_PERIOD = enum.auto()
    OEM2 = enum.auto()
    RSHIFT = enum.auto()
    ARROW_UP = enum.auto()
    NUMPAD1 = enum.auto()
    NUMPAD2 = enum.auto()
    NUMPAD3 = enum.auto()
    NUMPAD_ENTER = enum.auto()

    # Row 6 (modifiers and space bar)
    LCONTROL = enum.auto()
    LWIN = enum.auto()
    LALT = enum.auto()
    SPACEBAR = enum.auto()
    RALT_GR = enum.auto()
    RWIN = enum.auto()
    APPS = enum.auto()
    RCONTROL = enum.auto()
    ARROW_LEFT = enum.auto()
    ARROW_DOWN = enum.auto()
    ARROW_RIGHT = enum.auto()
    NUMPAD0 = enum.auto()
    NUMPAD_PERIOD = enum.auto()

    # JIS 109-key extra keys
    OEM9 = enum.auto()
    OEM10 = enum.auto()
    OEM11 = enum.auto()
    OEM12 = enum.auto()
    OEM13 = enum.auto()

    # Extra keys
    PREV_TRACK = enum.auto()
    NEXT_TRACK = enum.auto()
    MUTE = enum.auto()
    CALCULATOR = enum.auto()
    PLAY = enum.auto()
    STOP = enum.auto()
    VOLUME_DOWN = enum.auto()
    VOLUME_UP = enum.auto()
    WWW_HOME = enum.auto()
    POWER_ON_TEST_OK = enum.auto()
    TOO_MANY_KEYS = enum.auto()
    RCONTROL2 = enum.auto()
    RALT2 = enum.auto()


class KeyState(enum.Enum):
    """The new state of a key, as part of a key event."""

    UP = enum.auto()
    DOWN = enum.auto()
    SINGLE_SHOT = enum.auto()


class HandleControl(enum.Enum):
    """How letters are treated while a Ctrl key is held."""

    MAP_LETTERS_TO_UNICODE = enum.auto()
    IGNORE = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """Something that happened to one key."""

    code: KeyCode
    state: KeyState


@dataclass(frozen=True)
class RawKey:
    """A decoded key with no Unicode equivalent."""

    code: KeyCode


@dataclass(frozen=True)
class Unicode:
    """A decoded key that produced a single Unicode character."""

    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"expected a single character, got {self.char!r}")


DecodedKey = Union[RawKey, Unicode]