# pc-keyboard

Decoding of IBM PC / PS/2 keyboard input, from raw bits to Unicode
characters.

Keyboard input is handled in three stages. You can start at whichever stage
matches what your hardware gives you:

1. **PS/2 framing** (`pc_keyboard.ps2.Ps2Decoder`, `pc_keyboard.ps2.check_word`)
   turns 11-bit PS/2 words into bytes. A word is a start bit, eight data bits
   (LSB first), an odd parity bit and a stop bit. You only need this stage
   when you sample the keyboard's clock and data lines yourself. An i8042
   controller already does this work.
2. **Scancode sets** (`pc_keyboard.set1.ScancodeSet1` and
   `pc_keyboard.set2.ScancodeSet2`) turn bytes into `KeyEvent`s. A
   `KeyEvent` is a symbolic `KeyCode` plus a `KeyState` of `UP`, `DOWN` or
   `SINGLE_SHOT`. Set 1 is what an i8042 controller delivers. Set 2 is what
   a PS/2 keyboard sends on the wire.
3. **Event decoding** (`pc_keyboard.decoder.EventDecoder`) tracks shift,
   control, alt, Caps Lock and Num Lock. It maps key-down events through a
   keyboard layout into one of two results:
   - a `Unicode` character;
   - a `RawKey` for keys with no character, such as the arrows or the
     function keys.

`pc_keyboard.keyboard.Keyboard` combines all three stages.

## Installation

```
pip install pc-keyboard
```

The package needs Python 3.10 or later and has no other dependencies.

## Usage

```python
from pc_keyboard.events import HandleControl
from pc_keyboard.keyboard import Keyboard
from pc_keyboard.set2 import ScancodeSet2
from pc_keyboard.us104 import Us104Key

keyboard = Keyboard(ScancodeSet2(), Us104Key(), HandleControl.MAP_LETTERS_TO_UNICODE)

# Left shift down, A down, A up, left shift up.
for byte in (0x12, 0x1C, 0xF0, 0x1C, 0xF0, 0x12):
    event = keyboard.add_byte(byte)
    if event is not None:
        decoded = keyboard.process_keyevent(event)
        if decoded is not None:
            print(decoded)
```

This prints `RawKey(code=<KeyCode.LSHIFT: ...>)` and then `Unicode(char='A')`.

Some bytes only start a multi-byte sequence, such as the `0xF0` release
prefix or the `0xE0` and `0xE1` extended prefixes. These return `None`; the
byte that completes the sequence returns a `KeyEvent`. Key releases update
the modifier state but decode to `None`.

### Reading bit by bit

If you read the keyboard bit by bit, feed each bit to `Keyboard.add_bit`. It
returns `None` until all eleven bits of a word have arrived. You can pass a
whole word to `Keyboard.add_word` instead. Call `Keyboard.clear` after a
read timeout to discard a partly received word.

### Keyboard state

`Keyboard.modifiers` is the current `pc_keyboard.layout.Modifiers` state.
Its fields are `lshift`, `rshift`, `lctrl`, `rctrl`, `lalt`, `ralt`,
`capslock`, `numlock` and `rctrl2`. It also has the helpers `is_shifted()`,
`is_ctrl()`, `is_alt()`, `is_altgr()` and `is_caps()`. Num Lock starts on.

`Keyboard.handle_ctrl` can be read and set while the keyboard is in use.

### Errors

Decoding problems are raised as exceptions, all derived from
`pc_keyboard.events.KeyboardError`:

- `BadStartBit` – the start bit of a PS/2 word was not 0.
- `BadStopBit` – the stop bit of a PS/2 word was not 1.
- `ParityError` – the odd-parity check failed.
- `UnknownKeyCode` – the byte sequence is not a key the scancode set knows.

### Layouts

- `pc_keyboard.us104.Us104Key` – US 101/104-key ANSI keyboard.
- `pc_keyboard.uk105.Uk105Key` – UK 102/105-key ISO keyboard. Keys that are
  the same as on the US layout are handled by the US layout.

To write a new layout, subclass `pc_keyboard.layout.KeyboardLayout` and
implement `map_keycode(keycode, modifiers, handle_ctrl)`. It must return a
`RawKey` or a `Unicode`. `EventDecoder.change_layout` swaps the layout of a
running decoder.

To write a new scancode set, subclass `pc_keyboard.layout.ScancodeSet` and
implement `advance_state(code)`.

### Control keys

With `HandleControl.MAP_LETTERS_TO_UNICODE`, holding either Ctrl key turns
the letters A–Z into the control characters U+0001 to U+001A. With
`HandleControl.IGNORE`, letters stay letters and Ctrl is reported only as a
raw key.

### Pause and Print Screen

A Pause key press arrives as a hidden right-control (`KeyCode.RCONTROL2`)
followed by Num Lock. The event decoder reports this Num Lock as
`RawKey(KeyCode.PAUSE_BREAK)` and does not toggle Num Lock.

Print Screen is preceded by a hidden `KeyCode.RALT2`.

## What it does not do

The package does not talk to hardware. It does not open ports, read GPIO
pins or send commands to the keyboard, such as setting LEDs or choosing a
scancode set. You supply the bits, words or bytes, and it decodes them.

Only Scancode Sets 1 and 2 are supported. Only the US and UK layouts are
included.

## Running the tests

```
pip install -e ".[test]"
pytest
```