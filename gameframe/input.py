"""Keyboard and game-pad state tracking with per-frame edge detection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import AbstractSet, Iterable, Optional

KEY_COUNT = 256
STICK_THRESHOLD = 500
AXIS_MIN = -1000
AXIS_MAX = 1000
BUTTON_COUNT = 128


class Key(IntEnum):
    """Keyboard scan codes."""

    ESCAPE = 0x01
    W = 0x11
    RETURN = 0x1C
    A = 0x1E
    S = 0x1F
    D = 0x20
    SPACE = 0x39
    UP = 0xC8
    LEFT = 0xCB
    RIGHT = 0xCD
    DOWN = 0xD0


class Stick(IntEnum):
    """Stick tilt directions."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


class Button(IntEnum):
    """Game-pad button numbers."""

    A = 0
    B = 1
    X = 2
    Y = 3
    L1 = 4
    R1 = 5
    BACK = 6
    START = 7
    L3 = 8


@dataclass(frozen=True)
class PadState:
    """A snapshot of a game pad: stick axes in ``AXIS_MIN..AXIS_MAX`` and pressed buttons."""

    lx: int = 0
    ly: int = 0
    lrx: int = 0
    lry: int = 0
    buttons: frozenset = field(default_factory=frozenset)

    def pressed(self, button: int) -> bool:
        return button in self.buttons


_NEUTRAL_PAD = PadState()


def _check_range(value: int, low: int, high: int, what: str) -> int:
    if not low <= value <= high:
        raise ValueError(f"{what} {value} out of range {low}..{high}")
    return value


class Input:
    """Holds the current and previous frame of keyboard and pad input."""

    def __init__(self) -> None:
        self._keys: frozenset = frozenset()
        self._keys_pre: frozenset = frozenset()
        self._pad_connected = False
        self._pad_state = _NEUTRAL_PAD
        self._pad_state_pre = _NEUTRAL_PAD

    def update(self, keys: Iterable[int] = (), pad: Optional[PadState] = None) -> None:
        """Advance one frame with the pressed key codes and the pad snapshot.

        ``pad`` is None when no controller is connected.
        """
        pressed = frozenset(int(k) for k in keys)
        for k in pressed:
            _check_range(k, 0, KEY_COUNT - 1, "key")
        self._keys_pre = self._keys
        self._keys = pressed

        if pad is None:
            self._pad_connected = False
            self._pad_state_pre = _NEUTRAL_PAD
            self._pad_state = _NEUTRAL_PAD
        else:
            self._pad_connected = True
            self._pad_state_pre = self._pad_state
            self._pad_state = pad

    @property
    def pressed_keys(self) -> AbstractSet[int]:
        return self._keys

    # keyboard

    def push_key(self, key: int) -> bool:
        """True while the key is held."""
        return _check_range(int(key), 0, KEY_COUNT - 1, "key") in self._keys

    def trigger_key(self, key: int) -> bool:
        """True only on the frame the key goes down."""
        k = _check_range(int(key), 0, KEY_COUNT - 1, "key")
        return k in self._keys and k not in self._keys_pre

    def away_key(self, key: int) -> bool:
        """True only on the frame the key is released."""
        k = _check_range(int(key), 0, KEY_COUNT - 1, "key")
        return k not in self._keys and k in self._keys_pre

    def push_move_key(self) -> bool:
        """True while any of W, A, S or D is held."""
        return any(k in self._keys for k in (Key.W, Key.A, Key.S, Key.D))

    # game pad

    def check_pad(self) -> bool:
        """True when a controller is connected."""
        return self._pad_connected

    def push_button(self, button: int) -> bool:
        """True while the button is held."""
        b = _check_range(int(button), 0, 8, "button")
        return self._pad_state.pressed(b)

    def push_keep_button(self, button: int) -> bool:
        """True when the button was held this frame and the previous one."""
        b = _check_range(int(button), 0, 9, "button")
        return self._pad_state_pre.pressed(b) and self._pad_state.pressed(b)

    def tilt_left_stick(self, stick: int) -> bool:
        """True when the left stick leans past the threshold in that direction."""
        s = _check_range(int(stick), 0, 3, "stick")
        if not self._pad_connected:
            return False
        return self._tilted(s, self._pad_state.lx, self._pad_state.ly)

    def tilt_right_stick(self, stick: int) -> bool:
        """True when the right stick leans past the threshold in that direction."""
        s = _check_range(int(stick), 0, 3, "stick")
        if not self._pad_connected:
            return False
        return self._tilted(s, self._pad_state.lrx, self._pad_state.lry)

    @staticmethod
    def _tilted(stick: int, x: int, y: int) -> bool:
        if stick == Stick.LEFT:
            return x < -STICK_THRESHOLD
        if stick == Stick.RIGHT:
            return x > STICK_THRESHOLD
        if stick == Stick.UP:
            return y < -STICK_THRESHOLD
        return y > STICK_THRESHOLD