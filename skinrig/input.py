"""Keyboard, mouse and gamepad state with edge detection and stick dead zones."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence

KEY_COUNT = 256
MOUSE_BUTTON_COUNT = 8
MAX_CHECKED_MOUSE_BUTTON = 3
BUTTON_DOWN_MASK = 0x80

XINPUT_LEFT_THUMB_DEADZONE = 7849
XINPUT_RIGHT_THUMB_DEADZONE = 8689


class PadType(Enum):
    """The interface a gamepad is read through."""

    DIRECT_INPUT = "direct_input"
    XINPUT = "xinput"


@dataclass
class GamepadState:
    """A snapshot of a gamepad: buttons, triggers and both thumb sticks."""

    buttons: int = 0
    left_trigger: int = 0
    right_trigger: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0


@dataclass
class MouseState:
    """Relative mouse movement, wheel delta and button bytes of one frame."""

    x: int = 0
    y: int = 0
    z: int = 0
    buttons: list[int] = field(default_factory=lambda: [0] * MOUSE_BUTTON_COUNT)


@dataclass
class Joystick:
    """A registered gamepad and the dead zones applied to its sticks."""

    dead_zone_l: int = XINPUT_LEFT_THUMB_DEADZONE
    dead_zone_r: int = XINPUT_RIGHT_THUMB_DEADZONE
    type: PadType = PadType.XINPUT


def _apply_dead_zone(value: int, dead_zone: int) -> int:
    return 0 if abs(value) < dead_zone else value


class InputState:
    """Input of the current and the previous frame.

    Each call to :meth:`update` shifts the current state into the previous
    one, so presses, triggers and releases can be told apart.
    """

    def __init__(self) -> None:
        self.keys = bytes(KEY_COUNT)
        self.keys_pre = bytes(KEY_COUNT)
        self.mouse_state = MouseState()
        self.mouse_state_pre = MouseState()
        self.mouse_position: tuple[int, int] = (0, 0)
        self.joysticks: list[Joystick] = []

    def add_joystick(self, joystick: Joystick) -> int:
        """Register a connected gamepad and return its stick number."""
        self.joysticks.append(joystick)
        return len(self.joysticks) - 1

    def update(
        self,
        keys: Sequence[int],
        mouse_state: MouseState,
        mouse_position: tuple[int, int],
    ) -> None:
        """Record a new frame of keyboard and mouse input."""
        new_keys = bytes(keys)
        if len(new_keys) != KEY_COUNT:
            raise ValueError(f"expected {KEY_COUNT} key states, got {len(new_keys)}")
        self.keys_pre = self.keys
        self.keys = new_keys
        self.mouse_state_pre = self.mouse_state
        self.mouse_state = mouse_state
        self.mouse_position = (mouse_position[0], mouse_position[1])

    @staticmethod
    def _check_key(key_number: int) -> None:
        if not 0 <= key_number < KEY_COUNT:
            raise ValueError(f"key number {key_number} is outside 0..{KEY_COUNT - 1}")

    def push_key(self, key_number: int) -> bool:
        """True while the key is held down."""
        self._check_key(key_number)
        return bool(self.keys[key_number])

    def trigger_key(self, key_number: int) -> bool:
        """True only on the frame the key went down."""
        self._check_key(key_number)
        return bool(self.keys[key_number]) and not self.keys_pre[key_number]

    def release_key(self, key_number: int) -> bool:
        """True only on the frame the key came up."""
        self._check_key(key_number)
        return not self.keys[key_number] and bool(self.keys_pre[key_number])

    @staticmethod
    def _button_down(state: MouseState, mouse_number: int) -> bool:
        return (state.buttons[mouse_number] & BUTTON_DOWN_MASK) != 0

    def is_press_mouse(self, mouse_number: int) -> bool:
        """True while the mouse button (0 left, 1 right, 2 middle) is held."""
        if not 0 <= mouse_number <= MAX_CHECKED_MOUSE_BUTTON:
            return False
        return self._button_down(self.mouse_state, mouse_number)

    def is_trigger_mouse(self, mouse_number: int) -> bool:
        """True only on the frame the mouse button went down."""
        if not 0 <= mouse_number <= MAX_CHECKED_MOUSE_BUTTON:
            return False
        return self._button_down(self.mouse_state, mouse_number) and not self._button_down(
            self.mouse_state_pre, mouse_number
        )

    def mouse_move(self) -> tuple[int, int]:
        """Mouse movement of the current frame."""
        return (self.mouse_state.x, self.mouse_state.y)

    def wheel(self) -> int:
        """Wheel movement of the current frame; positive when turned away."""
        return self.mouse_state.z

    def joystick_state(
        self, stick_no: int, raw_state: Optional[GamepadState]
    ) -> Optional[GamepadState]:
        """Return ``raw_state`` with dead zones applied, or None if it cannot be read.

        None is returned for an unknown stick number, a pad that is not read
        through XInput, or a missing reading. All four stick axes are
        compared with the left dead zone.
        """
        if not 0 <= stick_no < len(self.joysticks):
            return None
        joystick = self.joysticks[stick_no]
        if joystick.type is not PadType.XINPUT or raw_state is None:
            return None
        dead_zone = joystick.dead_zone_l
        return replace(
            raw_state,
            thumb_lx=_apply_dead_zone(raw_state.thumb_lx, dead_zone),
            thumb_ly=_apply_dead_zone(raw_state.thumb_ly, dead_zone),
            thumb_rx=_apply_dead_zone(raw_state.thumb_rx, dead_zone),
            thumb_ry=_apply_dead_zone(raw_state.thumb_ry, dead_zone),
        )

    def set_joystick_dead_zone(self, stick_no: int, dead_zone_l: int, dead_zone_r: int) -> None:
        """Set both dead zones of a stick; unknown stick numbers are ignored."""
        if not 0 <= stick_no < len(self.joysticks):
            return
        joystick = self.joysticks[stick_no]
        joystick.dead_zone_l = dead_zone_l
        joystick.dead_zone_r = dead_zone_r