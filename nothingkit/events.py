"""Input events delivered to the user interface widgets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag

from .vec import Vec


class Key(Enum):
    """Keys the widgets react to."""

    RETURN = "return"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    BACKSPACE = "backspace"
    DELETE = "delete"
    A = "a"
    B = "b"
    D = "d"
    E = "e"
    F = "f"
    K = "k"
    N = "n"
    P = "p"


class Mod(IntFlag):
    """Modifier keys held while an event happened."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4


class MouseButton(Enum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


@dataclass(frozen=True)
class KeyDown:
    """A key was pressed."""

    key: Key
    mod: Mod = Mod.NONE


@dataclass(frozen=True)
class TextInput:
    """Text was typed; mod holds the modifiers active at the time."""

    text: str
    mod: Mod = Mod.NONE


@dataclass(frozen=True)
class MouseMotion:
    """The mouse moved to (x, y) in screen coordinates."""

    x: float
    y: float

    @property
    def position(self) -> Vec:
        return Vec(float(self.x), float(self.y))


@dataclass(frozen=True)
class MouseButtonDown:
    """A mouse button was pressed at (x, y)."""

    x: float
    y: float
    button: MouseButton = MouseButton.LEFT

    @property
    def position(self) -> Vec:
        return Vec(float(self.x), float(self.y))


@dataclass(frozen=True)
class MouseButtonUp:
    """A mouse button was released at (x, y)."""

    x: float
    y: float
    button: MouseButton = MouseButton.LEFT

    @property
    def position(self) -> Vec:
        return Vec(float(self.x), float(self.y))