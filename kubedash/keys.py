"""Keyboard input events and the keys they map to."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, Flag
from typing import ClassVar


class KeyCode(Enum):
    """Code of a key reported by the terminal."""

    BACKSPACE = "Backspace"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    TAB = "Tab"
    BACK_TAB = "BackTab"
    DELETE = "Delete"
    INSERT = "Insert"
    F = "F"
    CHAR = "Char"
    NULL = "Null"
    ESC = "Esc"


class KeyModifiers(Flag):
    """Modifier keys held with a key press."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


@dataclass(frozen=True)
class KeyEvent:
    """A key press: its code, modifiers, and the character or F-key number it carries."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    char: str = ""
    number: int = 0

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and len(self.char) != 1:
            raise ValueError("a character key event needs exactly one character")
        if self.code is KeyCode.F and not 0 <= self.number <= 255:
            raise ValueError(f"function key number out of range: {self.number}")


_FUNCTION_KEYS = tuple(f"F{n}" for n in range(13))
_NAMED_KEYS = (
    "Enter",
    "Tab",
    "Backspace",
    "Esc",
    "Left",
    "Right",
    "Up",
    "Down",
    "Ins",
    "Delete",
    "Home",
    "End",
    "PageUp",
    "PageDown",
    *_FUNCTION_KEYS,
    "Unknown",
)
_CHAR_KEYS = ("Char", "Ctrl", "Alt")
_ARROW_KEYS = ("Left", "Right", "Up", "Down")

_SIMPLE_CODES = {
    KeyCode.ESC: "Esc",
    KeyCode.BACKSPACE: "Backspace",
    KeyCode.LEFT: "Left",
    KeyCode.RIGHT: "Right",
    KeyCode.UP: "Up",
    KeyCode.DOWN: "Down",
    KeyCode.HOME: "Home",
    KeyCode.END: "End",
    KeyCode.PAGE_UP: "PageUp",
    KeyCode.PAGE_DOWN: "PageDown",
    KeyCode.DELETE: "Delete",
    KeyCode.INSERT: "Ins",
    KeyCode.ENTER: "Enter",
    KeyCode.TAB: "Tab",
}


@dataclass(frozen=True)
class Key:
    """A key the application reacts to.

    ``name`` is one of the named keys (``Enter``, ``F3``, ``PageUp`` ...) or one of
    ``Char``, ``Ctrl`` and ``Alt``, which carry a single character in ``char``.
    """

    name: str
    char: str = ""

    ENTER: ClassVar[Key]
    TAB: ClassVar[Key]
    BACKSPACE: ClassVar[Key]
    ESC: ClassVar[Key]
    LEFT: ClassVar[Key]
    RIGHT: ClassVar[Key]
    UP: ClassVar[Key]
    DOWN: ClassVar[Key]
    INS: ClassVar[Key]
    DELETE: ClassVar[Key]
    HOME: ClassVar[Key]
    END: ClassVar[Key]
    PAGE_UP: ClassVar[Key]
    PAGE_DOWN: ClassVar[Key]
    UNKNOWN: ClassVar[Key]

    def __post_init__(self) -> None:
        if self.name in _CHAR_KEYS:
            if len(self.char) != 1:
                raise ValueError(f"{self.name} key needs exactly one character")
        elif self.name in _NAMED_KEYS:
            if self.char:
                raise ValueError(f"{self.name} key carries no character")
        else:
            raise ValueError(f"unknown key name: {self.name!r}")

    @classmethod
    def from_f(cls, n: int) -> Key:
        """Return the function key ``F<n>`` for ``n`` from 0 to 12."""
        if not 0 <= n <= 12:
            raise ValueError(f"unknown function key: F{n}")
        return cls(f"F{n}")

    @classmethod
    def from_event(cls, event: KeyEvent) -> Key:
        """Map a terminal key event to a key."""
        name = _SIMPLE_CODES.get(event.code)
        if name is not None:
            return cls(name)
        if event.code is KeyCode.F:
            return cls.from_f(event.number)
        if event.code is KeyCode.CHAR:
            if event.modifiers == KeyModifiers.ALT:
                return cls("Alt", event.char)
            if event.modifiers == KeyModifiers.CONTROL:
                return cls("Ctrl", event.char)
            return cls("Char", event.char)
        return cls("Unknown")

    def __str__(self) -> str:
        if self.name in _CHAR_KEYS:
            shown = "Space" if self.char == " " else self.char
            if self.name == "Alt":
                return f"<Alt+{shown}>"
            if self.name == "Ctrl":
                return f"<Ctrl+{shown}>"
            return f"<{shown}>"
        if self.name in _ARROW_KEYS:
            return f"<{self.name} Arrow Key>"
        return f"<{self.name}>"


def _constant_name(name: str) -> str:
    return re.sub(r"(?<=[a-z])(?=[A-Z])", "_", name).upper()


for _key_name in _NAMED_KEYS:
    setattr(Key, _constant_name(_key_name), Key(_key_name))
del _key_name