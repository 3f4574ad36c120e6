from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence


NBSP = "\u00a0"


@dataclass(frozen=True)
class Chip:
    label: str
    id: str


@dataclass(frozen=True)
class InputState:
    text: str = ""
    chips: tuple[Chip, ...] = field(default_factory=tuple)
    cursor_at_end: bool = True


def normalize_text(text: str) -> str:
    return (text or "").replace(NBSP, " ").strip()


class TextBuffer:
    """
    Input bar content: one free-text run followed by optional option chips.

    Chips are never part of get_text(); activating one appends its label to
    the free text exactly as if it had been typed.
    """

    def __init__(self) -> None:
        self._state = InputState()

    @property
    def state(self) -> InputState:
        return self._state

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def chips(self) -> tuple[Chip, ...]:
        return self._state.chips

    def get_text(self) -> str:
        return normalize_text(self._state.text)

    def set_text(self, text: str = "") -> None:
        self._state = InputState(text=text or "", chips=(), cursor_at_end=True)

    def edit(self, text: str) -> None:
        self._state = InputState(text=text or "", chips=self._state.chips, cursor_at_end=False)

    def render(self, command: str, options: Sequence[str] = ()) -> None:
        chips: list[Chip] = []
        for idx, label in enumerate(options):
            if not label or any(ch.isspace() for ch in label):
                raise ValueError(f"Option chip label must be a non-empty single token, got {label!r}")
            chips.append(Chip(label=label, id=f"option-{idx}"))
        self._state = InputState(text=command or "", chips=tuple(chips), cursor_at_end=True)

    def insert_option(self, label: str) -> None:
        current = self._state.text.rstrip()
        text = f"{current} {label}" if current else label
        self._state = InputState(text=text, chips=self._state.chips, cursor_at_end=True)

    def find_chip(self, chip_id: str) -> Chip | None:
        for chip in self._state.chips:
            if chip.id == chip_id:
                return chip
        return None
