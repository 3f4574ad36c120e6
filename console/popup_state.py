from __future__ import annotations

from enum import Enum

from config.command_line_config import CommandLineConfig


class PopupMode(str, Enum):
    CLOSED = "closed"
    HISTORY = "history"
    AUTOCOMPLETE = "autocomplete"
    MESSAGES = "messages"


class PopupStateMachine:
    """
    Exclusive popup visibility plus the widths the popups are laid out with.

    Widths are in terminal cells. The popup always matches the bar width,
    recomputed on open, resize and autocomplete content change.
    """

    def __init__(self, config: CommandLineConfig | None = None) -> None:
        self.config = config or CommandLineConfig()
        self._mode = PopupMode.CLOSED
        self.bar_width = self.config.min_width
        self.popup_width = self.bar_width

    @property
    def mode(self) -> PopupMode:
        return self._mode

    def is_open(self, mode: PopupMode) -> bool:
        return self._mode is mode

    def toggle_history(self) -> PopupMode:
        return self._toggle(PopupMode.HISTORY)

    def toggle_messages(self) -> PopupMode:
        return self._toggle(PopupMode.MESSAGES)

    def open_autocomplete(self) -> None:
        self._open(PopupMode.AUTOCOMPLETE)

    def close_autocomplete(self) -> None:
        if self._mode is PopupMode.AUTOCOMPLETE:
            self._mode = PopupMode.CLOSED

    def close_all(self) -> None:
        self._mode = PopupMode.CLOSED

    def content_changed(self) -> None:
        if self._mode is not PopupMode.CLOSED:
            self.popup_width = self.bar_width

    def resize(self, viewport_width: int) -> int:
        cfg = self.config
        width = max(cfg.min_width, int(viewport_width * cfg.width_ratio))
        width = min(width, viewport_width - cfg.edge_margin)
        self.bar_width = max(1, width)
        self.popup_width = self.bar_width
        return self.bar_width

    def _toggle(self, mode: PopupMode) -> PopupMode:
        if self._mode is mode:
            self._mode = PopupMode.CLOSED
        else:
            self._open(mode)
        return self._mode

    def _open(self, mode: PopupMode) -> None:
        self._mode = mode
        self.popup_width = self.bar_width
