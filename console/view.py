from __future__ import annotations

from dataclasses import dataclass

from console import messages
from console.command_line import CommandLine
from console.message_log import LogKind
from console.popup_state import PopupMode
from console.text_buffer import Chip


@dataclass(frozen=True)
class PopupItem:
    value: str
    label: str
    selected: bool = False
    enabled: bool = True


@dataclass(frozen=True)
class RenderedMessage:
    text: str
    kind: LogKind


@dataclass(frozen=True)
class CommandLineView:
    visible: bool
    text: str
    chips: tuple[Chip, ...]
    cursor_at_end: bool
    placeholder: str
    history_button_title: str
    messages_button_title: str
    mode: PopupMode
    popup_items: tuple[PopupItem, ...]
    bar_width: int
    popup_width: int
    messages: tuple[RenderedMessage, ...]
    log_revision: int
    locale_revision: int

    @property
    def list_popup_open(self) -> bool:
        return self.mode in (PopupMode.HISTORY, PopupMode.AUTOCOMPLETE)

    @property
    def messages_open(self) -> bool:
        return self.mode is PopupMode.MESSAGES


def _history_items(console: CommandLine) -> tuple[PopupItem, ...]:
    entries = console.history.newest_first()
    if not entries:
        return (PopupItem(value="", label=console.translate(messages.NO_HISTORY), enabled=False),)
    return tuple(PopupItem(value=entry, label=entry) for entry in entries)


def _autocomplete_items(console: CommandLine) -> tuple[PopupItem, ...]:
    selected = console.autocomplete.selected_index
    return tuple(
        PopupItem(value=c.command_id, label=c.display_label, selected=idx == selected)
        for idx, c in enumerate(console.autocomplete.candidates)
    )


def render_view(console: CommandLine) -> CommandLineView:
    mode = console.mode
    if mode is PopupMode.HISTORY:
        items = _history_items(console)
    elif mode is PopupMode.AUTOCOMPLETE:
        items = _autocomplete_items(console)
    else:
        items = ()

    state = console.buffer.state
    return CommandLineView(
        visible=console.visible,
        text=state.text,
        chips=state.chips,
        cursor_at_end=state.cursor_at_end,
        placeholder=console.placeholder,
        history_button_title=console.history_button_title,
        messages_button_title=console.messages_button_title,
        mode=mode,
        popup_items=items,
        bar_width=console.popups.bar_width,
        popup_width=console.popups.popup_width,
        messages=tuple(RenderedMessage(line.text, line.kind) for line in console.log.lines),
        log_revision=console.log.revision,
        locale_revision=console.log.locale_revision,
    )
