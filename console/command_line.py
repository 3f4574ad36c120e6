from __future__ import annotations

import logging
from typing import Sequence

from config.command_line_config import CommandLineConfig
from console import messages
from console.autocomplete import AutocompleteMatcher
from console.dispatcher import CommandDispatcher
from console.errors import CommandLineError
from console.history import HistoryTracker
from console.message_log import MessageLog
from console.popup_state import PopupMode, PopupStateMachine
from console.text_buffer import TextBuffer
from interfaces.command_line import CommandRegistry, ExecutionSink, LocalizationProvider


logger = logging.getLogger(__name__)


class CommandLine:
    """
    Command console state: input buffer, history recall, autocomplete, popups
    and the message panel.

    Every public method is one keyboard or pointer event and runs to
    completion synchronously. Failures end up as message lines; nothing is
    raised to the caller for bad user input.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        sink: ExecutionSink,
        localization: LocalizationProvider,
        config: CommandLineConfig | None = None,
    ) -> None:
        self.config = config or CommandLineConfig()
        self.localization = localization
        self.buffer = TextBuffer()
        self.history = HistoryTracker()
        self.autocomplete = AutocompleteMatcher(registry, localization)
        self.popups = PopupStateMachine(self.config)
        self.log = MessageLog()
        self.dispatcher = CommandDispatcher(registry, sink, localization, self.history, self.log)
        self.visible = True
        self._closed = False
        localization.add_locale_listener(self._on_locale_changed)

    @property
    def mode(self) -> PopupMode:
        return self.popups.mode

    @property
    def last_executed(self) -> str | None:
        return self.dispatcher.last_executed

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def placeholder(self) -> str:
        return self.translate(messages.PLACEHOLDER)

    @property
    def history_button_title(self) -> str:
        return self.translate(messages.SHOW_HISTORY)

    @property
    def messages_button_title(self) -> str:
        return self.translate(messages.SHOW_MESSAGES)

    def translate(self, key: str) -> str:
        return self.localization.translate(key, fallback=messages.FALLBACKS.get(key))

    # ----- buffer -----
    def get_text(self) -> str:
        return self.buffer.get_text()

    def set_text(self, text: str = "") -> None:
        self.buffer.set_text(text)

    def render_command_line(self, command: str, options: Sequence[str] = ()) -> None:
        self.buffer.render(command, options)

    def activate_chip(self, chip_id: str) -> bool:
        chip = self.buffer.find_chip(chip_id)
        if chip is None:
            return False
        self.buffer.insert_option(chip.label)
        return True

    # ----- dispatch -----
    def execute_command(self, raw_text: str) -> bool:
        try:
            self.dispatcher.execute(raw_text)
        except CommandLineError as exc:
            self._report(exc)
            return False
        self.buffer.set_text("")
        self.autocomplete.clear()
        return True

    # ----- keyboard -----
    def press_enter(self) -> bool:
        executed = self.execute_command(self.buffer.get_text())
        self.popups.close_all()
        return executed

    def press_escape(self) -> None:
        self.buffer.set_text("")
        self.autocomplete.clear()
        self.log.info(self.translate(messages.CANCELED), key=messages.CANCELED)
        self.popups.close_all()

    def press_up(self) -> None:
        self._navigate(-1)

    def press_down(self) -> None:
        self._navigate(1)

    def handle_input(self, text: str) -> None:
        if self._closed or text == self.buffer.text:
            return
        self.buffer.edit(text)
        query = self.buffer.get_text()
        if not query:
            self.autocomplete.clear()
            self.popups.close_autocomplete()
            return

        if self.autocomplete.update(query):
            self.popups.open_autocomplete()
            self.popups.content_changed()
        else:
            self.popups.close_autocomplete()

    # ----- pointer / focus -----
    def toggle_history(self) -> PopupMode:
        return self.popups.toggle_history()

    def toggle_messages(self) -> PopupMode:
        return self.popups.toggle_messages()

    def select_popup_item(self, value: str) -> None:
        self.buffer.set_text(value)
        self.autocomplete.clear()
        self.popups.close_all()

    def click_outside(self) -> None:
        self.popups.close_all()

    def focus_input(self) -> None:
        self.popups.close_all()

    def resize(self, viewport_width: int) -> int:
        return self.popups.resize(viewport_width)

    # ----- lifecycle -----
    def close(self) -> None:
        if self._closed:
            return
        self.localization.remove_locale_listener(self._on_locale_changed)
        self.log.clear()
        self.autocomplete.clear()
        self.popups.close_all()
        self._closed = True

    def _navigate(self, direction: int) -> None:
        if self.popups.is_open(PopupMode.AUTOCOMPLETE):
            selected = self.autocomplete.navigate(direction)
            if selected is not None:
                self.buffer.set_text(selected)
            return

        recalled = self.history.navigate(direction)
        if recalled is not None:
            self.buffer.set_text(recalled)

    def _report(self, exc: CommandLineError) -> None:
        prefix = self.translate(exc.message_key)
        text = f"{prefix}: {exc.argument}" if exc.argument is not None else prefix
        if exc.is_error:
            self.log.error(text, key=exc.message_key, argument=exc.argument)
        else:
            self.log.info(text, key=exc.message_key, argument=exc.argument)

    def _on_locale_changed(self, locale: str) -> None:
        logger.info("Relocalizing command line for locale %s", locale)
        self.log.relocalize(self.translate)
        self.autocomplete.refresh_descriptions()
