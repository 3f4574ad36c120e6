from __future__ import annotations

import logging
from typing import Callable

from cli.output import print_help, print_history, print_log_lines
from cli.parser import is_meta_command, parse_shell_command
from console import messages
from console.command_line import CommandLine
from services.document_manager import DocumentManager
from services.execution_queue import ExecutionQueue
from services.localization import Localization


logger = logging.getLogger(__name__)


class CliShell:
    """Line-at-a-time front end: every input line is typed into the console and confirmed."""

    def __init__(
        self,
        command_line: CommandLine,
        execution_queue: ExecutionQueue,
        document_manager: DocumentManager,
        localization: Localization,
        input_fn: Callable[[str], str] = input,
    ) -> None:
        self.command_line = command_line
        self.execution_queue = execution_queue
        self.document_manager = document_manager
        self.localization = localization
        self._input = input_fn
        self._running = True
        self._printed = 0

    def run(self) -> int:
        print("CAD command line. Type /help for shell commands.")
        while self._running:
            try:
                line = self._input(f"{self.command_line.translate(messages.PROMPT)} ")
            except EOFError:
                break
            except KeyboardInterrupt:
                print()
                break

            raw = (line or "").strip()
            if is_meta_command(raw):
                try:
                    cmd = parse_shell_command(raw)
                    self._dispatch(cmd.name, cmd.args)
                except ValueError as exc:
                    print(f"Error: {exc}")
                continue

            self.command_line.set_text(raw)
            self.command_line.press_enter()
            self._flush_messages()
            self._run_pending()

        for pending in self.execution_queue.close():
            logger.warning("Discarding queued command %r on shutdown", pending)
        self.command_line.close()
        return 0

    def _dispatch(self, name: str, args: dict[str, str | None]) -> None:
        if name == "help":
            print_help()
            return
        if name == "exit":
            self._running = False
            return
        if name == "history":
            print_history(
                self.command_line.history.newest_first(),
                self.command_line.translate(messages.NO_HISTORY),
            )
            return
        if name == "messages":
            print_log_lines(self.command_line.log.lines)
            self._printed = len(self.command_line.log)
            return
        if name == "locale":
            locale = args.get("locale")
            if locale is None:
                print(f"Locale: {self.localization.locale} (available: {', '.join(self.localization.available_locales)})")
                return
            self.localization.set_locale(locale)
            print(f"Locale: {self.localization.locale}")
            return

        raise ValueError(f"Unknown shell command: /{name}")

    def _flush_messages(self) -> None:
        lines = self.command_line.log.lines
        print_log_lines(lines[self._printed:])
        self._printed = len(lines)

    def _run_pending(self) -> None:
        for pending in self.execution_queue.drain():
            record = self.document_manager.send_string_to_execute(pending)
            if record is not None and not record.ok:
                print(f"! {record.command} failed: {record.error}")
