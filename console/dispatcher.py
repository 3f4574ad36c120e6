from __future__ import annotations

import logging

from console import messages
from console.errors import DispatchError, EmptyNoHistoryError, UnknownCommandError
from console.history import HistoryTracker
from console.message_log import MessageLog
from interfaces.command_line import CommandRegistry, ExecutionSink, LocalizationProvider, RegisteredCommand


logger = logging.getLogger(__name__)


def command_token(command_line: str) -> str:
    parts = (command_line or "").split()
    return parts[0].upper() if parts else ""


class CommandDispatcher:
    def __init__(
        self,
        registry: CommandRegistry,
        sink: ExecutionSink,
        localization: LocalizationProvider,
        history: HistoryTracker,
        log: MessageLog,
    ) -> None:
        self.registry = registry
        self.sink = sink
        self.localization = localization
        self.history = history
        self.log = log
        self.last_executed: str | None = None

    def resolve(self, command_line: str) -> RegisteredCommand | None:
        key = command_token(command_line)
        if not key:
            return None
        return self.registry.lookup(key)

    def execute(self, raw_text: str) -> RegisteredCommand:
        """
        Resolve and forward one confirmed line.

        Raises EmptyNoHistoryError / UnknownCommandError / DispatchError
        before touching history, the log or the last executed command. Only a
        line the sink accepted is recorded; completion is never awaited.
        """
        command_line = (raw_text or "").strip()
        if not command_line:
            if self.last_executed is None:
                raise EmptyNoHistoryError()
            command_line = self.last_executed

        command = self.resolve(command_line)
        if command is None:
            logger.info("Unknown command: %s", command_line)
            raise UnknownCommandError(command_line)

        logger.info("Dispatching %s (%s)", command.global_name, command_line)
        try:
            self.sink.submit(command_line)
        except Exception as exc:
            logger.exception("Execution sink rejected %r", command_line)
            raise DispatchError(command_line) from exc

        # Only a submitted line reaches history and the log.
        self.history.push(command.global_name)
        self.last_executed = command.global_name

        self.log.history_echo(command_line, prompt=self._t(messages.PROMPT))
        executed = self._t(messages.EXECUTED)
        self.log.info(f"{executed}: {command.local_name}", key=messages.EXECUTED, argument=command.local_name)
        return command

    def _t(self, key: str) -> str:
        return self.localization.translate(key, fallback=messages.FALLBACKS.get(key))
