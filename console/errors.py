from __future__ import annotations

from console import messages


class CommandLineError(Exception):
    """Recoverable console failure; reported as a message line, never raised to callers."""

    message_key: str = ""
    is_error: bool = True
    argument: str | None = None


class EmptyNoHistoryError(CommandLineError):
    message_key = messages.NO_LAST
    is_error = False

    def __init__(self) -> None:
        super().__init__(messages.FALLBACKS[messages.NO_LAST])


class UnknownCommandError(CommandLineError):
    message_key = messages.UNKNOWN_COMMAND

    def __init__(self, command_line: str) -> None:
        super().__init__(f"{messages.FALLBACKS[messages.UNKNOWN_COMMAND]}: {command_line}")
        self.argument = command_line


class DispatchError(CommandLineError):
    message_key = messages.DISPATCH_FAILED

    def __init__(self, command_line: str) -> None:
        super().__init__(f"{messages.FALLBACKS[messages.DISPATCH_FAILED]}: {command_line}")
        self.argument = command_line
