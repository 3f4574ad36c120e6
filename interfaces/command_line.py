from __future__ import annotations

from typing import Callable, Protocol, Sequence


class RegisteredCommand(Protocol):
    global_name: str
    local_name: str


class CommandMatch(Protocol):
    command: RegisteredCommand
    group: str


class CommandRegistry(Protocol):
    def lookup(self, key: str) -> RegisteredCommand | None:
        ...

    def search_by_prefix(self, text: str) -> Sequence[CommandMatch]:
        ...


class ExecutionSink(Protocol):
    def submit(self, command_line: str) -> None:
        ...


LocaleListener = Callable[[str], None]


class LocalizationProvider(Protocol):
    def translate(self, key: str, fallback: str | None = None) -> str:
        ...

    def describe_command(self, group: str, command_id: str) -> str:
        ...

    def add_locale_listener(self, listener: LocaleListener) -> None:
        ...

    def remove_locale_listener(self, listener: LocaleListener) -> None:
        ...
