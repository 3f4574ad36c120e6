from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

from console import messages


class LogKind(str, Enum):
    INFO = "info"
    ERROR = "error"
    HISTORY_ECHO = "history_echo"


@dataclass(frozen=True)
class LogLine:
    text: str
    kind: LogKind
    localization_key: str | None = None
    argument: str | None = None
    separator: str = ": "


Translate = Callable[[str], str]


def splice(prefix: str, argument: str | None, separator: str) -> str:
    if argument is None:
        return prefix
    return f"{prefix}{separator}{argument}"


class MessageLog:
    """Append-only message panel model; only console teardown clears it."""

    def __init__(self) -> None:
        self._lines: list[LogLine] = []
        self.revision = 0
        self.locale_revision = 0

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[LogLine, ...]:
        return tuple(self._lines)

    def info(self, text: str, key: str | None = None, argument: str | None = None) -> LogLine:
        return self._append(LogLine(text=text, kind=LogKind.INFO, localization_key=key, argument=argument))

    def error(self, text: str, key: str | None = None, argument: str | None = None) -> LogLine:
        return self._append(LogLine(text=text, kind=LogKind.ERROR, localization_key=key, argument=argument))

    def history_echo(self, command_line: str, prompt: str = ">") -> LogLine:
        return self._append(
            LogLine(
                text=splice(prompt, command_line, " "),
                kind=LogKind.HISTORY_ECHO,
                localization_key=messages.PROMPT,
                argument=command_line,
                separator=" ",
            )
        )

    def relocalize(self, translate: Translate) -> None:
        relocalized: list[LogLine] = []
        for line in self._lines:
            if not line.localization_key:
                relocalized.append(line)
                continue
            prefix = translate(line.localization_key)
            relocalized.append(replace(line, text=splice(prefix, line.argument, line.separator)))
        self._lines = relocalized
        self.locale_revision += 1

    def clear(self) -> None:
        self._lines = []
        self.revision += 1

    def _append(self, line: LogLine) -> LogLine:
        self._lines.append(line)
        self.revision += 1
        return line
