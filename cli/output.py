from __future__ import annotations

from typing import Iterable, Sequence

from console.message_log import LogKind, LogLine


def print_help() -> None:
    print("Type a command name (e.g. LINE, CIRCLE 10) and press Enter.")
    print("An empty line repeats the last command.")
    print("Shell commands:")
    print("  /help")
    print("  /exit")
    print("  /history")
    print("  /messages")
    print("  /locale [name]")


def format_log_line(line: LogLine) -> str:
    if line.kind is LogKind.ERROR:
        return f"! {line.text}"
    return line.text


def print_log_lines(lines: Iterable[LogLine]) -> None:
    for line in lines:
        print(format_log_line(line))


def print_history(entries: Sequence[str], empty_label: str) -> None:
    if not entries:
        print(empty_label)
        return
    for idx, entry in enumerate(entries, start=1):
        print(f"  {idx}. {entry}")
