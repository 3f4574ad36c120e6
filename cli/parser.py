from __future__ import annotations

from dataclasses import dataclass
import shlex


META_PREFIX = "/"


@dataclass(frozen=True)
class ParsedCommand:
    name: str
    args: dict[str, str | None]


def is_meta_command(line: str) -> bool:
    return (line or "").strip().startswith(META_PREFIX)


def parse_shell_command(line: str) -> ParsedCommand:
    raw = (line or "").strip()
    if not raw:
        raise ValueError("Empty command.")
    if not raw.startswith(META_PREFIX):
        raise ValueError("Shell commands must start with '/'.")

    parts = shlex.split(raw)
    if not parts:
        raise ValueError("Empty command.")

    cmd = parts[0][1:]
    rest = parts[1:]

    if cmd in {"help", "exit", "history", "messages"}:
        if rest:
            raise ValueError(f"/{cmd} does not take arguments.")
        return ParsedCommand(name=cmd, args={})

    if cmd == "locale":
        if len(rest) > 1:
            raise ValueError("/locale accepts at most one locale name.")
        return ParsedCommand(name=cmd, args={"locale": rest[0] if rest else None})

    raise ValueError(f"Unknown shell command: /{cmd}")
