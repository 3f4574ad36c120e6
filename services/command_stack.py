from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Sequence


logger = logging.getLogger(__name__)

SYSTEM_GROUP = "ACAD"
USER_GROUP = "USER"

CommandHandler = Callable[[Sequence[str]], None]

# (group, global name, local name)
DEFAULT_COMMANDS: tuple[tuple[str, str, str], ...] = (
    (SYSTEM_GROUP, "ARC", "ARC"),
    (SYSTEM_GROUP, "CIRCLE", "CIRCLE"),
    (SYSTEM_GROUP, "CLEAR", "CLEAR"),
    (SYSTEM_GROUP, "ERASE", "ERASE"),
    (SYSTEM_GROUP, "LINE", "LINE"),
    (SYSTEM_GROUP, "LAYER", "LAYER"),
    (SYSTEM_GROUP, "OPEN", "OPEN"),
    (SYSTEM_GROUP, "PAN", "PAN"),
    (SYSTEM_GROUP, "PLINE", "PLINE"),
    (SYSTEM_GROUP, "REGEN", "REGEN"),
    (SYSTEM_GROUP, "SELECT", "SELECT"),
    (SYSTEM_GROUP, "ZOOM", "ZOOM"),
)


@dataclass(frozen=True)
class Command:
    global_name: str
    local_name: str
    handler: CommandHandler | None = None


@dataclass(frozen=True)
class CommandMatch:
    command: Command
    group: str


class CommandStack:
    """In-process command registry; lookups and prefix searches are case-insensitive."""

    def __init__(self) -> None:
        self._groups: dict[str, dict[str, Command]] = {}

    @property
    def groups(self) -> list[str]:
        return list(self._groups)

    def add_command(
        self,
        group: str,
        global_name: str,
        local_name: str | None = None,
        handler: CommandHandler | None = None,
    ) -> Command:
        group_key = (group or "").strip().upper()
        name = (global_name or "").strip().upper()
        if not group_key:
            raise ValueError("Command group must be a non-empty string.")
        if not name or any(ch.isspace() for ch in name):
            raise ValueError(f"Command name must be a single non-empty token, got {global_name!r}")
        if self.lookup(name) is not None:
            raise ValueError(f"Command {name} is already registered.")

        local = (local_name or name).strip().upper()
        command = Command(global_name=name, local_name=local, handler=handler)
        self._groups.setdefault(group_key, {})[name] = command
        logger.debug("Registered command %s in group %s", name, group_key)
        return command

    def remove_command(self, group: str, global_name: str) -> bool:
        commands = self._groups.get((group or "").strip().upper())
        if not commands:
            return False
        return commands.pop((global_name or "").strip().upper(), None) is not None

    def lookup(self, key: str) -> Command | None:
        name = (key or "").strip().upper()
        if not name:
            return None
        for commands in self._groups.values():
            command = commands.get(name)
            if command is not None:
                return command
        for commands in self._groups.values():
            for command in commands.values():
                if command.local_name == name:
                    return command
        return None

    def search_by_prefix(self, text: str) -> list[CommandMatch]:
        prefix = (text or "").strip().upper()
        if not prefix:
            return []
        matches: list[CommandMatch] = []
        for group, commands in self._groups.items():
            for name, command in commands.items():
                if name.startswith(prefix):
                    matches.append(CommandMatch(command=command, group=group))
        return matches


def build_default_command_stack(handler_for: Callable[[str], CommandHandler | None] | None = None) -> CommandStack:
    stack = CommandStack()
    for group, global_name, local_name in DEFAULT_COMMANDS:
        handler = handler_for(global_name) if handler_for is not None else None
        stack.add_command(group, global_name, local_name, handler=handler)
    return stack
