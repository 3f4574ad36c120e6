from __future__ import annotations

import asyncio
from dataclasses import dataclass
import logging
import time

from services.command_stack import CommandStack


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionRecord:
    command: str
    args: tuple[str, ...]
    started_at: float
    duration_s: float
    ok: bool
    error: str | None = None


class DocumentManager:
    """Runs command lines taken off the execution queue against the command stack."""

    def __init__(self, commands: CommandStack) -> None:
        self.commands = commands
        self.records: list[ExecutionRecord] = []

    def send_string_to_execute(self, command_line: str) -> ExecutionRecord | None:
        parts = (command_line or "").split()
        if not parts:
            return None

        command = self.commands.lookup(parts[0])
        if command is None:
            logger.warning("Dropping unresolved command line %r", command_line)
            return None

        args = tuple(parts[1:])
        started = time.time()
        t0 = time.perf_counter()
        try:
            if command.handler is not None:
                command.handler(args)
        except Exception as exc:
            logger.exception("Command %s failed", command.global_name)
            record = ExecutionRecord(
                command=command.global_name,
                args=args,
                started_at=started,
                duration_s=time.perf_counter() - t0,
                ok=False,
                error=str(exc),
            )
        else:
            record = ExecutionRecord(
                command=command.global_name,
                args=args,
                started_at=started,
                duration_s=time.perf_counter() - t0,
                ok=True,
            )
            logger.info("Command %s finished in %.3fs", command.global_name, record.duration_s)
        self.records.append(record)
        return record

    async def execute(self, command_line: str) -> None:
        await asyncio.to_thread(self.send_string_to_execute, command_line)
