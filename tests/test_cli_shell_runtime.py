from __future__ import annotations

from contextlib import redirect_stdout
import io
import unittest
from typing import Iterable
from unittest.mock import Mock

from cli.shell import CliShell
from console.command_line import CommandLine
from services.command_stack import CommandStack
from services.document_manager import DocumentManager
from services.execution_queue import ExecutionQueue
from services.localization import Localization


def _scripted(lines: Iterable[str]):
    pending = list(lines)

    def _input(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return _input


class CliShellRuntimeTests(unittest.TestCase):
    def _shell(self, lines: Iterable[str], handler: Mock | None = None) -> tuple[CliShell, DocumentManager]:
        stack = CommandStack()
        stack.add_command("ACAD", "LINE", handler=handler or Mock())
        stack.add_command("ACAD", "ZOOM")
        localization = Localization()
        queue = ExecutionQueue()
        manager = DocumentManager(commands=stack)
        command_line = CommandLine(stack, queue, localization)
        shell = CliShell(command_line, queue, manager, localization, input_fn=_scripted(lines))
        return shell, manager

    def test_commands_execute_and_empty_line_repeats_last(self) -> None:
        handler = Mock()
        shell, manager = self._shell(["LINE 0,0 10,10", "", "frobnicate", "/history", "/exit"], handler)
        out = io.StringIO()
        with redirect_stdout(out):
            code = shell.run()

        self.assertEqual(code, 0)
        self.assertEqual([r.command for r in manager.records], ["LINE", "LINE"])
        self.assertEqual(handler.call_count, 2)
        text = out.getvalue()
        self.assertIn("> LINE 0,0 10,10", text)
        self.assertIn("Executed: LINE", text)
        self.assertIn("! Unknown command: frobnicate", text)
        self.assertIn("  1. LINE", text)
        self.assertEqual(manager.records[1].args, ())
        self.assertTrue(shell.command_line.closed)

    def test_empty_line_without_history_reports_no_last(self) -> None:
        shell, manager = self._shell([""])
        out = io.StringIO()
        with redirect_stdout(out):
            shell.run()
        self.assertIn("(no last command)", out.getvalue())
        self.assertNotIn("! (no last command)", out.getvalue())
        self.assertEqual(manager.records, [])

    def test_handler_failure_is_printed(self) -> None:
        shell, _ = self._shell(["LINE"], Mock(side_effect=RuntimeError("no document")))
        out = io.StringIO()
        with redirect_stdout(out):
            shell.run()
        self.assertIn("! LINE failed: no document", out.getvalue())

    def test_locale_switch_and_bad_meta_command(self) -> None:
        shell, _ = self._shell(["/locale zh", "ZOOM", "/locale xx", "/nope"])
        out = io.StringIO()
        with redirect_stdout(out):
            shell.run()
        text = out.getvalue()
        self.assertIn("Locale: zh", text)
        self.assertIn("已执行: ZOOM", text)
        self.assertIn("Error: Unknown locale", text)
        self.assertIn("Error: Unknown shell command: /nope", text)

    def test_empty_history_label(self) -> None:
        shell, _ = self._shell(["/history"])
        out = io.StringIO()
        with redirect_stdout(out):
            shell.run()
        self.assertIn("(no history)", out.getvalue())


if __name__ == "__main__":
    unittest.main()
