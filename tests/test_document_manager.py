from __future__ import annotations

import unittest
from unittest.mock import Mock

from services.command_stack import CommandStack
from services.document_manager import DocumentManager


class DocumentManagerTests(unittest.IsolatedAsyncioTestCase):
    def _manager(self, handler: Mock) -> DocumentManager:
        stack = CommandStack()
        stack.add_command("ACAD", "LINE", handler=handler)
        stack.add_command("ACAD", "PAN")
        return DocumentManager(commands=stack)

    async def test_execute_passes_arguments_to_handler(self) -> None:
        handler = Mock()
        manager = self._manager(handler)
        await manager.execute("line 0,0 10,10")
        handler.assert_called_once_with(("0,0", "10,10"))
        self.assertEqual(len(manager.records), 1)
        self.assertTrue(manager.records[0].ok)
        self.assertEqual(manager.records[0].command, "LINE")

    async def test_handler_failure_is_recorded(self) -> None:
        handler = Mock(side_effect=RuntimeError("no document open"))
        manager = self._manager(handler)
        record = manager.send_string_to_execute("LINE")
        assert record is not None
        self.assertFalse(record.ok)
        self.assertEqual(record.error, "no document open")

    async def test_command_without_handler_still_recorded(self) -> None:
        manager = self._manager(Mock())
        record = manager.send_string_to_execute("PAN")
        assert record is not None
        self.assertTrue(record.ok)
        self.assertEqual(record.args, ())

    async def test_unresolved_or_blank_lines_are_dropped(self) -> None:
        manager = self._manager(Mock())
        self.assertIsNone(manager.send_string_to_execute("frobnicate"))
        self.assertIsNone(manager.send_string_to_execute("   "))
        self.assertEqual(manager.records, [])


if __name__ == "__main__":
    unittest.main()
