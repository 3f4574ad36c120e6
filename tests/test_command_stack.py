from __future__ import annotations

import unittest

from services.command_stack import SYSTEM_GROUP, USER_GROUP, CommandStack, build_default_command_stack


class CommandStackTests(unittest.TestCase):
    def test_lookup_is_case_insensitive_and_checks_local_names(self) -> None:
        stack = CommandStack()
        stack.add_command(SYSTEM_GROUP, "circle", local_name="kreis")
        self.assertEqual(stack.lookup("Circle").global_name, "CIRCLE")
        self.assertEqual(stack.lookup("KREIS").global_name, "CIRCLE")
        self.assertIsNone(stack.lookup("square"))
        self.assertIsNone(stack.lookup(""))

    def test_search_by_prefix_keeps_registration_order(self) -> None:
        stack = CommandStack()
        stack.add_command(SYSTEM_GROUP, "LINE")
        stack.add_command(SYSTEM_GROUP, "CIRCLE")
        stack.add_command(USER_GROUP, "LAYOUT")
        matches = stack.search_by_prefix("l")
        self.assertEqual([(m.group, m.command.global_name) for m in matches], [("ACAD", "LINE"), ("USER", "LAYOUT")])
        self.assertEqual(stack.search_by_prefix("  "), [])

    def test_add_rejects_duplicates_and_bad_names(self) -> None:
        stack = CommandStack()
        stack.add_command(SYSTEM_GROUP, "LINE")
        with self.assertRaisesRegex(ValueError, "already registered"):
            stack.add_command(USER_GROUP, "line")
        with self.assertRaises(ValueError):
            stack.add_command(SYSTEM_GROUP, "two words")
        with self.assertRaises(ValueError):
            stack.add_command("", "ARC")

    def test_remove_command(self) -> None:
        stack = CommandStack()
        stack.add_command(SYSTEM_GROUP, "LINE")
        self.assertTrue(stack.remove_command("acad", "line"))
        self.assertFalse(stack.remove_command("acad", "line"))
        self.assertIsNone(stack.lookup("LINE"))

    def test_default_stack_wires_handlers(self) -> None:
        calls: list[str] = []
        stack = build_default_command_stack(lambda name: (lambda args: calls.append(name)))
        command = stack.lookup("ZOOM")
        assert command is not None and command.handler is not None
        command.handler(["E"])
        self.assertEqual(calls, ["ZOOM"])


if __name__ == "__main__":
    unittest.main()
