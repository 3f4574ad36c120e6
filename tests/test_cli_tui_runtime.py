from __future__ import annotations

import asyncio
from types import SimpleNamespace
import unittest
from unittest.mock import Mock, patch

from cli.command_line_widget import CommandLineWidget
import cli.tui_app as tui_app
from console.popup_state import PopupMode
from console.command_line import CommandLine
from services.command_stack import build_default_command_stack
from services.document_manager import DocumentManager
from services.execution_queue import ExecutionQueue
from services.localization import Localization


def _event(**kwargs) -> SimpleNamespace:
    return SimpleNamespace(stop=Mock(), **kwargs)


class _Fixture:
    def __init__(self) -> None:
        self.stack = build_default_command_stack()
        self.localization = Localization()
        self.queue = ExecutionQueue()
        self.manager = DocumentManager(commands=self.stack)
        self.command_line = CommandLine(self.stack, self.queue, self.localization)


class CommandLineWidgetRuntimeTests(unittest.IsolatedAsyncioTestCase):
    def _widget(self) -> tuple[_Fixture, CommandLineWidget]:
        fx = _Fixture()
        widget = CommandLineWidget(fx.command_line)
        widget.refresh_view = Mock()  # type: ignore[method-assign]
        widget.focus_input = Mock()  # type: ignore[method-assign]
        return fx, widget

    async def test_input_changed_opens_autocomplete(self) -> None:
        fx, widget = self._widget()
        event = _event(value="li")
        widget.on_input_changed(event)  # type: ignore[arg-type]
        event.stop.assert_called_once()
        self.assertIs(fx.command_line.mode, PopupMode.AUTOCOMPLETE)
        widget.refresh_view.assert_called_once()

    async def test_submit_queues_command(self) -> None:
        fx, widget = self._widget()
        fx.command_line.set_text("LINE 0,0")
        widget.on_input_submitted(_event(value="LINE 0,0"))  # type: ignore[arg-type]
        self.assertEqual(fx.queue.drain(), ["LINE 0,0"])
        self.assertEqual(fx.command_line.get_text(), "")

    async def test_navigate_up_recalls_history(self) -> None:
        fx, widget = self._widget()
        fx.command_line.execute_command("ZOOM")
        widget.on_command_input_navigate(_event(direction=-1))  # type: ignore[arg-type]
        self.assertEqual(fx.command_line.get_text(), "ZOOM")

    async def test_cancel_logs_canceled(self) -> None:
        fx, widget = self._widget()
        fx.command_line.set_text("LINE")
        widget.on_command_input_cancel(_event())  # type: ignore[arg-type]
        self.assertEqual(fx.command_line.get_text(), "")
        self.assertEqual(fx.command_line.log.lines[-1].text, "*Cancel*")

    async def test_toggle_buttons_and_chip(self) -> None:
        fx, widget = self._widget()
        widget.on_button_pressed(_event(button=SimpleNamespace(id="history-toggle")))  # type: ignore[arg-type]
        self.assertIs(fx.command_line.mode, PopupMode.HISTORY)
        widget.on_button_pressed(_event(button=SimpleNamespace(id="messages-toggle")))  # type: ignore[arg-type]
        self.assertIs(fx.command_line.mode, PopupMode.MESSAGES)

        fx.command_line.render_command_line("Specify point", ["Undo"])
        widget._chip_buttons = {"chip-1-option-0": "option-0"}
        widget.on_button_pressed(_event(button=SimpleNamespace(id="chip-1-option-0")))  # type: ignore[arg-type]
        self.assertEqual(fx.command_line.get_text(), "Specify point Undo")

    async def test_option_selected_ignores_disabled_rows(self) -> None:
        fx, widget = self._widget()
        fx.command_line.toggle_history()
        widget._popup_values = [""]
        widget.on_option_list_option_selected(_event(option_index=0))  # type: ignore[arg-type]
        self.assertIs(fx.command_line.mode, PopupMode.HISTORY)
        widget.focus_input.assert_not_called()

    async def test_option_selected_fills_input_and_closes_popup(self) -> None:
        fx, widget = self._widget()
        fx.command_line.handle_input("c")
        widget._popup_values = ["CIRCLE", "CLEAR"]
        widget.on_option_list_option_selected(_event(option_index=1))  # type: ignore[arg-type]
        self.assertEqual(fx.command_line.get_text(), "CLEAR")
        self.assertIs(fx.command_line.mode, PopupMode.CLOSED)
        widget.focus_input.assert_called_once()


class CadCommandLineAppRuntimeTests(unittest.IsolatedAsyncioTestCase):
    def _app(self) -> tuple[_Fixture, tui_app.CadCommandLineApp]:
        fx = _Fixture()
        app = tui_app.CadCommandLineApp(
            command_line=fx.command_line,
            execution_queue=fx.queue,
            document_manager=fx.manager,
            localization=fx.localization,
        )
        return fx, app

    async def test_click_outside_closes_popups(self) -> None:
        _, app = self._app()
        widget = Mock()
        with patch.object(app, "query_one", return_value=widget):
            app.on_click(SimpleNamespace(widget=SimpleNamespace(ancestors_with_self=[Mock()])))  # type: ignore[arg-type]
        widget.click_outside.assert_called_once()

    async def test_click_inside_keeps_popups(self) -> None:
        _, app = self._app()
        widget = Mock()
        with patch.object(app, "query_one", return_value=widget):
            app.on_click(SimpleNamespace(widget=SimpleNamespace(ancestors_with_self=[widget])))  # type: ignore[arg-type]
        widget.click_outside.assert_not_called()

    async def test_next_locale_relocalizes_console(self) -> None:
        fx, app = self._app()
        widget = Mock()
        with patch.object(app, "query_one", return_value=widget):
            app.action_next_locale()
        self.assertEqual(fx.localization.locale, "zh")
        self.assertEqual(fx.command_line.placeholder, "输入命令")
        widget.refresh_view.assert_called_once()

    async def test_unmount_cancels_executor_and_closes(self) -> None:
        fx, app = self._app()
        app._executor_task = asyncio.create_task(fx.queue.run(fx.manager.execute))
        await asyncio.sleep(0)
        fx.queue.submit("LINE")

        await app.on_unmount()

        self.assertIsNone(app._executor_task)
        self.assertTrue(fx.queue.closed)
        self.assertTrue(fx.command_line.closed)

    def test_render_records_lists_recent_commands(self) -> None:
        fx = _Fixture()
        fx.manager.send_string_to_execute("LINE 0,0 1,1")
        text = tui_app._render_records(fx.manager.records)
        self.assertIn("LINE 0,0 1,1", text)
        self.assertIn("ok", text)
        self.assertIn("nothing executed", tui_app._render_records([]))


if __name__ == "__main__":
    unittest.main()
