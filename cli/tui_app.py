from __future__ import annotations

import asyncio
import logging

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from cli.command_line_widget import CommandLineWidget
from console.command_line import CommandLine
from services.document_manager import DocumentManager, ExecutionRecord
from services.execution_queue import ExecutionQueue
from services.localization import Localization


logger = logging.getLogger(__name__)


def _render_records(records: list[ExecutionRecord], limit: int = 10) -> str:
    lines = ["Drawing", "-------"]
    if not records:
        lines.append("(nothing executed yet)")
        return "\n".join(lines)
    for record in records[-limit:]:
        args = " ".join(record.args)
        status = "ok" if record.ok else f"failed: {record.error}"
        lines.append(f"{record.command} {args}".rstrip() + f"  [{status}, {record.duration_s:.3f}s]")
    return "\n".join(lines)


class CadCommandLineApp(App[None]):
    TITLE = "CAD Command Line"
    CANVAS_REFRESH_S = 0.5
    CSS = """
    Screen {
        background: #1e1e1e;
        color: #f2f2f2;
    }
    #canvas {
        height: 1fr;
        padding: 1 2;
    }
    """

    BINDINGS = [
        ("ctrl+l", "clear_messages", "Clear Messages"),
        ("f2", "next_locale", "Switch Locale"),
        ("ctrl+c", "quit", "Quit"),
    ]

    def __init__(
        self,
        command_line: CommandLine,
        execution_queue: ExecutionQueue,
        document_manager: DocumentManager,
        localization: Localization,
    ) -> None:
        super().__init__()
        self.command_line = command_line
        self.execution_queue = execution_queue
        self.document_manager = document_manager
        self.localization = localization
        self._executor_task: asyncio.Task[None] | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Static(id="canvas")
        yield CommandLineWidget(self.command_line, id="command-line")
        yield Footer()

    async def on_mount(self) -> None:
        self._executor_task = asyncio.create_task(self.execution_queue.run(self.document_manager.execute))
        widget = self.query_one(CommandLineWidget)
        widget.resize(self.size.width)
        self.set_interval(self.CANVAS_REFRESH_S, self._refresh_canvas)
        self._refresh_canvas()
        widget.focus_input()
        logger.info("TUI mounted")

    async def on_unmount(self) -> None:
        if self._executor_task is not None and not self._executor_task.done():
            self._executor_task.cancel()
            try:
                await self._executor_task
            except asyncio.CancelledError:
                pass
        self._executor_task = None
        for pending in self.execution_queue.close():
            logger.warning("Discarding queued command %r on shutdown", pending)
        self.command_line.close()

    def action_clear_messages(self) -> None:
        self.query_one(CommandLineWidget).clear_messages_panel()

    def action_next_locale(self) -> None:
        locale = self.localization.next_locale()
        logger.info("Switched locale to %s", locale)
        self.query_one(CommandLineWidget).refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        # Fires before compose finishes on startup; on_mount covers the first layout.
        for widget in self.query(CommandLineWidget):
            widget.resize(event.size.width)

    def on_click(self, event: events.Click) -> None:
        widget = self.query_one(CommandLineWidget)
        target = getattr(event, "widget", None)
        if target is not None and widget in target.ancestors_with_self:
            return
        widget.click_outside()

    def _refresh_canvas(self) -> None:
        self.query_one("#canvas", Static).update(_render_records(self.document_manager.records))
