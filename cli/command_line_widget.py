from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input, OptionList, RichLog, Static
from textual.widgets.option_list import Option

from console.command_line import CommandLine
from console.message_log import LogKind
from console.view import CommandLineView, render_view


class CommandInput(Input):
    class Navigate(Message):
        def __init__(self, direction: int) -> None:
            self.direction = direction
            super().__init__()

    class Cancel(Message):
        pass

    class FocusGained(Message):
        pass

    def key_up(self) -> None:
        self.post_message(self.Navigate(-1))

    def key_down(self) -> None:
        self.post_message(self.Navigate(1))

    def key_escape(self) -> None:
        self.post_message(self.Cancel())

    def on_focus(self) -> None:
        self.post_message(self.FocusGained())


class CommandLineWidget(Widget):
    """Textual projection of a CommandLine: every event mutates the model, then the view is re-applied."""

    DEFAULT_CSS = """
    CommandLineWidget {
        dock: bottom;
        height: auto;
        align-horizontal: center;
        margin-bottom: 1;
    }
    CommandLineWidget #popup {
        height: auto;
        border: round $secondary;
        background: #333333;
        color: #ffffff;
        display: none;
    }
    CommandLineWidget #messages {
        border: round $accent;
        background: #333333;
        color: #ffffff;
        display: none;
    }
    CommandLineWidget #bar {
        height: 3;
        border: round #7f7f7f;
        background: #e6e6e6;
        color: #111111;
    }
    CommandLineWidget #glyph {
        width: 3;
        content-align: center middle;
        text-style: bold;
    }
    CommandLineWidget #history-toggle, CommandLineWidget #messages-toggle {
        min-width: 3;
        width: 3;
        height: 1;
        border: none;
        background: transparent;
    }
    CommandLineWidget #cmd {
        width: 1fr;
        height: 1;
        border: none;
        background: transparent;
        padding: 0 1;
    }
    CommandLineWidget #chips {
        width: auto;
        height: 1;
    }
    CommandLineWidget .chip {
        min-width: 3;
        height: 1;
        border: none;
        margin: 0 1 0 0;
        background: #f7f7f7;
        color: #222222;
    }
    """

    def __init__(self, command_line: CommandLine, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.command_line = command_line
        self._popup_values: list[str] = []
        self._rendered_messages = 0
        self._rendered_log_revision = -1
        self._rendered_locale_revision = 0
        self._rendered_chips: tuple[tuple[str, str], ...] = ()
        self._chip_generation = 0
        self._chip_buttons: dict[str, str] = {}
        self._cleared_at = 0

    def compose(self) -> ComposeResult:
        yield OptionList(id="popup")
        yield RichLog(id="messages", wrap=True, highlight=False)
        with Horizontal(id="bar"):
            yield Static(">", id="glyph")
            yield Button("▾", id="history-toggle")
            yield CommandInput(id="cmd")
            yield Horizontal(id="chips")
            yield Button("▴", id="messages-toggle")

    def on_mount(self) -> None:
        cfg = self.command_line.config
        popup = self.query_one("#popup", OptionList)
        popup.can_focus = False
        popup.styles.max_height = cfg.popup_max_rows + 2
        messages = self.query_one("#messages", RichLog)
        messages.can_focus = False
        messages.styles.height = cfg.message_panel_rows + 2
        for button in self.query(Button):
            button.can_focus = False
        self.refresh_view()

    # ----- public hooks for the app -----
    def resize(self, viewport_width: int) -> None:
        self.command_line.resize(viewport_width)
        self.refresh_view()

    def click_outside(self) -> None:
        self.command_line.click_outside()
        self.refresh_view()

    def clear_messages_panel(self) -> None:
        """Empty the visible panel; the log keeps its lines and later relocalizes skip them."""
        self.query_one("#messages", RichLog).clear()
        self._cleared_at = len(self.command_line.log)
        self._rendered_messages = self._cleared_at

    def focus_input(self) -> None:
        self.query_one("#cmd", CommandInput).focus()

    # ----- events -----
    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.command_line.handle_input(event.value or "")
        self.refresh_view()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.command_line.press_enter()
        self.refresh_view()

    def on_command_input_navigate(self, event: CommandInput.Navigate) -> None:
        event.stop()
        if event.direction < 0:
            self.command_line.press_up()
        else:
            self.command_line.press_down()
        self.refresh_view()

    def on_command_input_cancel(self, event: CommandInput.Cancel) -> None:
        event.stop()
        self.command_line.press_escape()
        self.refresh_view()

    def on_command_input_focus_gained(self, event: CommandInput.FocusGained) -> None:
        event.stop()
        self.command_line.focus_input()
        self.refresh_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        button_id = event.button.id or ""
        if button_id == "history-toggle":
            self.command_line.toggle_history()
        elif button_id == "messages-toggle":
            self.command_line.toggle_messages()
        elif button_id in self._chip_buttons:
            self.command_line.activate_chip(self._chip_buttons[button_id])
        self.refresh_view()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        index = event.option_index
        if not (0 <= index < len(self._popup_values)) or not self._popup_values[index]:
            return
        self.command_line.select_popup_item(self._popup_values[index])
        self.refresh_view()
        self.focus_input()

    # ----- view -----
    def refresh_view(self) -> None:
        self.apply_view(render_view(self.command_line))

    def apply_view(self, view: CommandLineView) -> None:
        self.display = view.visible

        cmd = self.query_one("#cmd", CommandInput)
        if cmd.value != view.text:
            cmd.value = view.text
        if view.cursor_at_end:
            cmd.cursor_position = len(cmd.value)
        cmd.placeholder = view.placeholder

        history_toggle = self.query_one("#history-toggle", Button)
        history_toggle.tooltip = view.history_button_title
        messages_toggle = self.query_one("#messages-toggle", Button)
        messages_toggle.tooltip = view.messages_button_title

        self._apply_chips(view)
        self._apply_popup(view)
        self._apply_messages(view)

        self.query_one("#bar").styles.width = view.bar_width
        self.query_one("#popup").styles.width = view.popup_width
        self.query_one("#messages").styles.width = view.popup_width

    def _apply_chips(self, view: CommandLineView) -> None:
        signature = tuple((chip.id, chip.label) for chip in view.chips)
        if signature == self._rendered_chips:
            return
        container = self.query_one("#chips", Horizontal)
        container.remove_children()
        # Removal completes later, so every render gets fresh button ids.
        self._chip_generation += 1
        self._chip_buttons = {}
        buttons: list[Button] = []
        for chip in view.chips:
            button_id = f"chip-{self._chip_generation}-{chip.id}"
            self._chip_buttons[button_id] = chip.id
            button = Button(chip.label, id=button_id, classes="chip")
            button.can_focus = False
            buttons.append(button)
        if buttons:
            container.mount_all(buttons)
        self._rendered_chips = signature

    def _apply_popup(self, view: CommandLineView) -> None:
        popup = self.query_one("#popup", OptionList)
        popup.display = view.list_popup_open
        if not view.list_popup_open:
            self._popup_values = []
            return

        popup.clear_options()
        self._popup_values = [item.value for item in view.popup_items]
        popup.add_options(
            [
                Option(Text(item.label, style="bold"), id=f"item-{idx}", disabled=not item.enabled)
                for idx, item in enumerate(view.popup_items)
            ]
        )
        selected = next((idx for idx, item in enumerate(view.popup_items) if item.selected), None)
        if selected is not None:
            popup.highlighted = selected

    def _apply_messages(self, view: CommandLineView) -> None:
        panel = self.query_one("#messages", RichLog)
        panel.display = view.messages_open

        if len(view.messages) < self._rendered_messages:
            # The log itself was reset, so an earlier panel clear no longer applies.
            self._cleared_at = 0
            panel.clear()
            self._rendered_messages = 0
        elif view.locale_revision != self._rendered_locale_revision:
            panel.clear()
            self._rendered_messages = self._cleared_at
        for message in view.messages[self._rendered_messages:]:
            style = "bold red" if message.kind is LogKind.ERROR else ""
            panel.write(Text(message.text, style=style))
        if view.log_revision != self._rendered_log_revision:
            panel.scroll_end(animate=False)
        self._rendered_messages = len(view.messages)
        self._rendered_log_revision = view.log_revision
        self._rendered_locale_revision = view.locale_revision
