"""Delete confirmation modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from menu_manager.models import Dish
from menu_manager.rendering import format_dish_label


class ConfirmDeleteModal(ModalScreen[bool]):
    """Ask before a dish is removed from the menu."""

    BINDINGS = [
        ("y", "confirm", "Delete"),
        ("enter", "confirm", "Delete"),
        ("n", "cancel", "Keep"),
        ("q", "cancel", "Keep"),
        ("escape", "cancel", "Keep"),
    ]

    CSS = """
    ConfirmDeleteModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 64;
        height: auto;
        border: round $error;
        background: $panel;
        padding: 1 2;
    }

    #confirm-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #confirm-body {
        color: white;
        margin-bottom: 1;
    }

    #confirm-help {
        color: #dddddd;
    }
    """

    def __init__(self, dish: Dish) -> None:
        super().__init__()
        self.dish = dish

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static("Delete Dish", id="confirm-title")
            yield Static(id="confirm-body")
            yield Static("Y/Enter delete. N/Esc/q keep.", id="confirm-help")

    def on_mount(self) -> None:
        body = Text("Remove this dish from the menu?\n\n", style="white")
        body.append_text(format_dish_label(self.dish))
        self.query_one("#confirm-body", Static).update(body)

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
