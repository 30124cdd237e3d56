"""Add-dish form modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from menu_manager.config import CURRENCY_SYMBOL, DEFAULT_COURSE
from menu_manager.constant import COURSES
from menu_manager.errors import MenuError
from menu_manager.models import Dish
from menu_manager.rendering import badge_style


class AddDishModal(ModalScreen[Dish | None]):
    """Collect name, description, course and price, then submit through ``on_submit``."""

    CSS = """
    AddDishModal {
        align: center middle;
        background: $background 60%;
    }

    #add-dish-dialog {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #add-dish-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #add-dish-body {
        color: white;
        margin-bottom: 1;
    }

    #add-dish-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #add-dish-help {
        color: #dddddd;
    }
    """

    FIELDS: tuple[str, ...] = ("name", "description", "course", "price")
    _LABELS = {
        "name": "Name",
        "description": "Description",
        "course": "Category",
        "price": f"Price ({CURRENCY_SYMBOL})",
    }
    _PLACEHOLDERS = {
        "name": "Enter dish name",
        "description": "Enter description",
        "price": "Enter price in Rands",
    }
    _TEXT_LIMIT = 200

    cursor_index = reactive(0)

    def __init__(self, on_submit: Callable[[str, str, str, str], Dish]) -> None:
        super().__init__()
        self.on_submit = on_submit
        self.values: dict[str, str] = {"name": "", "description": "", "price": ""}
        self.course = DEFAULT_COURSE
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="add-dish-dialog"):
            yield Static("Add New Dish", id="add-dish-title")
            yield Static(id="add-dish-body")
            yield Static(id="add-dish-error")
            yield Static(
                "Tab/↑/↓ move. ←/→ change category. Enter add to menu. Esc cancel.",
                id="add-dish-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    @property
    def current_field(self) -> str:
        return self.FIELDS[self.cursor_index]

    def on_key(self, event: Key) -> None:
        if event.key == "escape":
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self._submit()
            event.stop()
            return

        if event.key in {"tab", "down"}:
            self._move_cursor(1)
            event.stop()
            return

        if event.key in {"shift+tab", "up"}:
            self._move_cursor(-1)
            event.stop()
            return

        field = self.current_field
        if field == "course":
            if event.key in {"left", "right"}:
                self._cycle_course(1 if event.key == "right" else -1)
            event.stop()
            return

        if event.key == "backspace":
            if self.values[field]:
                self.values[field] = self.values[field][:-1]
                self.error = ""
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.values[field]) < self._TEXT_LIMIT:
                self.values[field] += event.character
            self.error = ""
            self._refresh_content()
            event.stop()

    def _move_cursor(self, delta: int) -> None:
        self.cursor_index = (self.cursor_index + delta) % len(self.FIELDS)
        self._refresh_content()

    def _cycle_course(self, delta: int) -> None:
        idx = COURSES.index(self.course)
        self.course = COURSES[(idx + delta) % len(COURSES)]
        self._refresh_content()

    def _submit(self) -> None:
        try:
            dish = self.on_submit(
                self.values["name"],
                self.values["description"],
                self.course,
                self.values["price"],
            )
        except MenuError as exc:
            self.error = str(exc)
            self._refresh_content()
            return

        self.dismiss(dish)

    def _refresh_content(self) -> None:
        body = self.query_one("#add-dish-body", Static)
        error_widget = self.query_one("#add-dish-error", Static)

        content = Text(style="white")
        for idx, field in enumerate(self.FIELDS):
            if idx > 0:
                content.append("\n")
            is_current = idx == self.cursor_index
            pointer = "➤ " if is_current else "  "
            content.append(f"{pointer}{self._LABELS[field]}: ", style="bold white" if is_current else "white")

            if field == "course":
                for course in COURSES:
                    if course == self.course:
                        content.append(f" {course} ", style=badge_style(course))
                    else:
                        content.append(f" {course} ", style="dim")
                    content.append(" ")
                continue

            value = self.values[field]
            if value:
                content.append(value)
            elif not is_current:
                content.append(self._PLACEHOLDERS[field], style="dim")
            if is_current:
                content.append("|", style="bold")

        body.update(content)
        error_widget.update(self.error or "")
