"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from menu_manager.add_dish_modal import AddDishModal
from menu_manager.config import APP_SUBTITLE, CHEF_GREETING, DEBUG_LOG_PATH, RESTAURANT_NAME
from menu_manager.confirm_modal import ConfirmDeleteModal
from menu_manager.constant import ALL_FILTER, COURSE_COLORS, COURSE_PLURAL_LABELS, COURSES
from menu_manager.data import SEED_MENU
from menu_manager.errors import MenuError
from menu_manager.models import Dish
from menu_manager.rendering import (
    badge_style,
    filter_label,
    format_average,
    format_dish_label,
    format_price,
    section_title,
)
from menu_manager.store import MenuStore

HOME_VIEW = "home"
MENU_VIEW = "menu"
FILTERS: tuple[str, ...] = (ALL_FILTER, *COURSES)


class MenuManagerApp(App):
    """A Textual app for viewing menu statistics and adding or removing dishes."""

    TITLE = RESTAURANT_NAME
    SUB_TITLE = APP_SUBTITLE

    CSS = """
    Screen {
        layout: vertical;
    }

    #nav-bar {
        height: 1;
        padding: 0 1;
        background: $surface;
    }

    #home-view, #menu-view {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #home-header, #stats-summary, #average-prices, #filter-bar {
        margin-bottom: 1;
    }

    #recent-dishes {
        height: auto;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    active_view = reactive(HOME_VIEW)
    course_filter = reactive(ALL_FILTER)
    selected_index = reactive(0)

    BINDINGS = [
        ("up", "move_selection(-1)", "Previous dish"),
        ("down", "move_selection(1)", "Next dish"),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, store: MenuStore | None = None, debug_log_path: str | Path | None = None) -> None:
        super().__init__()
        self.store = store if store is not None else MenuStore.initialize(SEED_MENU)
        self.system_status = ""
        self._debug_log_path = Path(debug_log_path or DEBUG_LOG_PATH)
        self._log_debug(f"app_init dishes={len(self.store)}")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="nav-bar")
        with Vertical(id="home-view"):
            yield Static(id="home-header")
            yield Static(id="stats-summary")
            yield Static(id="average-prices")
            yield Static(id="recent-dishes")
        with Vertical(id="menu-view"):
            yield Static(id="filter-bar")
            yield Static(id="menu-list")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._log_debug(f"on_mount view={self.active_view!r}")
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        # While a modal is active, let the modal own keyboard handling.
        if isinstance(self.screen, (AddDishModal, ConfirmDeleteModal)):
            return

        if event.key == "tab" and self.active_view == MENU_VIEW:
            self._cycle_filter(1)
            event.stop()
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        self._log_debug(f"on_key key={key!r} view={self.active_view!r}")

        if key == "h":
            self.show_view(HOME_VIEW)
            event.stop()
            return

        if key == "m":
            self.show_view(MENU_VIEW)
            event.stop()
            return

        if key == "a":
            self.open_add_dish()
            event.stop()
            return

        if self.active_view != MENU_VIEW:
            return

        if key == "f":
            self._cycle_filter(1)
            event.stop()
            return

        if key in {"1", "2", "3", "4"}:
            self.set_filter(FILTERS[int(key) - 1])
            event.stop()
            return

        if key == "j":
            self.action_move_selection(1)
            event.stop()
            return

        if key == "k":
            self.action_move_selection(-1)
            event.stop()
            return

        if key == "d":
            self.request_delete_selected()
            event.stop()
            return

    def show_view(self, view: str) -> None:
        if view not in {HOME_VIEW, MENU_VIEW}:
            return
        self.active_view = view
        self._log_debug(f"show_view view={view!r}")
        self._refresh_all()

    def set_filter(self, course_filter: str) -> None:
        if course_filter not in FILTERS:
            return
        self.course_filter = course_filter
        self.selected_index = 0
        self._refresh_menu()

    def _cycle_filter(self, delta: int) -> None:
        idx = FILTERS.index(self.course_filter)
        self.set_filter(FILTERS[(idx + delta) % len(FILTERS)])

    def action_move_selection(self, delta: int) -> None:
        if self.active_view != MENU_VIEW:
            return
        dishes = self.store.list(self.course_filter)
        if not dishes:
            self.selected_index = 0
            return
        self.selected_index = (self.selected_index + delta) % len(dishes)
        self._refresh_menu()

    def selected_dish(self) -> Dish | None:
        dishes = self.store.list(self.course_filter)
        if not (0 <= self.selected_index < len(dishes)):
            return None
        return dishes[self.selected_index]

    def open_add_dish(self) -> None:
        self._log_debug("open_add_dish")
        self.push_screen(AddDishModal(on_submit=self._submit_dish), callback=self._on_add_dish_closed)

    def _submit_dish(self, name: str, description: str, course: str, price: str) -> Dish:
        try:
            dish = self.store.add(name, description, course, price)
        except MenuError as exc:
            self._log_debug(f"add_rejected kind={type(exc).__name__} message={exc.message!r}")
            raise
        self._log_debug(f"add_ok dish_id={dish.dish_id} name={dish.name!r} course={dish.course!r}")
        return dish

    def home_recent_dishes(self) -> tuple[Dish, ...]:
        """Dishes for the "Recently Added" section, empty unless the menu grew past the seed."""
        if len(self.store) <= len(self.store.baseline):
            return ()
        return self.store.recently_added()

    def _on_add_dish_closed(self, dish: Dish | None) -> None:
        if dish is None:
            self._log_debug("add_cancelled")
            return
        self.system_status = "Success: Dish added to menu successfully"
        self.show_view(HOME_VIEW)

    def request_delete_selected(self) -> None:
        dish = self.selected_dish()
        if dish is None:
            self.system_status = "Nothing to delete"
            self._refresh_status()
            return

        def on_confirmed(confirmed: bool | None) -> None:
            self._on_delete_confirmed(dish, bool(confirmed))

        self.push_screen(ConfirmDeleteModal(dish), callback=on_confirmed)

    def _on_delete_confirmed(self, dish: Dish, confirmed: bool) -> None:
        if not confirmed:
            self._log_debug(f"delete_cancelled dish_id={dish.dish_id}")
            return

        try:
            self.store.remove(dish.dish_id)
        except MenuError as exc:
            self.system_status = str(exc)
            self._log_debug(f"delete_failed dish_id={dish.dish_id} error={exc!r}")
            self._refresh_all()
            return

        self._log_debug(f"delete_ok dish_id={dish.dish_id} name={dish.name!r}")
        self.system_status = f"Removed {dish.name}"
        remaining = len(self.store.list(self.course_filter))
        self.selected_index = min(self.selected_index, max(0, remaining - 1))
        self._refresh_all()

    def _refresh_all(self) -> None:
        try:
            home = self.query_one("#home-view", Vertical)
            menu = self.query_one("#menu-view", Vertical)
        except NoMatches:
            return
        home.display = self.active_view == HOME_VIEW
        menu.display = self.active_view == MENU_VIEW
        self._refresh_nav()
        self._refresh_home()
        self._refresh_menu()
        self._refresh_status()

    def _refresh_nav(self) -> None:
        nav = Text()
        tabs = (("H", "Home", HOME_VIEW), ("A", "Add Dish", None), ("M", "Menu", MENU_VIEW))
        for idx, (key, label, view) in enumerate(tabs):
            if idx > 0:
                nav.append("   ")
            style = "bold reverse" if view == self.active_view else ""
            nav.append(f" {key} ", style="bold")
            nav.append(label, style=style)
        self.query_one("#nav-bar", Static).update(nav)

    def _refresh_home(self) -> None:
        stats = self.store.statistics()

        header = Text()
        header.append(f"{RESTAURANT_NAME}\n", style="bold")
        header.append(f"{CHEF_GREETING}\n")
        header.append(APP_SUBTITLE, style="dim")
        self.query_one("#home-header", Static).update(header)

        summary = Text()
        summary.append(f"{stats.total}", style="bold")
        summary.append(" Total Items    ")
        summary.append(format_price(stats.total_value), style="bold")
        summary.append(" Total Value\n")
        for idx, course in enumerate(COURSES):
            if idx > 0:
                summary.append("   ")
            summary.append("● ", style=COURSE_COLORS[course])
            summary.append(f"{COURSE_PLURAL_LABELS[course]}: {stats.count_by_course[course]}")
        self.query_one("#stats-summary", Static).update(summary)

        averages = Text()
        averages.append("Average Prices by Course\n", style="bold")
        for idx, course in enumerate(COURSES):
            if idx > 0:
                averages.append("   ")
            averages.append(f"{course}s: ")
            averages.append(format_average(stats.average_price_by_course[course]), style="bold")
        self.query_one("#average-prices", Static).update(averages)

        recent_widget = self.query_one("#recent-dishes", Static)
        recent = self.home_recent_dishes()
        if not recent:
            recent_widget.update("")
            return

        lines = Text()
        lines.append("Recently Added", style="bold")
        for dish in recent:
            lines.append("\n  ")
            lines.append(dish.name)
            lines.append(f"  {format_price(dish.price)}  ")
            lines.append(f" {dish.course} ", style=badge_style(dish.course))
        recent_widget.update(lines)

    def _refresh_menu(self) -> None:
        try:
            filter_widget = self.query_one("#filter-bar", Static)
            list_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return

        stats = self.store.statistics()
        pills = Text()
        for idx, course_filter in enumerate(FILTERS):
            if idx > 0:
                pills.append(" ")
            count = stats.total if course_filter == ALL_FILTER else stats.count_by_course[course_filter]
            label = f" {idx + 1} {filter_label(course_filter, count)} "
            pills.append(label, style="bold reverse" if course_filter == self.course_filter else "dim")

        dishes = self.store.list(self.course_filter)
        pills.append("\n\n")
        pills.append(section_title(self.course_filter), style="bold")
        pills.append(f" ({len(dishes)} items)", style="dim")
        filter_widget.update(pills)

        if not dishes:
            self.selected_index = 0
            list_widget.update(Text("🍽️  No dishes found\nAdd some dishes to your menu", style="dim"))
            return

        if self.selected_index >= len(dishes):
            self.selected_index = len(dishes) - 1

        start, end = self._dish_window(list_widget, len(dishes))

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_dish_label(dishes[idx]))
            lines.append(f"\n    {dishes[idx].description}", style="dim")

        if end < len(dishes):
            lines.append("\n⋮", style="dim")

        list_widget.update(lines)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        if self.active_view == MENU_VIEW:
            hint = "1-4/Tab/F filter. J/K move. D delete. A add. H home."
        else:
            hint = "A add dish. M view menu."
        status = self.system_status or "Ready"
        bar.update(f"{status}  |  {hint}")

    def _dish_window(self, widget: Static, total: int) -> tuple[int, int]:
        """Slice of the dish list that fits the widget, keeping the selection centred."""
        # Each dish takes two lines: label and description.
        height = widget.size.height if widget.size.height > 0 else 16
        capacity = max(1, height // 2)
        if total <= capacity:
            return (0, total)

        start = self.selected_index - capacity // 2
        start = min(max(0, start), total - capacity)
        return (start, start + capacity)
