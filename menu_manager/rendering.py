"""Rendering helpers for dishes, prices and statistics."""

from __future__ import annotations

from rich.text import Text

from menu_manager.config import CURRENCY_SYMBOL
from menu_manager.constant import ALL_FILTER, COURSE_COLORS
from menu_manager.models import Dish


def format_currency(amount: float) -> str:
    """Render an amount with the currency symbol and two decimals."""
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def format_price(amount: float) -> str:
    """Render a raw price the way the menu cards show it (no forced decimals)."""
    if float(amount).is_integer():
        return f"{CURRENCY_SYMBOL}{int(amount)}"
    return f"{CURRENCY_SYMBOL}{amount}"


def format_average(amount: float | None) -> str:
    """Render a course average, ``N/A`` when the course has no dishes."""
    if amount is None:
        return "N/A"
    return format_currency(amount)


def badge_style(course: str) -> str:
    """Return a consistent badge style for course tags."""
    color = COURSE_COLORS.get(course, "#999999")
    return f"bold #ffffff on {color}"


def filter_label(course_filter: str, count: int) -> str:
    if course_filter == ALL_FILTER:
        return f"All Menu ({count})"
    return f"{course_filter} ({count})"


def section_title(course_filter: str) -> str:
    if course_filter == ALL_FILTER:
        return "Full Menu"
    return f"{course_filter}s"


def format_dish_label(dish: Dish) -> Text:
    """Render a dish name and price followed by its course badge."""
    text = Text()
    text.append(dish.name, style="bold")
    text.append(f"  {format_price(dish.price)}  ")
    text.append(f" {dish.course} ", style=badge_style(dish.course))
    return text
