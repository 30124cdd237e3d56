"""Domain models for the menu manager."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dish:
    """One menu entry."""

    dish_id: str
    name: str
    description: str
    course: str
    price: float
    image: str = ""


@dataclass(frozen=True)
class MenuStatistics:
    """Aggregates derived from one menu snapshot.

    ``average_price_by_course`` maps a course to ``None`` when the course has
    no dishes, so an empty course reads as "no data" rather than a zero price.
    """

    total: int
    total_value: float
    count_by_course: dict[str, int]
    average_price_by_course: dict[str, float | None]
