"""Pure queries over a menu snapshot."""

from __future__ import annotations

from typing import Iterable, Sequence

from menu_manager.constant import ALL_FILTER, COURSES
from menu_manager.errors import ValidationError
from menu_manager.models import Dish, MenuStatistics


def filter_by_course(dishes: Iterable[Dish], course_filter: str = ALL_FILTER) -> tuple[Dish, ...]:
    """Return dishes of one course (or all of them), keeping their order."""
    if course_filter == ALL_FILTER:
        return tuple(dishes)
    if course_filter not in COURSES:
        raise ValidationError(f"Unknown course filter: {course_filter!r}")
    return tuple(dish for dish in dishes if dish.course == course_filter)


def average_price(dishes: Iterable[Dish], course: str) -> float | None:
    """Mean price of one course, or ``None`` when the course is empty."""
    prices = [dish.price for dish in dishes if dish.course == course]
    if not prices:
        return None
    return sum(prices) / len(prices)


def compute_statistics(dishes: Sequence[Dish]) -> MenuStatistics:
    """Aggregate counts, total value and per-course averages."""
    count_by_course = {course: 0 for course in COURSES}
    sum_by_course = {course: 0.0 for course in COURSES}
    for dish in dishes:
        count_by_course[dish.course] += 1
        sum_by_course[dish.course] += dish.price

    average_price_by_course: dict[str, float | None] = {}
    for course in COURSES:
        count = count_by_course[course]
        average_price_by_course[course] = sum_by_course[course] / count if count else None

    return MenuStatistics(
        total=len(dishes),
        total_value=sum((dish.price for dish in dishes), 0.0),
        count_by_course=count_by_course,
        average_price_by_course=average_price_by_course,
    )


def recently_added(dishes: Iterable[Dish], baseline: Iterable[Dish], limit: int) -> tuple[Dish, ...]:
    """Dishes absent from the baseline, in current (newest first) order, at most ``limit``."""
    if limit <= 0:
        return ()
    baseline_ids = {dish.dish_id for dish in baseline}
    fresh: list[Dish] = []
    for dish in dishes:
        if dish.dish_id in baseline_ids:
            continue
        fresh.append(dish)
        if len(fresh) >= limit:
            break
    return tuple(fresh)
