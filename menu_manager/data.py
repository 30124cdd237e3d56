"""Static seed menu and display asset lookup."""

from __future__ import annotations

from menu_manager.constant import COURSE_IMAGE_ASSETS, SEED_MENU as _SEED_MENU_RAW
from menu_manager.models import Dish

_FALLBACK_IMAGE = "restaurant_logo.png"


def image_for_course(course: str) -> str:
    """Pick the display asset for a newly added dish of ``course``."""
    return COURSE_IMAGE_ASSETS.get(course, _FALLBACK_IMAGE)


SEED_MENU: tuple[Dish, ...] = tuple(
    Dish(
        dish_id=str(raw["dish_id"]),
        name=str(raw["name"]),
        description=str(raw["description"]),
        course=str(raw["course"]),
        price=float(raw["price"]),
        image=str(raw["image"]),
    )
    for raw in _SEED_MENU_RAW
)
