"""Editable static menu configuration."""

from __future__ import annotations

COURSES: tuple[str, ...] = ("Starter", "Main Course", "Dessert")

ALL_FILTER = "All"

COURSE_COLORS: dict[str, str] = {
    "Starter": "#FFA726",
    "Main Course": "#42A5F5",
    "Dessert": "#66BB6A",
}

# Short labels used on the home screen breakdown.
COURSE_PLURAL_LABELS: dict[str, str] = {
    "Starter": "Starters",
    "Main Course": "Mains",
    "Dessert": "Desserts",
}

# Display asset picked for dishes added during a session, keyed by course.
COURSE_IMAGE_ASSETS: dict[str, str] = {
    "Starter": "salad.jpg",
    "Main Course": "fish_and_chips.jpg",
    "Dessert": "cheese_cake.jpg",
}

# Seed menu values consumed by menu_manager.data (which wraps these into Dish instances).
SEED_MENU: list[dict[str, str | float]] = [
    {
        "dish_id": "1",
        "name": "Grilled Steak",
        "description": "Juicy grilled steak with roasted vegetables and pepper sauce",
        "course": "Main Course",
        "price": 185,
        "image": "grilled_steak.jpg",
    },
    {
        "dish_id": "2",
        "name": "Chocolate Brownie",
        "description": "Warm chocolate brownie with vanilla ice cream topping",
        "course": "Dessert",
        "price": 65,
        "image": "chocolate_brownie.jpg",
    },
    {
        "dish_id": "3",
        "name": "Caesar Salad",
        "description": "Fresh Caesar salad with a delicious homemade dressing",
        "course": "Starter",
        "price": 50,
        "image": "salad.jpg",
    },
]
