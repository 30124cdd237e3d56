from menu_manager.data import SEED_MENU, image_for_course
from menu_manager.rendering import (
    badge_style,
    filter_label,
    format_average,
    format_currency,
    format_dish_label,
    format_price,
    section_title,
)


def test_format_currency():
    assert format_currency(185) == "R185.00"
    assert format_currency(62.5) == "R62.50"


def test_format_price():
    assert format_price(185.0) == "R185"
    assert format_price(12.5) == "R12.5"


def test_format_average():
    assert format_average(None) == "N/A"
    assert format_average(60) == "R60.00"


def test_badge_style_uses_course_colour():
    assert badge_style("Starter").endswith("#FFA726")
    assert badge_style("Unknown").endswith("#999999")


def test_filter_labels():
    assert filter_label("All", 3) == "All Menu (3)"
    assert filter_label("Dessert", 0) == "Dessert (0)"
    assert section_title("All") == "Full Menu"
    assert section_title("Starter") == "Starters"


def test_format_dish_label():
    label = format_dish_label(SEED_MENU[0])
    assert label.plain == "Grilled Steak  R185   Main Course "


def test_image_for_course():
    assert image_for_course("Starter") == "salad.jpg"
    assert image_for_course("Dessert") == "cheese_cake.jpg"
    assert image_for_course("Other") == "restaurant_logo.png"
