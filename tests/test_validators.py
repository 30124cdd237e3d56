import pytest

from menu_manager.errors import ValidationError
from menu_manager.validators import DishDraft, parse_dish_draft


def test_parse_dish_draft_trims_and_parses():
    draft = parse_dish_draft("  Malva Pudding ", " Warm with custard ", "Dessert", " 45.50 ")

    assert draft == DishDraft(name="Malva Pudding", description="Warm with custard", course="Dessert", price=45.5)


def test_numeric_price_is_accepted():
    assert parse_dish_draft("Soup", "desc", "Starter", 30).price == 30.0


@pytest.mark.parametrize("price", [0, -1, True, "1e999", "R50"])
def test_bad_prices(price):
    with pytest.raises(ValidationError) as excinfo:
        parse_dish_draft("Soup", "desc", "Starter", price)
    assert excinfo.value.message == "Please enter a valid price greater than 0"


def test_first_problem_wins():
    with pytest.raises(ValidationError) as excinfo:
        parse_dish_draft("", "", "Nope", "")
    assert excinfo.value.message == "Please enter a dish name"


def test_non_string_name_is_rejected():
    with pytest.raises(ValidationError):
        parse_dish_draft(None, "desc", "Starter", "10")


def test_error_str_includes_title():
    with pytest.raises(ValidationError) as excinfo:
        parse_dish_draft("Soup", "desc", "Starter", "abc")
    assert str(excinfo.value) == "Error: Please enter a valid price greater than 0"
