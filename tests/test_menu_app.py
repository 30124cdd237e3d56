import pytest

from menu_manager.add_dish_modal import AddDishModal
from menu_manager.confirm_modal import ConfirmDeleteModal
from menu_manager.data import SEED_MENU
from menu_manager.menu_app import MenuManagerApp
from menu_manager.store import MenuStore


def _make_app(tmp_path):
    return MenuManagerApp(store=MenuStore.initialize(SEED_MENU), debug_log_path=tmp_path / "debug.log")


async def _type(pilot, text):
    for char in text:
        await pilot.press("space" if char == " " else char)


@pytest.mark.asyncio
async def test_add_dish_through_modal(tmp_path):
    app = _make_app(tmp_path)
    async with app.run_test() as pilot:
        await pilot.press("a")
        await pilot.pause()
        assert isinstance(app.screen, AddDishModal)

        await _type(pilot, "bobotie")
        await pilot.press("tab")
        await _type(pilot, "spiced mince bake")
        await pilot.press("tab", "tab")
        await _type(pilot, "120")
        await pilot.press("enter")
        await pilot.pause()

        assert not isinstance(app.screen, AddDishModal)
        assert app.active_view == "home"
        assert [dish.name for dish in app.store.list("Main Course")] == ["bobotie", "Grilled Steak"]
        assert app.store.recently_added()[0].price == 120.0

    assert "add_ok" in (tmp_path / "debug.log").read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_add_dish_errors_keep_modal_open(tmp_path):
    app = _make_app(tmp_path)
    app.store.add("Bobotie", "Spiced mince bake", "Main Course", "140")
    async with app.run_test() as pilot:
        await pilot.press("a")
        await pilot.pause()
        await pilot.press("enter")
        await pilot.pause()

        modal = app.screen
        assert isinstance(modal, AddDishModal)
        assert modal.error == "Error: Please enter a dish name"

        await _type(pilot, "bobotie")
        await pilot.press("tab")
        await _type(pilot, "again")
        await pilot.press("tab", "tab")
        await _type(pilot, "99")
        await pilot.press("enter")
        await pilot.pause()

        assert isinstance(app.screen, AddDishModal)
        assert modal.error == "Duplicate Dish: This dish already exists in the menu"
        assert len(app.store) == 4

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, AddDishModal)
        assert len(app.store) == 4


@pytest.mark.asyncio
async def test_course_selector_cycles(tmp_path):
    app = _make_app(tmp_path)
    async with app.run_test() as pilot:
        await pilot.press("a")
        await pilot.pause()
        modal = app.screen
        assert modal.course == "Main Course"

        await pilot.press("tab", "tab", "right")
        assert modal.course == "Dessert"
        await pilot.press("right")
        assert modal.course == "Starter"
        await pilot.press("left")
        assert modal.course == "Dessert"


@pytest.mark.asyncio
async def test_delete_requires_confirmation(tmp_path):
    app = _make_app(tmp_path)
    async with app.run_test() as pilot:
        await pilot.press("m", "4")
        assert app.course_filter == "Dessert"

        await pilot.press("d")
        await pilot.pause()
        assert isinstance(app.screen, ConfirmDeleteModal)

        await pilot.press("n")
        await pilot.pause()
        assert len(app.store) == 3

        await pilot.press("d")
        await pilot.pause()
        await pilot.press("y")
        await pilot.pause()

        assert not isinstance(app.screen, ConfirmDeleteModal)
        stats = app.store.statistics()
        assert stats.total == 2
        assert stats.average_price_by_course["Dessert"] is None
        assert app.selected_dish() is None


@pytest.mark.asyncio
async def test_filter_and_selection(tmp_path):
    app = _make_app(tmp_path)
    async with app.run_test() as pilot:
        await pilot.press("m")
        assert app.active_view == "menu"
        assert app.selected_dish().name == "Grilled Steak"

        await pilot.press("j")
        assert app.selected_dish().name == "Chocolate Brownie"
        await pilot.press("k", "k")
        assert app.selected_dish().name == "Caesar Salad"

        await pilot.press("f")
        assert app.course_filter == "Starter"
        assert app.selected_dish().name == "Caesar Salad"

        await pilot.press("h")
        assert app.active_view == "home"


@pytest.mark.asyncio
async def test_tab_cycles_menu_filter(tmp_path):
    app = _make_app(tmp_path)
    async with app.run_test() as pilot:
        await pilot.press("m", "tab")
        assert app.course_filter == "Starter"

        await pilot.press("tab", "tab", "tab")
        assert app.course_filter == "All"


@pytest.mark.asyncio
async def test_recently_added_hidden_once_menu_shrinks_back_to_seed_size(tmp_path):
    app = _make_app(tmp_path)
    soup = app.store.add("Soup", "Butternut soup", "Starter", "40")
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.home_recent_dishes() == (soup,)

        await pilot.press("m", "4", "d")
        await pilot.pause()
        await pilot.press("y")
        await pilot.pause()

        assert len(app.store) == 3
        assert app.store.recently_added() == (soup,)
        assert app.home_recent_dishes() == ()


@pytest.mark.asyncio
async def test_long_menu_window_follows_selection(tmp_path):
    app = _make_app(tmp_path)
    for n in range(30):
        app.store.add(f"Special {n}", "desc", "Starter", "10")
    async with app.run_test() as pilot:
        await pilot.press("m")
        await pilot.pause()
        list_widget = app.query_one("#menu-list")

        start, end = app._dish_window(list_widget, len(app.store))
        assert start == 0
        assert 0 < end < len(app.store)

        await pilot.press("k")
        start, end = app._dish_window(list_widget, len(app.store))
        assert end == len(app.store)
        assert start <= app.selected_index < end
