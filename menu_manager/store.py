"""In-memory menu store: the dish collection and its mutations."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator
from uuid import uuid4

from menu_manager.config import RECENT_DISPLAY_LIMIT
from menu_manager.constant import ALL_FILTER, COURSES
from menu_manager.data import image_for_course
from menu_manager.errors import DishNotFoundError, DuplicateDishError, ValidationError
from menu_manager.models import Dish, MenuStatistics
from menu_manager.stats import compute_statistics, filter_by_course, recently_added
from menu_manager.validators import parse_dish_draft


def _name_key(name: str) -> str:
    return name.strip().lower()


class MenuStore:
    """Owns the ordered dish collection, newest first.

    Every mutation swaps in a new tuple, so a snapshot handed out earlier
    never changes underneath its reader. Failed mutations leave the
    collection untouched.
    """

    def __init__(
        self,
        seed: Iterable[Dish] = (),
        image_lookup: Callable[[str], str] = image_for_course,
    ) -> None:
        baseline = tuple(seed)
        seen_ids: set[str] = set()
        seen_names: set[str] = set()
        for dish in baseline:
            if dish.dish_id in seen_ids:
                raise ValidationError(f"Duplicate dish id in seed: {dish.dish_id!r}")
            if _name_key(dish.name) in seen_names:
                raise ValidationError(f"Duplicate dish name in seed: {dish.name!r}")
            if dish.course not in COURSES:
                raise ValidationError(f"Unknown course in seed: {dish.course!r}")
            if not dish.price > 0:
                raise ValidationError(f"Seed dish {dish.name!r} must have a price greater than 0")
            seen_ids.add(dish.dish_id)
            seen_names.add(_name_key(dish.name))

        self._baseline = baseline
        self._dishes = baseline
        self._image_lookup = image_lookup

    @classmethod
    def initialize(cls, seed: Iterable[Dish], image_lookup: Callable[[str], str] = image_for_course) -> MenuStore:
        return cls(seed, image_lookup=image_lookup)

    @property
    def snapshot(self) -> tuple[Dish, ...]:
        return self._dishes

    @property
    def baseline(self) -> tuple[Dish, ...]:
        return self._baseline

    def __len__(self) -> int:
        return len(self._dishes)

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._dishes)

    def __contains__(self, dish_id: object) -> bool:
        return any(dish.dish_id == dish_id for dish in self._dishes)

    def get(self, dish_id: str) -> Dish:
        for dish in self._dishes:
            if dish.dish_id == dish_id:
                return dish
        raise DishNotFoundError(f"No dish with id {dish_id!r}")

    def add(self, name: object, description: object, course: object, price: object) -> Dish:
        """Validate the raw form values and prepend a new dish.

        Raises ``ValidationError`` for blank or malformed fields and
        ``DuplicateDishError`` when the trimmed name already exists in any case.
        """
        draft = parse_dish_draft(name, description, course, price)

        key = _name_key(draft.name)
        if any(_name_key(dish.name) == key for dish in self._dishes):
            raise DuplicateDishError("This dish already exists in the menu")

        dish = Dish(
            dish_id=self._new_id(),
            name=draft.name,
            description=draft.description,
            course=draft.course,
            price=draft.price,
            image=self._image_lookup(draft.course),
        )
        self._dishes = (dish, *self._dishes)
        return dish

    def remove(self, dish_id: str) -> Dish:
        """Drop the dish with ``dish_id`` and return it."""
        for idx, dish in enumerate(self._dishes):
            if dish.dish_id == dish_id:
                self._dishes = self._dishes[:idx] + self._dishes[idx + 1 :]
                return dish
        raise DishNotFoundError(f"No dish with id {dish_id!r}")

    def list(self, course_filter: str = ALL_FILTER) -> tuple[Dish, ...]:
        return filter_by_course(self._dishes, course_filter)

    def statistics(self) -> MenuStatistics:
        return compute_statistics(self._dishes)

    def recently_added(self, limit: int = RECENT_DISPLAY_LIMIT) -> tuple[Dish, ...]:
        return recently_added(self._dishes, self._baseline, limit)

    def _new_id(self) -> str:
        existing = {dish.dish_id for dish in self._dishes}
        dish_id = uuid4().hex
        while dish_id in existing:
            dish_id = uuid4().hex
        return dish_id
