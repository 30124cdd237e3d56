"""Input validation for the add-dish form using Pydantic."""

from __future__ import annotations

import math

import pydantic
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from menu_manager.constant import COURSES
from menu_manager.errors import ValidationError

_BLANK_MESSAGES: dict[str, str] = {
    "name": "Please enter a dish name",
    "description": "Please enter a description",
    "price": "Please enter a price",
}
INVALID_PRICE_MESSAGE = "Please enter a valid price greater than 0"
INVALID_COURSE_MESSAGE = f"Please select a course: {', '.join(COURSES)}"


class DishDraft(BaseModel):
    """Raw add-form fields, trimmed and parsed."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    price: float
    course: str

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_required_text(cls, v, info: ValidationInfo):
        """Trim whitespace and reject blank text."""
        if not isinstance(v, str) or not v.strip():
            raise ValueError(_BLANK_MESSAGES[info.field_name])
        return v.strip()

    @field_validator("course", mode="before")
    @classmethod
    def validate_course(cls, v):
        """Only the fixed courses are accepted."""
        if v not in COURSES:
            raise ValueError(INVALID_COURSE_MESSAGE)
        return v

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, v):
        """Parse price text into a positive finite number."""
        if isinstance(v, bool):
            raise ValueError(INVALID_PRICE_MESSAGE)
        text = v.strip() if isinstance(v, str) else str(v)
        if not text:
            raise ValueError(_BLANK_MESSAGES["price"])
        try:
            parsed = float(text)
        except ValueError:
            raise ValueError(INVALID_PRICE_MESSAGE) from None
        if not math.isfinite(parsed) or parsed <= 0:
            raise ValueError(INVALID_PRICE_MESSAGE)
        return parsed


def parse_dish_draft(name: object, description: object, course: object, price: object) -> DishDraft:
    """Validate raw form values, raising ``ValidationError`` with the first problem found."""
    try:
        return DishDraft(name=name, description=description, course=course, price=price)
    except pydantic.ValidationError as exc:
        first = exc.errors()[0]
        ctx_error = first.get("ctx", {}).get("error")
        message = str(ctx_error) if ctx_error is not None else first["msg"]
        raise ValidationError(message) from None
