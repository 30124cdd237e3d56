"""Error kinds raised by the menu store."""

from __future__ import annotations


class MenuError(ValueError):
    """Base class for recoverable menu errors shown to the user."""

    title = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.title}: {self.message}"


class ValidationError(MenuError):
    """A required field is missing or malformed."""


class DuplicateDishError(MenuError):
    """A dish with the same name already exists."""

    title = "Duplicate Dish"


class DishNotFoundError(MenuError):
    """No dish with the requested id exists."""

    title = "Not Found"
