"""Entry point for the menu manager Textual app."""

from __future__ import annotations

from menu_manager.menu_app import MenuManagerApp


def main() -> None:
    MenuManagerApp().run()


if __name__ == "__main__":
    main()
