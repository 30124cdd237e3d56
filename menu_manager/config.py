"""Runtime configuration defaults for the menu manager."""

from __future__ import annotations

import os

RESTAURANT_NAME = "Menu Manager"
CHEF_GREETING = "Welcome, Chef Christoffel!"
APP_SUBTITLE = "Manage your restaurant menu with ease"

CURRENCY_SYMBOL = "R"
RECENT_DISPLAY_LIMIT = 2
DEFAULT_COURSE = "Main Course"

DEBUG_LOG_ENV = "MENU_MANAGER_DEBUG_LOG"
DEBUG_LOG_PATH = os.environ.get(DEBUG_LOG_ENV, "/tmp/menu-manager-debug.log")
