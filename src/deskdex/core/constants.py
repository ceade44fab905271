# filename: src/deskdex/core/constants.py
"""
deskdex - Desktop Application Index - Constants Module
Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published
by the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import os
from pathlib import Path

from .version import __app_name__
from .xdg import config_home, data_home

# --- Application Metadata ---
APP_NAME = __app_name__

# --- Core Application Settings ---
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765

# --- Desktop Entry Format ---
DESKTOP_FILE_SUFFIX = ".desktop"
DESKTOP_SECTION = "[Desktop Entry]"
APPLICATION_TYPE = "Application"
# Separator replacement used when building desktop file ids from relative paths.
ID_SEPARATOR = "-"
# Field codes removed from Exec before the command line is handed to the launcher.
EXEC_PLACEHOLDERS = frozenset({"%U", "%F", "%u", "%f"})

# --- File Names ---
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "deskdex.log"

# --- Application Paths ---
# Both can be overridden through the environment, mainly for tests and packaging.
APP_CONFIG_PATH = Path(os.environ.get("DESKDEX_CONFIG_DIR") or config_home() / APP_NAME)
APP_DATA_PATH = Path(os.environ.get("DESKDEX_DATA_DIR") or data_home() / APP_NAME)

CONFIG_FILE = APP_CONFIG_PATH / CONFIG_FILENAME
LOG_FILE = APP_DATA_PATH / LOG_FILENAME
