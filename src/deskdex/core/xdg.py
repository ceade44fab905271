# src/deskdex/core/xdg.py
"""
deskdex - Desktop Application Index - XDG Base Directory Helpers
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
from typing import List, Mapping, Optional

DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"
APPLICATIONS_SUBDIR = "applications"


def data_home(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    value = env.get("XDG_DATA_HOME", "")
    if value and os.path.isabs(value):
        return Path(value)
    return Path.home() / ".local" / "share"


def config_home(env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    value = env.get("XDG_CONFIG_HOME", "")
    if value and os.path.isabs(value):
        return Path(value)
    return Path.home() / ".config"


def data_dirs(env: Optional[Mapping[str, str]] = None) -> List[Path]:
    env = os.environ if env is None else env
    value = env.get("XDG_DATA_DIRS") or DEFAULT_DATA_DIRS
    # Relative entries are invalid per the basedir spec and are skipped.
    return [Path(part) for part in value.split(":") if part and os.path.isabs(part)]


def default_search_roots(env: Optional[Mapping[str, str]] = None) -> List[Path]:
    """
    Returns the "applications" directory of the user data home followed by
    those of the system data dirs. Order is precedence order: the user's own
    entries shadow system ones with the same desktop file id.
    """
    roots: List[Path] = []
    for base in [data_home(env), *data_dirs(env)]:
        root = base / APPLICATIONS_SUBDIR
        if root not in roots:
            roots.append(root)
    return roots
