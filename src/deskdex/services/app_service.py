# src/deskdex/services/app_service.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

import logging
from typing import List, Optional

from ..core.config import ConfigManager, config_manager
from ..core.exceptions import EntryNotFoundError, LaunchError
from .formatter import build_candidates
from .index_cache import ApplicationIndexCache
from .launcher import Launcher, spawn_detached
from .models import ApplicationIndex, Candidate, DesktopEntry

log = logging.getLogger(__name__)


class AppService:
    """Owns the application index cache and exposes the picker's candidate list and Run action."""

    def __init__(
        self,
        config: Optional[ConfigManager] = None,
        cache: Optional[ApplicationIndexCache] = None,
        launcher: Launcher = spawn_detached,
    ):
        self._config = config or config_manager
        # Roots are read from config on each access so edits apply without a restart.
        self.cache = cache or ApplicationIndexCache(self._config.search_roots)
        self._launcher = launcher

    def get_index(self, force_refresh: bool = False) -> ApplicationIndex:
        if force_refresh:
            self.cache.invalidate()
        return self.cache.get_index()

    def get_candidates(self, force_refresh: bool = False) -> List[Candidate]:
        if force_refresh:
            self.cache.invalidate()
        return build_candidates(self.cache, include_hidden=self._config.include_hidden())

    def find(self, name: str) -> DesktopEntry:
        entry = self.cache.get_index().entries.get(name)
        if entry is None:
            raise EntryNotFoundError(f"No application named '{name}'")
        return entry

    def run(self, name: str) -> DesktopEntry:
        """The picker's "Run" action: hands the cleaned command line to the launcher."""
        entry = self.find(name)
        command = entry.command
        if not command:
            raise LaunchError(f"'{name}' has an empty command line")
        log.info(f"Launching '{name}': {command}")
        self._launcher(command)
        return entry


# Global instance
app_service = AppService()
