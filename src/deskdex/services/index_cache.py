# src/deskdex/services/index_cache.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from .entry_parser import DesktopEntryParser
from .locator import discover
from .models import ApplicationIndex, CandidateFile, DesktopEntry

log = logging.getLogger(__name__)

# File mtimes come from a coarser kernel clock than time.time() and can trail it slightly.
MTIME_SLACK = 0.05

DiscoverFn = Callable[[Sequence[Path]], List[CandidateFile]]


@dataclass
class CacheStats:
    hits: int = 0
    rebuilds: int = 0


class ApplicationIndexCache:
    """
    Holds the last built ApplicationIndex and decides on every access whether
    it can be reused. The index is reused only when discovery yields exactly
    the same ordered path list and none of those files was modified after the
    index was built (allowing MTIME_SLACK for mtime granularity). Anything
    else triggers a full rebuild; a failed rebuild leaves the previous index in place.
    """

    def __init__(
        self,
        roots: Union[Sequence[Union[str, Path]], Callable[[], Sequence[Path]]],
        discover_fn: DiscoverFn = discover,
        parser: Optional[DesktopEntryParser] = None,
        clock: Callable[[], float] = time.time,
    ):
        self._roots = roots
        self._discover = discover_fn
        self._parser = parser or DesktopEntryParser()
        self._clock = clock
        self._index: Optional[ApplicationIndex] = None
        self.stats = CacheStats()

    @property
    def roots(self) -> List[Path]:
        roots = self._roots() if callable(self._roots) else self._roots
        return [Path(root) for root in roots]

    @property
    def current(self) -> Optional[ApplicationIndex]:
        return self._index

    def get_index(self) -> ApplicationIndex:
        files = self._discover(self.roots)
        paths = tuple(candidate.path for candidate in files)

        index = self._index
        if index is not None and self._is_fresh(index, paths):
            self.stats.hits += 1
            return index

        self._index = self._rebuild(files, paths)
        return self._index

    def invalidate(self):
        """Forgets the stored index; the next get_index() call rebuilds."""
        self._index = None

    @staticmethod
    def _is_fresh(index: ApplicationIndex, paths: Tuple[str, ...]) -> bool:
        if paths != index.files:
            log.debug("Desktop file set changed since last build.")
            return False
        for path in paths:
            try:
                mtime = os.stat(path).st_mtime
            except OSError:
                return False
            if mtime > index.built_at - MTIME_SLACK:
                log.debug(f"{path} modified since last build.")
                return False
        return True

    def _rebuild(self, files: List[CandidateFile], paths: Tuple[str, ...]) -> ApplicationIndex:
        built_at = self._clock()
        entries: Dict[str, DesktopEntry] = self._parser.parse(files)
        index = ApplicationIndex(
            entries=entries,
            files=paths,
            built_at=built_at,
            faults=tuple(self._parser.faults),
        )
        self.stats.rebuilds += 1
        log.info(
            f"Application index rebuilt: {len(entries)} entries from {len(paths)} files"
            f" ({len(index.faults)} malformed)."
        )
        return index
