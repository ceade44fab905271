# src/deskdex/services/locator.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

import logging
import os
from pathlib import Path
from typing import Iterable, List, Set, Union

from ..core.constants import DESKTOP_FILE_SUFFIX, ID_SEPARATOR
from .models import CandidateFile

log = logging.getLogger(__name__)


def desktop_file_id(root: Path, path: Path) -> str:
    """`root/kde/org.foo.desktop` -> `kde-org.foo.desktop`."""
    return path.relative_to(root).as_posix().replace("/", ID_SEPARATOR)


def _enumerate(root: Path) -> List[Path]:
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Sorted in place so the walk order, and therefore precedence, is stable.
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.endswith(DESKTOP_FILE_SUFFIX):
                found.append(Path(dirpath) / filename)
    return found


def discover(roots: Iterable[Union[str, Path]]) -> List[CandidateFile]:
    """
    Enumerates desktop files under each root in precedence order. The first
    file seen for a given desktop file id wins; later roots cannot shadow it.
    Missing roots are skipped.
    """
    seen: Set[str] = set()
    files: List[CandidateFile] = []
    for root in roots:
        root = Path(root)
        if not root.is_dir():
            log.debug(f"Search root {root} does not exist, skipping.")
            continue
        for path in _enumerate(root):
            identifier = desktop_file_id(root, path)
            if identifier in seen:
                continue
            if not path.is_file() or not os.access(path, os.R_OK):
                continue
            seen.add(identifier)
            files.append(CandidateFile(identifier=identifier, path=str(path)))
    log.debug(f"Discovered {len(files)} desktop files.")
    return files
