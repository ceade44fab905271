# src/deskdex/services/entry_parser.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

import logging
import os
import re
import shutil
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from ..core.constants import APPLICATION_TYPE, DESKTOP_SECTION
from .models import CandidateFile, DesktopEntry, Rejection, RejectReason

log = logging.getLogger(__name__)

# Key, optional locale suffix, value. Whitespace around '=' is tolerated.
FIELD_PATTERN = re.compile(r"^(?P<key>[A-Za-z0-9-]+)(?P<locale>\[[^\]]*\])?\s*=\s*(?P<value>.*?)\s*$")
KNOWN_KEYS = frozenset({"Type", "Name", "Comment", "Exec", "TryExec", "Hidden", "NoDisplay"})
TRUTHY = frozenset({"true", "1"})

Which = Callable[[str], Optional[str]]


def section_fields(text: str) -> Optional[Dict[str, str]]:
    """
    Collects the unqualified known keys of the [Desktop Entry] section, first
    occurrence wins. Returns None when the section header is missing. Lines of
    any later section are never read.
    """
    fields: Dict[str, str] = {}
    in_section = False
    found = False
    # A UTF-8 byte order mark would otherwise hide the header on the first line.
    for raw_line in text.lstrip("\ufeff").splitlines():
        line = raw_line.strip()
        if line.startswith("["):
            if in_section:
                break
            if line == DESKTOP_SECTION:
                in_section = found = True
            continue
        if not in_section or not line or line.startswith("#"):
            continue
        match = FIELD_PATTERN.match(line)
        if not match or match.group("locale"):
            continue
        key = match.group("key")
        if key in KNOWN_KEYS and key not in fields:
            fields[key] = match.group("value")
    return fields if found else None


def _is_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in TRUTHY


def _resolve_executable(program: str, which: Which) -> bool:
    if os.path.isabs(program):
        return os.path.isfile(program) and os.access(program, os.X_OK)
    return which(program) is not None


def parse_entry_text(text: str, path: str = "", which: Which = shutil.which) -> Union[DesktopEntry, Rejection]:
    """Turns the raw text of one desktop file into an entry or the reason it was rejected."""
    fields = section_fields(text)
    if fields is None:
        return Rejection(path=path, reason=RejectReason.NO_DESKTOP_SECTION, detail=f"missing {DESKTOP_SECTION} header")

    visible = not (_is_truthy(fields.get("Hidden")) or _is_truthy(fields.get("NoDisplay")))

    entry_type = fields.get("Type")
    if entry_type != APPLICATION_TYPE:
        return Rejection(path=path, reason=RejectReason.NOT_APPLICATION, detail=f"Type={entry_type or ''}")

    name = fields.get("Name")
    if not name:
        return Rejection(path=path, reason=RejectReason.MISSING_NAME, detail="no Name field")

    comment = fields.get("Comment") or None

    exec_line = fields.get("Exec")
    if not exec_line:
        return Rejection(path=path, reason=RejectReason.MISSING_EXEC)

    try_exec = fields.get("TryExec")
    if try_exec and not _resolve_executable(try_exec, which):
        return Rejection(path=path, reason=RejectReason.TRYEXEC_NOT_FOUND, detail=try_exec)

    return DesktopEntry(name=name, exec=exec_line, comment=comment, visible=visible, path=path)


class DesktopEntryParser:
    """Parses a batch of candidate files into a name -> entry mapping."""

    def __init__(self, which: Which = shutil.which):
        self._which = which
        self.faults: List[Rejection] = []

    def parse_file(self, candidate: CandidateFile) -> Union[DesktopEntry, Rejection]:
        try:
            text = Path(candidate.path).read_text(encoding="utf-8-sig", errors="replace")
        except OSError as e:
            return Rejection(path=candidate.path, reason=RejectReason.UNREADABLE, detail=str(e))
        return parse_entry_text(text, candidate.path, self._which)

    def parse(self, files: Iterable[CandidateFile]) -> Dict[str, DesktopEntry]:
        entries: Dict[str, DesktopEntry] = {}
        faults: List[Rejection] = []
        for candidate in files:
            result = self.parse_file(candidate)
            if isinstance(result, Rejection):
                if result.reason.is_fault:
                    log.warning(f"Skipping malformed desktop file {result.path}: {result.reason.value} ({result.detail})")
                    faults.append(result)
                else:
                    log.debug(f"Skipping {result.path}: {result.reason.value}")
                continue
            # Same Name in a later file replaces the earlier entry.
            if result.name in entries:
                log.debug(f"'{result.name}' from {result.path} replaces {entries[result.name].path}")
            entries[result.name] = result
        self.faults = faults
        return entries


def parse(files: Iterable[CandidateFile], which: Which = shutil.which) -> Dict[str, DesktopEntry]:
    return DesktopEntryParser(which).parse(files)
