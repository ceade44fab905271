# src/deskdex/services/__init__.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

from .app_service import AppService, app_service
from .entry_parser import DesktopEntryParser, parse, parse_entry_text
from .formatter import build_candidates, format_label
from .index_cache import ApplicationIndexCache
from .launcher import spawn_detached
from .locator import discover
from .models import ApplicationIndex, Candidate, CandidateFile, DesktopEntry, clean_exec

__all__ = [
    "AppService",
    "app_service",
    "ApplicationIndex",
    "ApplicationIndexCache",
    "Candidate",
    "CandidateFile",
    "DesktopEntry",
    "DesktopEntryParser",
    "build_candidates",
    "clean_exec",
    "discover",
    "format_label",
    "parse",
    "parse_entry_text",
    "spawn_detached",
]
