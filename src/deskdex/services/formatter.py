# src/deskdex/services/formatter.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

from typing import List

from .index_cache import ApplicationIndexCache
from .models import Candidate, DesktopEntry


def format_label(entry: DesktopEntry) -> str:
    if entry.comment:
        return f"{entry.name} - {entry.comment}"
    return f"{entry.name} "


def build_candidates(cache: ApplicationIndexCache, include_hidden: bool = True) -> List[Candidate]:
    # Mapping order is kept as-is; the picker ranks candidates itself.
    index = cache.get_index()
    return [
        Candidate(label=format_label(entry), entry=entry)
        for entry in index.entries.values()
        if include_hidden or entry.visible
    ]
