# src/deskdex/services/models.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import EXEC_PLACEHOLDERS


def clean_exec(exec_line: str) -> str:
    """Drops the file/URL field codes from an Exec line and rejoins the rest with single spaces."""
    return " ".join(token for token in exec_line.split() if token not in EXEC_PLACEHOLDERS)


class CandidateFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Desktop file id: path relative to its root, separators flattened.")
    path: str = Field(..., description="Absolute path of the desktop file.")


class DesktopEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    exec: str = Field(..., description="Raw Exec line, placeholders included.")
    comment: Optional[str] = None
    visible: bool = True
    path: str = ""

    @property
    def command(self) -> str:
        return clean_exec(self.exec)


class RejectReason(str, Enum):
    UNREADABLE = "unreadable"
    NO_DESKTOP_SECTION = "no_desktop_section"
    NOT_APPLICATION = "not_application"
    MISSING_NAME = "missing_name"
    MISSING_EXEC = "missing_exec"
    TRYEXEC_NOT_FOUND = "tryexec_not_found"

    @property
    def is_fault(self) -> bool:
        """Faults are malformed files; the other reasons are legitimate non-launchable shapes."""
        return self in (RejectReason.UNREADABLE, RejectReason.NO_DESKTOP_SECTION, RejectReason.MISSING_NAME)


class Rejection(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    reason: RejectReason
    detail: str = ""


class ApplicationIndex(BaseModel):
    """Immutable snapshot of one rebuild. The cache swaps whole instances, never fields."""

    model_config = ConfigDict(frozen=True)

    entries: Dict[str, DesktopEntry] = Field(default_factory=dict)
    files: Tuple[str, ...] = ()
    built_at: float = 0.0
    faults: Tuple[Rejection, ...] = ()


class Candidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    entry: DesktopEntry
