# src/deskdex/api_server/applications_router.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from ..core.exceptions import EntryNotFoundError, LaunchError
from ..services.app_service import AppService

log = logging.getLogger(__name__)
router = APIRouter()


class ApplicationCandidate(BaseModel):
    label: str = Field(..., description="Text shown by the picker.")
    name: str = Field(..., description="The display name of the application.")
    comment: Optional[str] = Field(None, description="Hint text from the desktop file.")
    visible: bool = Field(True, description="False when the entry is marked Hidden or NoDisplay.")
    command: str = Field(..., description="Command line handed to the launcher.")


class AppLaunchPayload(BaseModel):
    name: str


class IndexStatus(BaseModel):
    entries: int
    files: int
    malformed: int
    built_at: float
    hits: int
    rebuilds: int


def get_app_service(request: Request) -> AppService:
    return request.app.state.app_service


@router.get("", response_model=List[ApplicationCandidate], summary="List launchable applications")
def get_applications(refresh: bool = False, service: AppService = Depends(get_app_service)):
    return [
        ApplicationCandidate(
            label=candidate.label,
            name=candidate.entry.name,
            comment=candidate.entry.comment,
            visible=candidate.entry.visible,
            command=candidate.entry.command,
        )
        for candidate in service.get_candidates(force_refresh=refresh)
    ]


@router.get("/status", response_model=IndexStatus, summary="Application index statistics")
def get_status(service: AppService = Depends(get_app_service)):
    index = service.get_index()
    return IndexStatus(
        entries=len(index.entries),
        files=len(index.files),
        malformed=len(index.faults),
        built_at=index.built_at,
        hits=service.cache.stats.hits,
        rebuilds=service.cache.stats.rebuilds,
    )


@router.post("/launch", summary="Run an application")
def launch_application(payload: AppLaunchPayload, service: AppService = Depends(get_app_service)):
    if not payload.name:
        raise HTTPException(status_code=400, detail="Application name cannot be empty.")
    try:
        entry = service.run(payload.name)
    except EntryNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LaunchError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"status": "success", "message": f"Launch command sent for '{entry.name}'."}
