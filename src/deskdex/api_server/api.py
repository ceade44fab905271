# filename: src/deskdex/api_server/api.py
"""
deskdex - Desktop Application Index - Main API Module
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

from typing import Optional

from fastapi import FastAPI

from ..core.version import __app_name__, __version__
from ..services.app_service import AppService, app_service
from .applications_router import router as applications_router


def create_api_app(service: Optional[AppService] = None) -> FastAPI:
    app = FastAPI(title=__app_name__, version=__version__)
    app.state.app_service = service or app_service
    app.include_router(applications_router, prefix="/applications", tags=["Applications"])

    @app.get("/ping", tags=["Info"])
    def ping():
        return {"status": "ok", "version": __version__}

    return app
