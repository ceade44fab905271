# filename: src/deskdex/main.py
#!/usr/bin/env python3
"""
deskdex - Desktop Application Index
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

import logging
import sys
from typing import List, Optional

import uvicorn

from .core.config import config_manager
from .core.exceptions import DeskdexError
from .core.logging_config import setup_logging
from .core.version import __app_name__, __version__


def show_help():
    """Display help information."""
    print(f"{__app_name__} v{__version__}")
    print("Desktop application index for launcher pickers")
    print("")
    print("Usage:")
    print("   deskdex                   # Serve the application list to the picker (default)")
    print("   deskdex --list            # Print the picker labels and exit")
    print("   deskdex --help            # Show this help")
    print("")


def list_candidates() -> int:
    from .services.app_service import app_service

    for candidate in app_service.get_candidates():
        print(candidate.label)
    return 0


def run_server() -> int:
    from .api_server.api import create_api_app

    host = config_manager.get("server_host")
    port = int(config_manager.get("server_port"))
    logging.getLogger(__name__).info(f"Serving application index on http://{host}:{port}")
    config = uvicorn.Config(
        app=create_api_app(),
        host=host,
        port=port,
        log_level="warning",
    )
    uvicorn.Server(config).run()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for deskdex."""
    argv = sys.argv[1:] if argv is None else argv

    if "--help" in argv or "-h" in argv:
        show_help()
        return 0

    setup_logging(config_manager.get("log_level", "INFO"))
    log = logging.getLogger(__name__)
    log.info(f"Starting {__app_name__} v{__version__}")

    try:
        if "--list" in argv:
            return list_candidates()
        return run_server()
    except DeskdexError as e:
        log.critical(f"Failed to start {__app_name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
