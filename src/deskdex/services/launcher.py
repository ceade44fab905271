# src/deskdex/services/launcher.py
# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2025 AZHAR ZOUHIR / BYTEDz

import logging
import subprocess
from typing import Callable

log = logging.getLogger(__name__)

# A launcher accepts a shell command line and returns without waiting for it.
Launcher = Callable[[str], None]


def spawn_detached(command: str) -> None:
    """Starts `command` through the shell in its own session. Exit status is never collected."""
    try:
        subprocess.Popen(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        log.error(f"Failed to launch application with command '{command}': {e}")
