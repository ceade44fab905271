import os
import tempfile
from pathlib import Path

import pytest

# Keep config and log files out of the real home directory. Must run before deskdex is imported.
_sandbox = tempfile.mkdtemp(prefix="deskdex-tests-")
os.environ.setdefault("DESKDEX_CONFIG_DIR", os.path.join(_sandbox, "config"))
os.environ.setdefault("DESKDEX_DATA_DIR", os.path.join(_sandbox, "data"))


def desktop_text(**fields) -> str:
    lines = ["[Desktop Entry]"]
    lines.extend(f"{key}={value}" for key, value in fields.items())
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_entry():
    def _write(path: Path, text: str = None, **fields) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text if text is not None else desktop_text(**fields), encoding="utf-8")
        return path

    return _write


def age(path: Path, seconds: float = 100.0):
    """Backdates a file's mtime so a freshly built index sees it as unchanged."""
    past = os.stat(path).st_mtime - seconds
    os.utime(path, (past, past))
