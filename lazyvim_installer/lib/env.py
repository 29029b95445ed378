from __future__ import annotations

import os
import platform
import shutil
from pathlib import Path


def home_dir() -> Path:
    home = os.environ.get("HOME")
    return Path(home) if home else Path.home()


def is_macos() -> bool:
    # OSTYPE is a shell variable and is usually not exported; trust it only when set.
    ostype = os.environ.get("OSTYPE")
    if ostype:
        return ostype.startswith("darwin")
    return platform.system() == "Darwin"


def host_description() -> str:
    return os.environ.get("OSTYPE") or platform.system() or "unknown"


def which(tool: str) -> str | None:
    return shutil.which(tool)


def default_log_path() -> str:
    return str(home_dir() / "Library" / "Logs" / "lazyvim-installer.log")
