from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..console import print_status, print_success
from ..errors import DestinationConflictError
from ..lib.env import home_dir

logger = logging.getLogger(__name__)


def _display(path: Path) -> str:
    """Render paths under $HOME as ~/..."""
    try:
        return "~/" + path.relative_to(home_dir()).as_posix()
    except ValueError:
        return str(path)


def is_occupied(path: Path) -> bool:
    """True when path exists as a file or as a non-empty directory."""
    if not path.exists():
        return False
    if not path.is_dir():
        return True
    try:
        return any(path.iterdir())
    except PermissionError:
        # Unreadable: cannot prove it is empty.
        return True


class CheckTargetDirStep:
    step_id = "50_check_target_dir"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = state.get("config") or {}
        target = Path(cfg["target_dir"])
        shown = _display(target)

        print_status("Checking for existing Neovim configuration...")
        if is_occupied(target):
            logger.info("Target %s is occupied; refusing to clone", target)
            raise DestinationConflictError(
                f"Neovim configuration directory {shown} already exists and is not empty.",
                [
                    "Please backup or remove the existing configuration before running this script.",
                    f"You can backup with: mv {shown} {shown}.backup",
                ],
            )

        print_success("No existing Neovim configuration found")
        return state
