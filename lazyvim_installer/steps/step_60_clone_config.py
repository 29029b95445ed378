from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..console import print_status, print_success
from ..errors import CloneError
from ..lib.command import CommandError
from ..lib.git import git_clone

logger = logging.getLogger(__name__)


class CloneConfigStep:
    step_id = "60_clone_config"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = state.get("config") or {}
        dry_run = bool(cfg.get("dry_run", False))
        url = str(cfg["repo_url"])
        target = Path(cfg["target_dir"])

        print_status("Cloning Neovim configuration from GitHub...")
        try:
            if not dry_run:
                target.parent.mkdir(parents=True, exist_ok=True)
            git_clone(url, target, dry_run=dry_run)
        except CommandError as e:
            raise CloneError(url, e.detail) from e
        except OSError as e:
            raise CloneError(url, str(e)) from e

        state.setdefault("execution", {}).setdefault("decisions", {})["cloned_to"] = str(target)
        print_success("Neovim configuration cloned successfully")
        return state
