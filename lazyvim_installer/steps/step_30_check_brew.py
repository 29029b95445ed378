from __future__ import annotations

import logging
from typing import Any, Dict

from ..console import print_status, print_success
from ..errors import MissingPrerequisiteError
from ..lib.command import CommandError
from ..lib.brew import brew_version
from ..lib.env import which

logger = logging.getLogger(__name__)

BREW_INSTALL_URL = "https://brew.sh"


class CheckBrewStep:
    step_id = "30_check_brew"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        print_status("Checking for Homebrew...")
        path = which("brew")
        if not path:
            raise MissingPrerequisiteError("Homebrew", BREW_INSTALL_URL)

        try:
            version = brew_version()
        except CommandError as e:
            raise MissingPrerequisiteError("Homebrew", BREW_INSTALL_URL, detail=e.detail) from e

        state.setdefault("execution", {}).setdefault("decisions", {})["brew"] = {"path": path, "version": version}
        print_success(f"Homebrew is already installed: {version}")
        return state
