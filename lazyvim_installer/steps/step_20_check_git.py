from __future__ import annotations

import logging
from typing import Any, Dict

from ..console import print_status, print_success
from ..errors import MissingPrerequisiteError
from ..lib.command import CommandError
from ..lib.env import which
from ..lib.git import git_version

logger = logging.getLogger(__name__)

GIT_DOWNLOAD_URL = "https://git-scm.com/downloads"


class CheckGitStep:
    step_id = "20_check_git"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        print_status("Checking for git...")
        path = which("git")
        if not path:
            raise MissingPrerequisiteError("Git", GIT_DOWNLOAD_URL, command="git")

        # e.g. the /usr/bin/git shim without the Command Line Tools
        try:
            version = git_version()
        except CommandError as e:
            raise MissingPrerequisiteError("Git", GIT_DOWNLOAD_URL, command="git", detail=e.detail) from e

        state.setdefault("execution", {}).setdefault("decisions", {})["git"] = {"path": path, "version": version}
        print_success(f"Git is installed: {version}")
        return state
