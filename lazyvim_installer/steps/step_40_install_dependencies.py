from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..console import print_status, print_success, print_warning
from ..errors import PackageInstallError
from ..lib.brew import brew_install, brew_is_installed, brew_update
from ..lib.command import CommandError

logger = logging.getLogger(__name__)


class InstallDependenciesStep:
    step_id = "40_install_dependencies"

    def _install_one(self, name: str, *, cask: bool, dry_run: bool, exe: Dict[str, Any]) -> None:
        print_status(f"Installing {name}...")
        if brew_is_installed(name, cask=cask, dry_run=dry_run):
            print_warning(f"{name} is already installed")
            exe.setdefault("skipped", []).append(name)
            return

        try:
            brew_install(name, cask=cask, dry_run=dry_run)
        except CommandError as e:
            raise PackageInstallError(name, e.detail) from e

        exe.setdefault("installed", []).append(name)
        print_success(f"{name} installed successfully")

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        cfg = state.get("config") or {}
        exe = state.setdefault("execution", {})
        dry_run = bool(cfg.get("dry_run", False))
        casks: List[str] = list(cfg.get("casks") or [])
        formulae: List[str] = list(cfg.get("formulae") or [])

        print_status("Installing required dependencies with Homebrew...")

        print_status("Updating Homebrew...")
        try:
            brew_update(dry_run=dry_run)
        except CommandError as e:
            raise PackageInstallError("Homebrew index (brew update)", e.detail) from e

        # Casks first: the font has to be present before the config is opened.
        for name in casks:
            self._install_one(name, cask=True, dry_run=dry_run, exe=exe)
        for name in formulae:
            self._install_one(name, cask=False, dry_run=dry_run, exe=exe)

        logger.info(
            "Dependencies done (installed=%s skipped=%s)",
            ",".join(exe.get("installed") or []),
            ",".join(exe.get("skipped") or []),
        )
        print_success("All dependencies installed")
        return state
