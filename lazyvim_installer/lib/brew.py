from __future__ import annotations

import logging

from .command import CmdResult, run_cmd

logger = logging.getLogger(__name__)


def brew_version() -> str:
    return run_cmd(["brew", "--version"]).first_line


def brew_update(*, dry_run: bool = False) -> None:
    run_cmd(["brew", "update"], capture=False, dry_run=dry_run)


def _kind_args(cask: bool) -> list[str]:
    return ["--cask"] if cask else []


def brew_is_installed(name: str, *, cask: bool = False, dry_run: bool = False) -> bool:
    """Return True if brew reports the formula/cask as installed.

    `brew list <name>` exits non-zero for anything not installed.
    """
    if dry_run:
        # Report nothing as installed so the full install plan is logged.
        return False
    r = run_cmd(["brew", "list", *_kind_args(cask), name], check=False)
    return r.returncode == 0


def brew_install(name: str, *, cask: bool = False, dry_run: bool = False) -> CmdResult:
    return run_cmd(["brew", "install", *_kind_args(cask), name], capture=False, dry_run=dry_run)
