from __future__ import annotations

import logging
from pathlib import Path

from .command import run_cmd

logger = logging.getLogger(__name__)


def git_version() -> str:
    return run_cmd(["git", "--version"]).first_line


def git_clone(url: str, dest: Path, *, dry_run: bool = False) -> None:
    """Full clone of url into dest; dest's parent must already exist."""

    run_cmd(["git", "clone", url, str(dest)], capture=False, dry_run=dry_run)
    logger.info("Cloned %s -> %s", url, dest)
