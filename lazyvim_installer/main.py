from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional

from .config import load_installer_config
from .console import print_banner, print_errors
from .errors import InstallerError
from .lib.env import default_log_path
from .logging_utils import configure_logging
from .pipeline import run_pipeline
from .steps import (
    CheckBrewStep,
    CheckGitStep,
    CheckOSStep,
    CheckTargetDirStep,
    CloneConfigStep,
    InstallDependenciesStep,
    NextStepsStep,
)

logger = logging.getLogger(__name__)

TITLE = "LazyVim Configuration Installer for macOS"


def build_steps():
    return [
        CheckOSStep(),
        CheckGitStep(),
        CheckBrewStep(),
        InstallDependenciesStep(),
        CheckTargetDirStep(),
        CloneConfigStep(),
        NextStepsStep(),
    ]


def run(
    *,
    config_path: Optional[str] = None,
    log_path: Optional[str] = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> Dict[str, Any]:
    """Run the installer pipeline once; any failure propagates."""

    requested_log = log_path or default_log_path()
    actual_log_path = configure_logging(log_path=requested_log, also_console=verbose)

    try:
        cfg = load_installer_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise InstallerError(f"Invalid installer config: {e}") from e

    state: Dict[str, Any] = {
        "config": {**cfg.as_dict(), "dry_run": dry_run},
        "execution": {
            "current_step": None,
            "decisions": {},
            "paths": {"log_path_requested": requested_log, "log_path_actual": actual_log_path},
        },
    }

    print_banner(TITLE)

    try:
        result = run_pipeline(state=state, steps=build_steps())
    except Exception:
        logger.exception("Installer failed at step %s", state["execution"].get("current_step"))
        raise

    result.state["execution"]["ran_steps"] = result.ran_steps
    return result.state


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="lazyvim-installer", description=TITLE)
    p.add_argument("--config", default=None, help="YAML file overriding packages / config repo")
    p.add_argument("--log", default=None, help="Path to installer log")
    p.add_argument("--dry-run", action="store_true", help="Log brew/git commands without running them")
    p.add_argument("--verbose", action="store_true", help="Mirror log records to stderr")

    args = p.parse_args(argv)

    try:
        run(
            config_path=args.config,
            log_path=args.log,
            dry_run=bool(args.dry_run),
            verbose=bool(args.verbose),
        )
    except InstallerError as e:
        print_errors(e.message, e.hints)
        return 1
    except KeyboardInterrupt:
        print_errors("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
