from __future__ import annotations

import logging
from typing import Any, Dict

from ..console import print_status, print_success
from ..errors import UnsupportedPlatformError
from ..lib.env import host_description, is_macos

logger = logging.getLogger(__name__)


class CheckOSStep:
    step_id = "10_check_os"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        print_status("Checking operating system...")
        host = host_description()
        logger.info("Host system: %s", host)
        state.setdefault("execution", {}).setdefault("decisions", {})["host"] = host

        if not is_macos():
            raise UnsupportedPlatformError(
                "This script only supports macOS. Other operating systems are not supported yet."
            )

        print_success("macOS detected")
        return state
