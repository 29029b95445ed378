from __future__ import annotations

import logging
from typing import Any, Dict

from ..console import print_banner, print_plain, print_status, print_success, print_warning

logger = logging.getLogger(__name__)

NEXT_STEPS = [
    "Change your terminal font to 'Hack Nerd Font' for proper icon display",
    "Restart your terminal or run: source ~/.zprofile",
    "Launch Neovim: nvim",
    "LazyVim will automatically install plugins on first launch",
]


class NextStepsStep:
    step_id = "90_next_steps"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("Finalize summary: %s", (state.get("execution") or {}).get("decisions") or {})

        print_plain()
        print_banner("Installation Complete!", style="green")
        print_success("LazyVim configuration has been installed successfully!")
        print_status("Next steps:")
        for i, line in enumerate(NEXT_STEPS, start=1):
            print_plain(f"  {i}. {line}")
        print_plain()
        print_warning("Note: The first launch may take a few minutes as plugins are downloaded and installed.")
        print_warning(
            "IMPORTANT: You must change your terminal font to 'Hack Nerd Font' or icons won't display correctly!"
        )
        return state
