from .step_10_check_os import CheckOSStep
from .step_20_check_git import CheckGitStep
from .step_30_check_brew import CheckBrewStep
from .step_40_install_dependencies import InstallDependenciesStep
from .step_50_check_target_dir import CheckTargetDirStep
from .step_60_clone_config import CloneConfigStep
from .step_90_next_steps import NextStepsStep

__all__ = [
    "CheckOSStep",
    "CheckGitStep",
    "CheckBrewStep",
    "InstallDependenciesStep",
    "CheckTargetDirStep",
    "CloneConfigStep",
    "NextStepsStep",
]
