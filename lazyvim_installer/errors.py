from __future__ import annotations

from typing import Optional, Sequence


class InstallerError(RuntimeError):
    """Fatal installer failure with user-actionable hints."""

    def __init__(self, message: str, hints: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.hints = list(hints)


class UnsupportedPlatformError(InstallerError):
    pass


class MissingPrerequisiteError(InstallerError):
    def __init__(self, tool: str, url: str, *, command: Optional[str] = None, detail: str = "") -> None:
        command = command or tool
        hints = [detail] if detail else []
        hints.append(f"You can install {command} from: {url}")
        super().__init__(
            f"{tool} is not installed. Please install {command} first and run this script again.",
            hints,
        )
        self.tool = tool
        self.url = url


class PackageInstallError(InstallerError):
    def __init__(self, package: str, detail: str = "") -> None:
        hints = [detail] if detail else []
        super().__init__(f"Failed to install {package}", hints)
        self.package = package


class DestinationConflictError(InstallerError):
    pass


class CloneError(InstallerError):
    def __init__(self, url: str, detail: str = "") -> None:
        hints = [detail] if detail else []
        super().__init__(f"Failed to clone {url}", hints)
        self.url = url
