from pathlib import Path
from typing import Dict, List, Optional, Set
import platform
import shutil
import subprocess

import pytest


class FakeHost:
    """Stands in for platform.system, shutil.which and subprocess.run."""

    def __init__(self, home: Path):
        self.home = home
        self.system = "Darwin"
        self.tools: Dict[str, str] = {"git": "/usr/bin/git", "brew": "/opt/homebrew/bin/brew"}
        self.formulae: Set[str] = set()
        self.casks: Set[str] = set()
        self.fail_install: Set[str] = set()
        self.fail_update = False
        self.fail_clone = False
        # tool -> (returncode, stderr) returned by `<tool> --version`
        self.fail_version: Dict[str, tuple] = {}
        # brew install / git clone write to the terminal, so no stderr is captured
        self.captured_stderr = True
        self.interrupt_on: Optional[List[str]] = None
        self.calls: List[List[str]] = []

    def which(self, tool: str, *_args, **_kwargs) -> Optional[str]:
        return self.tools.get(tool)

    def commands(self, tool: str) -> List[List[str]]:
        return [c for c in self.calls if c[0] == tool]

    def installs(self) -> List[str]:
        return [c[-1] for c in self.calls if c[:2] == ["brew", "install"]]

    def clones(self) -> List[List[str]]:
        return [c for c in self.calls if c[:2] == ["git", "clone"]]

    def _result(self, argv, rc: int = 0, stdout: str = "", stderr: str = ""):
        return subprocess.CompletedProcess(argv, rc, stdout, stderr)

    def run(self, argv, *_args, **_kwargs):
        argv = list(argv)
        self.calls.append(argv)

        if argv == self.interrupt_on:
            raise KeyboardInterrupt
        if argv[0] in self.fail_version and argv[1:] == ["--version"]:
            rc, stderr = self.fail_version[argv[0]]
            return self._result(argv, rc=rc, stderr=stderr)
        if argv == ["git", "--version"]:
            return self._result(argv, stdout="git version 2.44.0\n")
        if argv == ["brew", "--version"]:
            return self._result(argv, stdout="Homebrew 4.3.1\nHomebrew/homebrew-core (git revision 1a2b)\n")
        if argv == ["brew", "update"]:
            return self._result(argv, rc=1 if self.fail_update else 0, stderr="fatal: unable to update")

        if argv[:2] == ["brew", "list"]:
            name = argv[-1]
            installed = self.casks if "--cask" in argv else self.formulae
            if name in installed:
                return self._result(argv)
            return self._result(argv, rc=1, stderr=f"Error: No such keg: {name}")

        if argv[:2] == ["brew", "install"]:
            name = argv[-1]
            if name in self.fail_install:
                err = f"Error: No available formula with the name \"{name}\"." if self.captured_stderr else ""
                return self._result(argv, rc=1, stderr=err)
            (self.casks if "--cask" in argv else self.formulae).add(name)
            return self._result(argv)

        if argv[:2] == ["git", "clone"]:
            if self.fail_clone:
                return self._result(argv, rc=128, stderr="fatal: repository not found" if self.captured_stderr else "")
            dest = Path(argv[3])
            (dest / ".git").mkdir(parents=True)
            (dest / "init.lua").write_text('require("config.lazy")\n', encoding="utf-8")
            return self._result(argv)

        raise AssertionError(f"unexpected command: {argv}")


@pytest.fixture
def host(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    fake = FakeHost(home)

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("OSTYPE", raising=False)
    monkeypatch.setattr(platform, "system", lambda: fake.system)
    monkeypatch.setattr(shutil, "which", fake.which)
    monkeypatch.setattr(subprocess, "run", fake.run)
    return fake


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / "logs" / "installer.log")
