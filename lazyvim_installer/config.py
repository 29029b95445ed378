from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .lib.env import home_dir
from .lib.manifests import load_packages_manifest, load_yaml

DEFAULT_REPO_URL = "https://github.com/RomanPodkovyrin/neovim.git"
DEFAULT_TARGET = ".config/nvim"


def _str_list(raw: Dict[str, Any], key: str) -> List[str]:
    items = raw.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"{key} must be a list")
    # De-dup while preserving order
    out: List[str] = []
    for item in items:
        name = str(item).strip()
        if name and name not in out:
            out.append(name)
    return out


@dataclass(frozen=True)
class InstallerConfig:
    raw: Dict[str, Any]

    @property
    def formulae(self) -> List[str]:
        return _str_list(self.raw, "formulae")

    @property
    def casks(self) -> List[str]:
        return _str_list(self.raw, "casks")

    @property
    def repo_url(self) -> str:
        return str(((self.raw.get("config_repo") or {}).get("url")) or DEFAULT_REPO_URL)

    @property
    def target_rel(self) -> str:
        return str(((self.raw.get("config_repo") or {}).get("target")) or DEFAULT_TARGET)

    @property
    def target_dir(self) -> Path:
        """Clone destination; relative targets are resolved against $HOME."""
        p = Path(self.target_rel).expanduser()
        return p if p.is_absolute() else home_dir() / p

    def as_dict(self) -> Dict[str, Any]:
        return {
            "formulae": self.formulae,
            "casks": self.casks,
            "repo_url": self.repo_url,
            "target_dir": str(self.target_dir),
        }


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_installer_config(path: Optional[str] = None) -> InstallerConfig:
    """Bundled manifest, optionally overridden by a user YAML file."""

    raw = load_packages_manifest()
    if path:
        p = Path(path).expanduser()
        if not p.exists():
            raise FileNotFoundError(path)
        if p.suffix.lower() not in {".yaml", ".yml"}:
            raise ValueError("installer config must be YAML")
        raw = _merge(raw, load_yaml(p))

    repo = raw.get("config_repo")
    if repo is not None and not isinstance(repo, dict):
        raise ValueError("config_repo must be a mapping/object")

    cfg = InstallerConfig(raw=raw)
    # Surface shape errors before any step runs.
    cfg.as_dict()
    return cfg
