from __future__ import annotations

from pathlib import Path
from typing import Any, Dict


def _package_root() -> Path:
    # lazyvim_installer/lib/manifests.py -> lazyvim_installer
    return Path(__file__).resolve().parents[1]


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping; an empty file yields {}."""
    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML required to load manifests") from e

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be a mapping/dict: {path}")
    return data


def load_packages_manifest() -> Dict[str, Any]:
    return load_yaml(_package_root() / "manifests" / "packages.yaml")
