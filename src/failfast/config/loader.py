from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import SuiteConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise FileNotFoundError(f"Unable to read {path}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")
    return data


def load_suite(path: Path) -> SuiteConfig:
    """Load a suite file, or ``suite.yaml`` inside a directory.

    Import paths are resolved relative to the suite file.
    """
    suite_path = path
    if suite_path.is_dir():
        suite_path = suite_path / "suite.yaml"
    if not suite_path.is_file():
        raise FileNotFoundError(f"Suite file not found: {suite_path}")
    data = _load_yaml(suite_path)
    paths = data.get("paths")
    if isinstance(paths, list):
        resolved: list[object] = []
        for entry in paths:
            if isinstance(entry, str) and not Path(entry).is_absolute():
                resolved.append(str((suite_path.parent / entry).resolve()))
            else:
                resolved.append(entry)
        data["paths"] = resolved
    return SuiteConfig.model_validate(data)
