from __future__ import annotations

import importlib
import sys
from typing import Iterable

from failfast.runner.suite import Suite

from .models import SuiteConfig, validate_target


def add_import_paths(paths: Iterable[str]) -> None:
    for entry in reversed(list(paths)):
        if entry not in sys.path:
            sys.path.insert(0, entry)


def resolve_target(target: str) -> object:
    """Import ``module:attribute`` and return the attribute."""
    validate_target(target)
    module_name, _, attr_path = target.partition(":")
    module = importlib.import_module(module_name)
    value: object = module
    for part in attr_path.split("."):
        try:
            value = getattr(value, part)
        except AttributeError as exc:
            raise ValueError(f"{module_name} has no attribute {attr_path!r}") from exc
    return value


def suite_from_target(target: str) -> Suite:
    """Resolve a target naming either a Suite or a single test case."""
    value = resolve_target(target)
    if isinstance(value, Suite):
        return value
    if callable(value):
        return Suite(target, [value])
    raise ValueError(f"{target} is neither a Suite nor a callable")


def build_suite(config: SuiteConfig) -> Suite:
    add_import_paths(config.paths)
    cases = []
    for target in config.cases:
        case = resolve_target(target)
        if not callable(case):
            raise ValueError(f"Test case {target} is not callable")
        cases.append(case)
    return Suite(config.suite_name, cases)
