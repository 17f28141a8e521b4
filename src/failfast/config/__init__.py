from .loader import load_suite
from .models import SuiteConfig
from .resolve import build_suite, resolve_target, suite_from_target

__all__ = [
    "SuiteConfig",
    "build_suite",
    "load_suite",
    "resolve_target",
    "suite_from_target",
]
