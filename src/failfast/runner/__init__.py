from .engine import case_name, make_console, run_suite
from .models import Failure, SuiteResult
from .suite import Suite, test_main

__all__ = [
    "Failure",
    "Suite",
    "SuiteResult",
    "case_name",
    "make_console",
    "run_suite",
    "test_main",
]
