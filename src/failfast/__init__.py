from .assertions import (
    CheckFailure,
    FailureRecord,
    equal,
    equal_msg,
    expect_any_error,
    expect_error,
    expecting_any_error,
    expecting_error,
    fail,
    greater_or_equal,
    is_false,
    is_true,
    less_or_equal,
    not_equal,
)
from .runner import Failure, Suite, SuiteResult, run_suite, test_main

__all__ = [
    "CheckFailure",
    "Failure",
    "FailureRecord",
    "Suite",
    "SuiteResult",
    "equal",
    "equal_msg",
    "expect_any_error",
    "expect_error",
    "expecting_any_error",
    "expecting_error",
    "fail",
    "greater_or_equal",
    "is_false",
    "is_true",
    "less_or_equal",
    "not_equal",
    "run_suite",
    "test_main",
]
