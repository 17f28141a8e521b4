from .base import CheckFailure, FailureRecord
from .checks import (
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

__all__ = [
    "CheckFailure",
    "FailureRecord",
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
]
