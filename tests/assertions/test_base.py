from __future__ import annotations

import dataclasses

import pytest

from failfast.assertions.base import CheckFailure, FailureRecord


def _record(**overrides: object) -> FailureRecord:
    fields: dict[str, object] = {
        "source_file": "tests/test_demo.py",
        "line_number": 12,
        "function_name": "test_demo",
        "message": "Equality test failed: a != b",
    }
    fields.update(overrides)
    return FailureRecord(**fields)  # type: ignore[arg-type]


def test_record_is_immutable() -> None:
    record = _record()

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.message = "changed"  # type: ignore[misc]


def test_record_requires_location() -> None:
    with pytest.raises(ValueError):
        _record(source_file="")
    with pytest.raises(ValueError):
        _record(line_number=0)


def test_check_failure_is_not_an_exception() -> None:
    assert issubclass(CheckFailure, BaseException)
    assert not issubclass(CheckFailure, Exception)


def test_check_failure_exposes_record() -> None:
    record = _record()
    failure = CheckFailure(record)

    assert failure.record is record
    assert failure.source_file == "tests/test_demo.py"
    assert failure.line_number == 12
    assert failure.function_name == "test_demo"
    assert failure.message == "Equality test failed: a != b"
    assert str(failure) == "tests/test_demo.py:12 in test_demo: Equality test failed: a != b"


def test_except_exception_does_not_catch_check_failure() -> None:
    caught_by_generic = False
    with pytest.raises(CheckFailure):
        try:
            raise CheckFailure(_record())
        except Exception:
            caught_by_generic = True

    assert not caught_by_generic
