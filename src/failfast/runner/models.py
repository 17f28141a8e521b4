from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from failfast.assertions.base import FailureRecord

FailureType = Literal["assertion_failed", "error", "unknown_error"]


@dataclass(frozen=True)
class Failure:
    type: FailureType
    message: str
    case: str | None = None
    record: FailureRecord | None = None


@dataclass(frozen=True)
class SuiteResult:
    suite_name: str
    passed: bool
    total_cases: int
    cases_run: tuple[str, ...] = ()
    failure: Failure | None = None
    wall_ms: int = 0

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
