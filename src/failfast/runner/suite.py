from __future__ import annotations

from typing import Iterable, NoReturn

from rich.console import Console

from .engine import TestCase, run_suite
from .models import SuiteResult


class Suite:
    """A named, ordered sequence of test cases.

    Cases run in registration order and the first failure stops the run::

        suite = Suite("arithmetic")

        @suite.case
        def test_add():
            equal(1 + 1, 2)

        if __name__ == "__main__":
            suite.main()
    """

    def __init__(self, name: str, cases: Iterable[TestCase] = ()) -> None:
        self.name = name
        self.cases: list[TestCase] = list(cases)

    def case(self, func: TestCase) -> TestCase:
        self.cases.append(func)
        return func

    def add(self, *cases: TestCase) -> "Suite":
        self.cases.extend(cases)
        return self

    def run(self, console: Console | None = None) -> SuiteResult:
        return run_suite(self.name, self.cases, console=console)

    def main(self, console: Console | None = None) -> NoReturn:
        raise SystemExit(self.run(console).exit_code)

    def __repr__(self) -> str:
        return f"Suite({self.name!r}, cases={len(self.cases)})"


def test_main(name: str, *cases: TestCase, console: Console | None = None) -> NoReturn:
    """Entry point of a test program: run ``cases`` and exit with 0 or 1."""
    Suite(name, cases).main(console)


test_main.__test__ = False  # type: ignore[attr-defined]
