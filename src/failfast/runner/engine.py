from __future__ import annotations

import inspect
import logging
import time
from typing import Callable, Iterable

from rich.console import Console

from failfast.assertions.base import CheckFailure

from .models import Failure, SuiteResult

TestCase = Callable[[], object]

logger = logging.getLogger("failfast.runner")


def make_console() -> Console:
    # Messages are printed verbatim: no markup, highlighting or wrapping.
    return Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


def _write_verbatim(console: Console, text: str) -> None:
    # Bypasses rendering, which would expand tabs in the message.
    console.file.write(text + "\n")
    console.file.flush()


def case_name(case: TestCase) -> str:
    name = getattr(case, "__qualname__", None)
    if isinstance(name, str) and name:
        return name
    return repr(case)


def run_suite(
    suite_name: str,
    cases: Iterable[TestCase],
    *,
    console: Console | None = None,
) -> SuiteResult:
    """Run ``cases`` in order, stopping at the first failure."""
    console = console if console is not None else make_console()
    cases = list(cases)
    console.print(f"Test started: {suite_name}")
    logger.debug("suite %s: %d case(s)", suite_name, len(cases))

    start = time.monotonic()
    cases_run: list[str] = []
    current: str | None = None
    failure: Failure | None = None
    try:
        for case in cases:
            current = case_name(case)
            cases_run.append(current)
            logger.debug("running case %s", current)
            outcome = case()
            if inspect.iscoroutine(outcome):
                outcome.close()
                raise TypeError(f"Async test case {current} is not supported")
            logger.debug("case %s passed", current)
    except CheckFailure as exc:
        failure = Failure(
            type="assertion_failed",
            message=exc.message,
            case=current,
            record=exc.record,
        )
        _write_verbatim(
            console,
            f"Test has failed at file {exc.source_file}, line {exc.line_number}, "
            f"function {exc.function_name}:\n{exc.message}"
        )
    except Exception as exc:
        message = f"{type(exc).__name__}: {exc}"
        failure = Failure(type="error", message=message, case=current)
        _write_verbatim(console, f"Test has failed, an exception was thrown: {message}")
    except BaseException as exc:
        failure = Failure(type="unknown_error", message=type(exc).__name__, case=current)
        console.print("Test has failed, an unhandled exception was thrown.")

    wall_ms = int((time.monotonic() - start) * 1000)
    if failure is None:
        console.print("Test finished")
        logger.debug("suite %s passed in %d ms", suite_name, wall_ms)
    else:
        logger.debug("suite %s failed in case %s (%s)", suite_name, failure.case, failure.type)

    return SuiteResult(
        suite_name=suite_name,
        passed=failure is None,
        total_cases=len(cases),
        cases_run=tuple(cases_run),
        failure=failure,
        wall_ms=wall_ms,
    )
