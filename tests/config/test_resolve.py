from __future__ import annotations

import sys
import textwrap
from pathlib import Path
from typing import Iterator

import pytest
from rich.console import Console

from failfast.config.models import SuiteConfig
from failfast.config.resolve import build_suite, resolve_target, suite_from_target
from failfast.runner.suite import Suite


@pytest.fixture
def cases_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    monkeypatch.setattr(sys, "path", list(sys.path))
    name = f"ff_cases_{tmp_path.name.replace('-', '_')}"
    (tmp_path / f"{name}.py").write_text(
        textwrap.dedent(
            """
            from failfast import Suite, equal

            calls = []


            def test_one():
                calls.append("one")


            class Group:
                @staticmethod
                def test_two():
                    calls.append("two")
                    equal(len(calls), 2)


            suite = Suite("module suite", [test_one, Group.test_two])
            not_callable = 42
            """
        ),
        encoding="utf-8",
    )
    yield name
    sys.modules.pop(name, None)


def test_build_suite_imports_cases_in_order(tmp_path: Path, cases_module: str, console: Console) -> None:
    config = SuiteConfig(
        suite_name="configured",
        paths=[str(tmp_path)],
        cases=[f"{cases_module}:test_one", f"{cases_module}:Group.test_two"],
    )

    suite = build_suite(config)
    result = suite.run(console)

    assert suite.name == "configured"
    assert result.passed
    assert sys.modules[cases_module].calls == ["one", "two"]


def test_suite_from_target_returns_suite_object(tmp_path: Path, cases_module: str) -> None:
    sys.path.insert(0, str(tmp_path))

    suite = suite_from_target(f"{cases_module}:suite")

    assert isinstance(suite, Suite)
    assert suite.name == "module suite"


def test_suite_from_target_wraps_single_case(tmp_path: Path, cases_module: str) -> None:
    sys.path.insert(0, str(tmp_path))

    suite = suite_from_target(f"{cases_module}:test_one")

    assert suite.name == f"{cases_module}:test_one"
    assert len(suite.cases) == 1


def test_resolve_errors(tmp_path: Path, cases_module: str) -> None:
    sys.path.insert(0, str(tmp_path))

    with pytest.raises(ValueError):
        resolve_target("missing_colon")
    with pytest.raises(ValueError, match="no attribute"):
        resolve_target(f"{cases_module}:nope")
    with pytest.raises(ValueError, match="neither a Suite nor a callable"):
        suite_from_target(f"{cases_module}:not_callable")
    with pytest.raises(ImportError):
        resolve_target("ff_module_that_does_not_exist:case")

    config = SuiteConfig(suite_name="bad", cases=[f"{cases_module}:not_callable"])
    with pytest.raises(ValueError, match="not callable"):
        build_suite(config)
