from __future__ import annotations

from types import TracebackType
from typing import Any, Callable, NoReturn, Sequence

from .base import CheckFailure
from .source import caller_frame, make_record, operand_texts

ErrorKind = type[BaseException] | tuple[type[BaseException], ...]


def _fail(message: str) -> NoReturn:
    raise CheckFailure(make_record(caller_frame(), message))


def _operands(checks: Sequence[str], names: Sequence[str], values: Sequence[Any]) -> list[str]:
    texts = operand_texts(caller_frame(), checks, names)
    return [text if text is not None else repr(value) for text, value in zip(texts, values)]


def _kinds(error_kind: ErrorKind) -> tuple[type[BaseException], ...]:
    kinds = error_kind if isinstance(error_kind, tuple) else (error_kind,)
    for kind in kinds:
        if not (isinstance(kind, type) and issubclass(kind, BaseException)):
            raise TypeError(f"Expected an exception class, got {kind!r}")
    return kinds


def _kind_name(error_kind: ErrorKind) -> str:
    return " or ".join(kind.__name__ for kind in _kinds(error_kind))


def _equality_failed(value1: Any, value2: Any, text1: str, text2: str, context: str | None) -> NoReturn:
    header = f"Equality test failed: {text1} != {text2}"
    if context is not None:
        header = f"{header} ({context})"
    _fail(f"{header}\n{text1} = {value1!r}\n{text2} = {value2!r}")


def equal(value1: Any, value2: Any, context: str | None = None) -> None:
    """Check that both values compare equal; ``context`` is added to the failure message."""
    if value1 != value2:
        text1, text2 = _operands(("equal", "equal_msg"), ("value1", "value2"), (value1, value2))
        _equality_failed(value1, value2, text1, text2, context)


def equal_msg(value1: Any, value2: Any, context: str) -> None:
    equal(value1, value2, context)


def not_equal(value1: Any, value2: Any) -> None:
    if value1 == value2:
        text1, text2 = _operands(("not_equal",), ("value1", "value2"), (value1, value2))
        _fail(f"Inequality test failed: {text1} == {text2} (== {value1!r})")


def is_true(expr: Any) -> None:
    if expr != True:  # noqa: E712
        (text,) = _operands(("is_true",), ("expr",), (expr,))
        _equality_failed(expr, True, text, "True", None)


def is_false(expr: Any) -> None:
    if expr != False:  # noqa: E712
        (text,) = _operands(("is_false",), ("expr",), (expr,))
        _equality_failed(expr, False, text, "False", None)


def greater_or_equal(stmt: Any, bound: Any) -> None:
    if stmt < bound:
        text1, text2 = _operands(("greater_or_equal",), ("stmt", "bound"), (stmt, bound))
        _fail(f"Comparison failed: {text1} < {text2}\n{text1} = {stmt!r}\n{text2} = {bound!r}")


def less_or_equal(stmt: Any, bound: Any) -> None:
    if stmt > bound:
        text1, text2 = _operands(("less_or_equal",), ("stmt", "bound"), (stmt, bound))
        _fail(f"Comparison failed: {text1} > {text2}\n{text1} = {stmt!r}\n{text2} = {bound!r}")


def fail(message: str) -> NoReturn:
    _fail(message)


def _accepts(exc: BaseException, error_kind: ErrorKind) -> bool:
    """Decide what to do with an exception raised under an expect-error check.

    Returns True when ``exc`` is the expected error and False when it has to
    propagate unchanged (a failing nested check). Any other error fails the
    check.
    """
    kinds = _kinds(error_kind)
    if isinstance(exc, CheckFailure) and not any(issubclass(kind, CheckFailure) for kind in kinds):
        return False
    if isinstance(exc, kinds):
        return True
    name = _kind_name(error_kind)
    if isinstance(exc, Exception):
        _fail(
            f"An unexpected exception was raised, was expecting type {name}. "
            f"Exception message is: {type(exc).__name__}: {exc}"
        )
    _fail(f"An unexpected unknown exception object was raised, was expecting type {name}")


def expect_error(stmt: Callable[[], object], error_kind: ErrorKind) -> BaseException:
    """Check that calling ``stmt`` raises ``error_kind``; returns the raised error."""
    _kinds(error_kind)
    try:
        stmt()
    except BaseException as exc:
        if not _accepts(exc, error_kind):
            raise
        return exc
    _fail(f"Failed to raise an exception of type {_kind_name(error_kind)}")


def expect_any_error(stmt: Callable[[], object]) -> BaseException:
    """Check that calling ``stmt`` raises anything; failing nested checks propagate."""
    try:
        stmt()
    except CheckFailure:
        raise
    except BaseException as exc:
        return exc
    _fail("Failed to raise an exception of any type")


class expecting_error:
    """Context manager form of :func:`expect_error`.

    The caught error is available as ``error`` after the block.
    """

    def __init__(self, error_kind: ErrorKind) -> None:
        _kinds(error_kind)
        self.error_kind = error_kind
        self.error: BaseException | None = None

    def __enter__(self) -> "expecting_error":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None:
            _fail(f"Failed to raise an exception of type {_kind_name(self.error_kind)}")
        if not _accepts(exc, self.error_kind):
            return False
        self.error = exc
        return True


class expecting_any_error:
    """Context manager form of :func:`expect_any_error`."""

    def __init__(self) -> None:
        self.error: BaseException | None = None

    def __enter__(self) -> "expecting_any_error":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if exc is None:
            _fail("Failed to raise an exception of any type")
        if isinstance(exc, CheckFailure):
            return False
        self.error = exc
        return True
