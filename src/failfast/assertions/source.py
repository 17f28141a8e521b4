"""Call-site capture for failing checks.

A check only knows its operand values. To report where it was called and
what the operand expressions looked like, it walks out of this package to
the first foreign frame and reads the source of the call being executed
there, using the instruction positions recorded by the compiler.
"""

from __future__ import annotations

import ast
import inspect
import linecache
from types import FrameType
from typing import Sequence

from .base import FailureRecord

_PACKAGE = __name__.rpartition(".")[0]


def _is_internal(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def caller_frame() -> FrameType:
    frame = inspect.currentframe()
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    if frame is None:
        raise RuntimeError("Unable to locate the frame that called the check")
    return frame


def make_record(frame: FrameType, message: str) -> FailureRecord:
    code = frame.f_code
    return FailureRecord(
        source_file=code.co_filename or "<unknown>",
        line_number=max(frame.f_lineno or 1, 1),
        function_name=code.co_name,
        message=message,
    )


def _call_source(frame: FrameType) -> str | None:
    positions = inspect.getframeinfo(frame, context=0).positions
    if positions is None:
        return None
    lineno, end_lineno, col, end_col = positions
    if None in (lineno, end_lineno, col, end_col):
        return None
    lines = linecache.getlines(frame.f_code.co_filename, frame.f_globals)
    if not lines or end_lineno > len(lines):
        return None
    # Column offsets are byte offsets into the UTF-8 encoded line.
    selected = [line.encode("utf-8") for line in lines[lineno - 1 : end_lineno]]
    if len(selected) == 1:
        selected[0] = selected[0][col:end_col]
    else:
        selected[0] = selected[0][col:]
        selected[-1] = selected[-1][:end_col]
    try:
        return b"".join(selected).decode("utf-8")
    except UnicodeDecodeError:
        return None


def _called_name(call: ast.Call) -> str | None:
    func = call.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def operand_texts(
    frame: FrameType,
    checks: Sequence[str],
    names: Sequence[str],
) -> list[str | None]:
    """Return the source text of each named argument of the call in ``frame``.

    The call must name one of ``checks`` directly. Entries are None where the
    text cannot be recovered: no source file, star-args, or the check was
    reached indirectly (``map``, ``functools.partial``, an alias, a callback).
    """
    texts: list[str | None] = [None] * len(names)
    source = _call_source(frame)
    if source is None:
        return texts
    source = source.strip()
    try:
        tree = ast.parse(source, mode="eval")
    except SyntaxError:
        return texts
    call = tree.body
    if not isinstance(call, ast.Call) or _called_name(call) not in checks:
        return texts

    for index, node in enumerate(call.args):
        if isinstance(node, ast.Starred):
            break
        if index < len(names):
            texts[index] = ast.get_source_segment(source, node)
    for keyword in call.keywords:
        if keyword.arg in names:
            texts[names.index(keyword.arg)] = ast.get_source_segment(source, keyword.value)
    return texts
