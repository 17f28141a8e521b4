from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FailureRecord:
    source_file: str
    line_number: int
    function_name: str
    message: str

    def __post_init__(self) -> None:
        if not self.source_file:
            raise ValueError("FailureRecord requires a source file")
        if self.line_number < 1:
            raise ValueError(f"Invalid line number: {self.line_number}")


class CheckFailure(BaseException):
    """Raised when a check fails.

    Derives from BaseException so that ``except Exception`` in test code
    cannot swallow it; it has to be caught by name.
    """

    def __init__(self, record: FailureRecord) -> None:
        super().__init__(record.message)
        self._record = record

    @property
    def record(self) -> FailureRecord:
        return self._record

    @property
    def source_file(self) -> str:
        return self._record.source_file

    @property
    def line_number(self) -> int:
        return self._record.line_number

    @property
    def function_name(self) -> str:
        return self._record.function_name

    @property
    def message(self) -> str:
        return self._record.message

    def __str__(self) -> str:
        record = self._record
        return f"{record.source_file}:{record.line_number} in {record.function_name}: {record.message}"
