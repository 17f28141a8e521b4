from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_TARGET = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")


def validate_target(value: str) -> str:
    if not _TARGET.match(value):
        raise ValueError(f"Expected a 'module:attribute' reference, got {value!r}")
    return value


class SuiteConfig(BaseModel):
    suite_name: str = Field(min_length=1)
    cases: list[str] = Field(default_factory=list)
    paths: list[str] = Field(default_factory=list)
    verbose: bool = False

    model_config = ConfigDict(extra="forbid")

    @field_validator("cases")
    @classmethod
    def _validate_cases(cls, value: list[str]) -> list[str]:
        for item in value:
            validate_target(item)
        return value
