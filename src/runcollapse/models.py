"""Pydantic data models for runcollapse."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Run(BaseModel):
    """A maximal stretch of equal adjacent values."""

    value: int
    start: int = 0  # index of the first element in the input
    length: int = Field(default=1, ge=1)


class CollapseReport(BaseModel):
    """Input, collapsed output and the runs that connect them."""

    input: list[int] = Field(default_factory=list)
    output: list[int] = Field(default_factory=list)
    runs: list[Run] = Field(default_factory=list)

    @property
    def removed(self) -> int:
        return len(self.input) - len(self.output)
