"""Data models for the string calculator kata.

ParsedInput, KataStep, StepResult, StepReport: the typed structures that flow
through parser -> calculator -> kata -> CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_DELIMITERS: tuple[str, ...] = (",", "\n")


@dataclass(frozen=True)
class ParsedInput:
    """Result of splitting the input text, before any number is parsed."""

    delimiters: tuple[str, ...] = DEFAULT_DELIMITERS
    body: str = ""
    tokens: list[str] = field(default_factory=list)
    custom: bool = False

    def to_dict(self) -> dict:
        return {
            "delimiters": list(self.delimiters),
            "body": self.body,
            "tokens": list(self.tokens),
            "custom": self.custom,
        }


@dataclass(frozen=True)
class KataStep:
    """One red/green increment of the kata.

    Either ``expected`` is set (the sum the step should produce) or
    ``error_fragments`` is non-empty (text the raised error must contain).
    """

    name: str
    description: str
    text: str
    expected: Optional[int] = None
    error_fragments: tuple[str, ...] = ()

    @property
    def expects_error(self) -> bool:
        return bool(self.error_fragments)


@dataclass
class StepResult:
    """Outcome of running a single step against a calculator."""

    step: KataStep
    passed: bool
    actual: Optional[int] = None
    error: str = ""


@dataclass
class StepReport:
    """Ordered results of a kata run."""

    results: list[StepResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def verdict(self) -> str:
        if self.total == 0:
            return "no-steps"
        if self.passed == self.total:
            return "pass"
        if self.passed > 0:
            return "partial"
        return "fail"
