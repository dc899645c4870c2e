"""Exceptions raised by the string calculator."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Input text that cannot be summed: bad header, bad separators, bad numbers."""


class NegativeNumbersError(InvalidArgument):
    """One or more negative numbers were found in the input.

    Every negative is reported, in the order it appeared.
    """

    def __init__(self, negatives: list[int]) -> None:
        self.negatives = list(negatives)
        listed = ", ".join(str(n) for n in self.negatives)
        super().__init__(f"negatives not allowed: {listed}")
