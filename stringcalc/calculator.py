"""String calculator: sum the integers in a delimited string."""

from __future__ import annotations

from typing import Optional

from stringcalc.errors import NegativeNumbersError
from stringcalc.parser import parse_number, tokenize

DEFAULT_MAX_VALUE = 1000


class StringCalculator:
    """Sums delimited integers, ignoring values above ``max_value``.

    Instances hold no state beyond their configuration, so one calculator can
    be shared freely between callers.
    """

    def __init__(self, max_value: int = DEFAULT_MAX_VALUE) -> None:
        if max_value < 0:
            raise ValueError(f"max_value must be non-negative, got {max_value}")
        self.max_value = max_value

    def add(self, numbers: Optional[str]) -> int:
        """Return the sum of the numbers in ``numbers``.

        Args:
            numbers: Text such as "1,2\\n3" or "//[*][%]\\n1*2%3". Empty or
                None sums to 0.

        Returns:
            Sum of every number not greater than ``max_value``.

        Raises:
            NegativeNumbersError: one or more numbers are negative; all of
                them are listed in the message.
            InvalidArgument: malformed header, misplaced separator, or a
                token that is not an integer.
        """
        total = 0
        negatives: list[int] = []
        for token in tokenize(numbers).tokens:
            value = parse_number(token)
            if value < 0:
                negatives.append(value)
            elif value <= self.max_value:
                total += value

        if negatives:
            raise NegativeNumbersError(negatives)
        return total


_default = StringCalculator()


def add(numbers: Optional[str]) -> int:
    """Sum ``numbers`` with the default upper bound of 1000."""
    return _default.add(numbers)
