"""stringcalc: the String Calculator kata.

Sums the integers in a delimited string. Commas and newlines separate numbers
by default; a leading //X or //[...][...] header declares custom delimiters.
Negative numbers are rejected and numbers above 1000 are ignored.

``add(text) -> int`` is the kata's ``sum`` operation; it keeps the kata's own
name so it does not shadow the builtin ``sum``.

Usage:
    >>> from stringcalc import add
    >>> add("//[*][%]\\n1*2%3")
    6

    python -m stringcalc add "1,2\\n3"     # Sum from the command line
    python -m stringcalc steps             # Replay the kata steps
"""

from stringcalc.calculator import DEFAULT_MAX_VALUE, StringCalculator, add
from stringcalc.errors import InvalidArgument, NegativeNumbersError

__all__ = [
    "DEFAULT_MAX_VALUE",
    "InvalidArgument",
    "NegativeNumbersError",
    "StringCalculator",
    "add",
]
