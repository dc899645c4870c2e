"""Split calculator input into delimiters and number tokens.

Input is an optional delimiter header followed by a body:

    //;\\n1;2            single-character delimiter
    //[***]\\n1***2      one delimiter of any length
    //[*][%]\\n1*2%3     several delimiters, used interchangeably

Without a header the body is split on ',' and newline. A header replaces
those defaults rather than adding to them.
"""

from __future__ import annotations

import re
from typing import Optional

from stringcalc.errors import InvalidArgument
from stringcalc.models import DEFAULT_DELIMITERS, ParsedInput

_HEADER_PREFIX = "//"

# "[***][%]" and nothing else: one or more non-empty bracket groups
_BRACKETS_RE = re.compile(r"(?:\[[^\[\]]+\])+")
_BRACKET_GROUP_RE = re.compile(r"\[([^\[\]]+)\]")
# Optional minus and ASCII digits only; int() alone would accept "1_000" and "+1"
_NUMBER_RE = re.compile(r"-?\d+", re.ASCII)


def parse_header(section: str) -> tuple[str, ...]:
    """Turn the text between '//' and the first newline into delimiters.

    Raises:
        InvalidArgument: empty header, unterminated or empty bracket group,
            or a multi-character delimiter without brackets.
    """
    if not section:
        raise InvalidArgument("delimiter header is empty")
    if len(section) == 1:
        return (section,)
    if not section.startswith("["):
        raise InvalidArgument(
            f"multi-character delimiter {section!r} must be wrapped in brackets"
        )
    if not _BRACKETS_RE.fullmatch(section):
        raise InvalidArgument(f"malformed delimiter header: {section!r}")
    delimiters = _BRACKET_GROUP_RE.findall(section)
    # dict.fromkeys keeps first-seen order while dropping repeats
    return tuple(dict.fromkeys(delimiters))


def split_header(text: str) -> tuple[tuple[str, ...], str, bool]:
    """Separate an optional delimiter header from the body.

    Returns (delimiters, body, custom).
    """
    if not text.startswith(_HEADER_PREFIX):
        return DEFAULT_DELIMITERS, text, False

    end = text.find("\n")
    if end == -1:
        raise InvalidArgument("delimiter header is missing its terminating newline")
    delimiters = parse_header(text[len(_HEADER_PREFIX):end])
    return delimiters, text[end + 1:], True


def _split_pattern(delimiters: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so '**' wins over '*' when both are declared
    ordered = sorted(delimiters, key=len, reverse=True)
    return re.compile("|".join(re.escape(d) for d in ordered))


def _check_tokens(tokens: list[str], body: str) -> None:
    """Reject empty values left behind by misplaced separators."""
    for index, token in enumerate(tokens):
        if token.strip():
            continue
        if index == 0:
            raise InvalidArgument(f"input must not start with a separator: {body!r}")
        if index == len(tokens) - 1:
            raise InvalidArgument(f"input must not end with a separator: {body!r}")
        raise InvalidArgument(f"two separators in a row: {body!r}")


def tokenize(text: Optional[str]) -> ParsedInput:
    """Parse the header and split the body into stripped tokens.

    Empty input, or a body that is empty or only whitespace, yields no
    tokens. A body holding nothing but separators is still malformed.
    """
    if not text:
        return ParsedInput()

    delimiters, body, custom = split_header(text)
    if not body.strip() and not any(d in body for d in delimiters):
        return ParsedInput(delimiters=delimiters, body=body, custom=custom)

    raw = _split_pattern(delimiters).split(body)
    _check_tokens(raw, body)
    return ParsedInput(
        delimiters=delimiters,
        body=body,
        tokens=[t.strip() for t in raw],
        custom=custom,
    )


def parse_number(token: str) -> int:
    """Parse one stripped token as an integer."""
    if not _NUMBER_RE.fullmatch(token):
        raise InvalidArgument(f"not a number: {token!r}")
    return int(token)
