"""CLI for the string calculator kata.

Usage:
    python -m stringcalc add "1,2\\n3"                # Sum a string
    python -m stringcalc add "//[*][%]\\n1*2%3" -v    # Show the parse first
    echo "1,2" | python -m stringcalc add -            # Read from stdin
    python -m stringcalc add "-1,2"                   # Leading minus is input, not an option
    python -m stringcalc parse "//;\\n1;2"            # Delimiters and tokens only
    python -m stringcalc steps                        # Replay the kata steps
    python -m stringcalc steps --until 5              # First five steps only
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from stringcalc.calculator import DEFAULT_MAX_VALUE, StringCalculator
from stringcalc.errors import InvalidArgument
from stringcalc.kata import STEPS, run_steps
from stringcalc.parser import tokenize
from stringcalc.report import render_parse, render_steps

app = typer.Typer(
    name="stringcalc",
    help="String Calculator kata",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


def _read_text(text: str, raw: bool) -> str:
    """Resolve '-' to stdin, otherwise turn literal '\\n' into newlines unless raw."""
    if text == "-":
        text = sys.stdin.read()
        # Trailing newline from echo/heredoc is not part of the input
        if text.endswith("\n"):
            text = text[:-1]
        return text
    if not raw:
        text = text.replace("\\n", "\n")
    return text


# Arguments such as "-1,2" are input, not unknown options
_TEXT_FIRST = {"ignore_unknown_options": True}


@app.command("add", context_settings=_TEXT_FIRST)
def cmd_add(
    text: str = typer.Argument(help="Numbers to sum, e.g. '1,2\\n3' ('-' reads stdin)"),
    max_value: int = typer.Option(
        DEFAULT_MAX_VALUE,
        "--max-value",
        envvar="STRINGCALC_MAX_VALUE",
        min=0,
        help="Numbers above this are ignored",
    ),
    raw: bool = typer.Option(False, "--raw", help="Do not translate literal '\\n' into newlines"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show delimiters and tokens"),
) -> None:
    """Sum the numbers in TEXT."""
    numbers = _read_text(text, raw)
    calculator = StringCalculator(max_value=max_value)
    try:
        if verbose:
            render_parse(tokenize(numbers), console)
        total = calculator.add(numbers)
    except InvalidArgument as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)
    out.print(total)


@app.command("parse", context_settings=_TEXT_FIRST)
def cmd_parse(
    text: str = typer.Argument(help="Input to split, e.g. '//;\\n1;2'"),
    raw: bool = typer.Option(False, "--raw", help="Do not translate literal '\\n' into newlines"),
) -> None:
    """Show the delimiters and tokens found in TEXT without summing."""
    try:
        parsed = tokenize(_read_text(text, raw))
    except InvalidArgument as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)
    render_parse(parsed, out)


@app.command("steps")
def cmd_steps(
    until: Optional[int] = typer.Option(
        None, "--until", "-u", min=1, max=len(STEPS), help="Only run the first N steps",
    ),
) -> None:
    """Replay the kata steps against the calculator."""
    report = run_steps(until=until)
    render_steps(report, out)
    if report.verdict != "pass":
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
