"""Rich rendering for parse breakdowns and kata step results."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stringcalc.models import ParsedInput, StepReport

_VERDICT_STYLES = {
    "pass": "green",
    "partial": "yellow",
    "fail": "red",
    "no-steps": "dim",
}


def _show(text: str) -> str:
    """Make separators visible in table cells ('\\n' rather than a line break)."""
    return escape(text.replace("\n", "\\n")) if text else "[dim]--[/dim]"


def render_parse(parsed: ParsedInput, console: Console) -> None:
    """Render the delimiters and tokens found in one input."""
    source = "header" if parsed.custom else "default"
    delimiters = escape(" ".join(repr(d) for d in parsed.delimiters))
    console.print(f"  Delimiters ({source}): {delimiters}")

    if not parsed.tokens:
        console.print("  [dim]No tokens[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Token", min_width=8)
    for i, token in enumerate(parsed.tokens, start=1):
        table.add_row(str(i), escape(token))
    console.print(table)


def render_steps(report: StepReport, console: Console) -> None:
    """Render a results table for a kata run, followed by the verdict line."""
    if not report.results:
        console.print("[yellow]No steps were run.[/yellow]")
        return

    table = Table(title="String Calculator Kata", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Step", style="green", min_width=14)
    table.add_column("Input", min_width=12)
    table.add_column("Expected", min_width=10)
    table.add_column("Result", min_width=10)

    for i, result in enumerate(report.results, start=1):
        step = result.step
        if step.expects_error:
            expected = escape("error: " + ", ".join(step.error_fragments))
        else:
            expected = str(step.expected)
        actual = escape(result.error) if result.error else str(result.actual)
        mark = "[green]ok[/green]" if result.passed else "[red]FAIL[/red]"
        table.add_row(str(i), step.name, _show(step.text), expected, f"{mark} {actual}")

    console.print()
    console.print(table)
    style = _VERDICT_STYLES.get(report.verdict, "white")
    console.print(
        f"  {report.passed}/{report.total} steps passed ([{style}]{report.verdict}[/])"
    )
