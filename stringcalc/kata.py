"""The kata, step by step.

Each step is one red/green increment of the exercise, in the order a student
works through it. ``run_steps`` replays them against a calculator so a
half-finished implementation shows exactly how far it has got.
"""

from __future__ import annotations

from typing import Optional

from stringcalc.calculator import StringCalculator
from stringcalc.errors import InvalidArgument
from stringcalc.models import KataStep, StepReport, StepResult

STEPS: list[KataStep] = [
    KataStep("empty", "Empty string returns 0", "", expected=0),
    KataStep("single", "Single number returns that number", "1", expected=1),
    KataStep("two", "Two comma-separated numbers are summed", "1,2", expected=3),
    KataStep("many", "Any amount of numbers is summed", "1,2,3,4,5", expected=15),
    KataStep("newlines", "Newline works as a separator", "1\n2,3", expected=6),
    KataStep("custom", "//X header sets a custom delimiter", "//;\n1;2", expected=3),
    KataStep(
        "negative",
        "Negative numbers are rejected",
        "1,-2,3",
        error_fragments=("negatives not allowed", "-2"),
    ),
    KataStep(
        "negatives",
        "Every negative number is reported",
        "1,-2,-3,4",
        error_fragments=("negatives not allowed", "-2", "-3"),
    ),
    KataStep("over-1000", "Numbers bigger than 1000 are ignored", "2,1001", expected=2),
    KataStep("long-delimiter", "Delimiters can be any length", "//[***]\n1***2***3", expected=6),
    KataStep("multi-delimiter", "Several delimiters can be declared", "//[*][%]\n1*2%3", expected=6),
    KataStep(
        "multi-long-delimiter",
        "Several long delimiters can be declared",
        "//[***][%%%]\n1***2%%%3",
        expected=6,
    ),
]


def get_step(name: str) -> Optional[KataStep]:
    """Look up a step by name."""
    for step in STEPS:
        if step.name == name:
            return step
    return None


def _run_step(calculator, step: KataStep) -> StepResult:
    try:
        actual = calculator.add(step.text)
    except InvalidArgument as e:
        message = str(e)
        passed = step.expects_error and all(f in message for f in step.error_fragments)
        return StepResult(step=step, passed=passed, error=message)
    except Exception as e:  # a stubbed or broken calculator fails the step, not the run
        return StepResult(step=step, passed=False, error=f"{type(e).__name__}: {e}")

    passed = not step.expects_error and actual == step.expected
    return StepResult(step=step, passed=passed, actual=actual)


def run_steps(calculator=None, until: Optional[int] = None) -> StepReport:
    """Run the kata steps against ``calculator``.

    Args:
        calculator: Any object with an ``add(text) -> int`` method. Defaults
            to a fresh StringCalculator.
        until: Only run the first ``until`` steps.

    Returns:
        StepReport with one result per step, in kata order.
    """
    calculator = calculator or StringCalculator()
    steps = STEPS if until is None else STEPS[:until]
    return StepReport(results=[_run_step(calculator, s) for s in steps])
