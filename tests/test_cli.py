"""Tests for the stringcalc CLI."""

from typer.testing import CliRunner

from stringcalc.__main__ import app
from stringcalc.kata import STEPS, run_steps

runner = CliRunner()


class StubCalculator:
    def add(self, numbers):
        raise NotImplementedError("not written yet")


# --- add ---

def test_add_prints_sum():
    result = runner.invoke(app, ["add", "1,2,3"])
    assert result.exit_code == 0
    assert result.output.strip() == "6"


def test_add_translates_escaped_newlines():
    result = runner.invoke(app, ["add", "//[*][%]\\n1*2%3"])
    assert result.exit_code == 0
    assert result.output.strip() == "6"


def test_add_raw_keeps_backslash_n():
    result = runner.invoke(app, ["add", "--raw", "1\\n2"])
    assert result.exit_code == 1
    assert "not a number" in result.output


def test_add_reads_stdin():
    result = runner.invoke(app, ["add", "-"], input="1\n2,3\n")
    assert result.exit_code == 0
    assert result.output.strip() == "6"


def test_add_negatives_exit_nonzero():
    result = runner.invoke(app, ["add", "1,-2,-3"])
    assert result.exit_code == 1
    assert "negatives not allowed: -2, -3" in result.output


def test_add_max_value_option():
    result = runner.invoke(app, ["add", "--max-value", "5", "1,6,5"])
    assert result.exit_code == 0
    assert result.output.strip() == "6"


def test_add_max_value_from_env():
    result = runner.invoke(app, ["add", "2,1001"], env={"STRINGCALC_MAX_VALUE": "2000"})
    assert result.exit_code == 0
    assert result.output.strip() == "1003"


def test_add_verbose_shows_tokens():
    result = runner.invoke(app, ["add", "-v", "//;\\n1;2"])
    assert result.exit_code == 0
    assert "Delimiters (header)" in result.output
    assert result.output.strip().endswith("3")


# --- parse ---

def test_parse_shows_delimiters():
    result = runner.invoke(app, ["parse", "1,2"])
    assert result.exit_code == 0
    assert "Delimiters (default)" in result.output
    assert "Token" in result.output


def test_parse_malformed_header():
    result = runner.invoke(app, ["parse", "//[***\\n1"])
    assert result.exit_code == 1
    assert "Error" in result.output


# --- steps ---

def test_steps_pass():
    result = runner.invoke(app, ["steps"])
    assert result.exit_code == 0
    assert f"{len(STEPS)}/{len(STEPS)} steps passed" in result.output


def test_steps_until():
    result = runner.invoke(app, ["steps", "--until", "2"])
    assert result.exit_code == 0
    assert "2/2 steps passed" in result.output


def test_steps_until_out_of_range():
    result = runner.invoke(app, ["steps", "--until", "0"])
    assert result.exit_code != 0


# --- leading minus ---

def test_add_leading_negative():
    result = runner.invoke(app, ["add", "-1,2"])
    assert result.exit_code == 1
    assert "negatives not allowed: -1" in result.output


def test_add_leading_negative_after_double_dash():
    result = runner.invoke(app, ["add", "--", "-1,-2"])
    assert result.exit_code == 1
    assert "negatives not allowed: -1, -2" in result.output


def test_parse_leading_negative():
    result = runner.invoke(app, ["parse", "-1,2"])
    assert result.exit_code == 0
    assert "-1" in result.output


# --- stdin is taken as-is ---

def test_add_stdin_keeps_literal_backslash_n():
    result = runner.invoke(app, ["add", "-"], input="1\\n2\n")
    assert result.exit_code == 1
    assert "not a number" in result.output


# --- steps verdict ---

def test_steps_exit_nonzero_unless_pass(monkeypatch):
    monkeypatch.setattr(
        "stringcalc.__main__.run_steps",
        lambda until=None: run_steps(StubCalculator(), until=until),
    )
    result = runner.invoke(app, ["steps"])
    assert result.exit_code == 1
    assert f"0/{len(STEPS)} steps passed (fail)" in result.output
