"""Tests for the console front-end."""
from __future__ import annotations

import io

import pytest

from cli import main


@pytest.fixture
def stdin(monkeypatch):
    """Feed lines to ``input()``."""
    def feed(*lines: str) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))
    return feed


class TestBinaryCommand:

    def test_both_methods(self, capsys):
        assert main(["binary", "6"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "6 written on binary as 110",
            "6 written on binary as 110",
        ]

    def test_single_method(self, capsys):
        assert main(["binary", "--method", "tail", "255"]) == 0
        assert capsys.readouterr().out == "255 written on binary as 11111111\n"

    def test_prompts_when_number_missing(self, capsys, stdin):
        stdin("5")
        assert main(["binary", "--method", "recursive"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Enter number:",
            "5 written on binary as 101",
        ]

    def test_non_numeric_input(self, capsys, stdin):
        stdin("five")
        assert main(["binary"]) == 1
        assert capsys.readouterr().out.splitlines() == [
            "Enter number:",
            "Error: Enter a valid whole number, got 'five'",
        ]

    def test_negative_input(self, capsys):
        assert main(["binary", "--", "-3"]) == 1
        assert capsys.readouterr().out.startswith("Error:")

    def test_missing_input(self, capsys, stdin):
        stdin()
        assert main(["binary"]) == 1
        assert capsys.readouterr().out.endswith("Error: no input\n")

    def test_bounded_encoder(self, capsys):
        assert main(["binary", "--bounds", "uint8", "--method", "tail", "200"]) == 0
        assert capsys.readouterr().out == "200 written on binary as 11001000\n"

    def test_bounded_encoder_rejects(self, capsys):
        assert main(["binary", "--bounds", "uint8", "300"]) == 1
        assert capsys.readouterr().out == "Error: 300 is outside bounds [0, 255]\n"

    def test_recursive_too_deep(self, capsys):
        huge = str(1 << 5000)
        assert main(["binary", "--method", "recursive", huge]) == 1
        assert capsys.readouterr().out == (
            "Error: 5001-bit input is too large for the recursive encoder; "
            "use --method tail\n"
        )

    def test_tail_handles_what_recursion_cannot(self, capsys):
        n = 1 << 5000
        assert main(["binary", "--method", "tail", str(n)]) == 0
        out = capsys.readouterr().out
        assert out == f"{n} written on binary as 1{'0' * 5000}\n"

    def test_both_methods_keeps_tail_result_when_too_deep(self, capsys):
        n = 1 << 5000
        assert main(["binary", str(n)]) == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f"{n} written on binary as 1{'0' * 5000}"
        assert lines[1].startswith("Error: 5001-bit input")
        assert len(lines) == 2


class TestRunnerCommands:

    def test_even(self, capsys):
        assert main(["even", "5"]) == 0
        assert capsys.readouterr().out == "5 is even: false\n"

    def test_even_negative(self, capsys):
        assert main(["even", "--", "-4"]) == 0
        assert capsys.readouterr().out == "-4 is even: true\n"

    def test_factorial(self, capsys):
        assert main(["factorial", "5"]) == 0
        assert capsys.readouterr().out == "factorial of 5 is: 120\n"

    def test_factorial_prompts(self, capsys, stdin):
        stdin("0")
        assert main(["factorial"]) == 0
        assert capsys.readouterr().out.splitlines()[-1] == "factorial of 0 is: 1"

    def test_prime(self, capsys):
        assert main(["prime", "7"]) == 0
        assert capsys.readouterr().out == "7 is prime: true\n"

    def test_one_is_not_prime(self, capsys):
        assert main(["prime", "1"]) == 0
        assert capsys.readouterr().out == "1 is prime: false\n"


class TestExerciseCommands:

    def test_temperature(self, capsys):
        assert main(["temperature", "100"]) == 0
        assert capsys.readouterr().out == "100.0 C° = 212.0 F°\n"

    def test_temperature_invalid(self, capsys, stdin):
        stdin("hot")
        assert main(["temperature"]) == 1
        assert capsys.readouterr().out.splitlines()[-1] == (
            "Error: Enter a valid temperature, got 'hot'"
        )

    def test_divide(self, capsys):
        assert main(["divide", "10", "2"]) == 0
        assert capsys.readouterr().out == "10 / 2 = 5\n"

    def test_divide_truncates(self, capsys):
        assert main(["divide", "--", "-7", "2"]) == 0
        assert capsys.readouterr().out == "-7 / 2 = -3\n"

    def test_divide_by_zero(self, capsys):
        assert main(["divide", "10", "0"]) == 1
        assert capsys.readouterr().out == "Error: Cannot divide by zero.\n"

    def test_divide_prompts(self, capsys, stdin):
        stdin("9", "4")
        assert main(["divide"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Enter dividend:",
            "Enter divisor:",
            "9 / 4 = 2",
        ]


def test_command_required():
    with pytest.raises(SystemExit):
        main([])


class TestLogLevel:

    def test_unknown_level_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "loud", "binary", "6"])
        assert exc_info.value.code == 2
        assert "invalid choice: 'LOUD'" in capsys.readouterr().err

    def test_level_is_case_insensitive(self, capsys):
        assert main(["--log-level", "debug", "binary", "--method", "tail", "6"]) == 0
        assert capsys.readouterr().out == "6 written on binary as 110\n"
