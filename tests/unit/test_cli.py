"""Tests for the bignumber command-line interface."""

import pytest

from bignumber.cli import EXIT_INVALID_INPUT, EXIT_OK, build_parser, main


class TestFormatCommand:
    """Tests for `bignumber format`."""

    def test_prints_canonical_string(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a precision the canonical string is printed."""
        assert main(["format", "-007.50"]) == EXIT_OK
        assert capsys.readouterr().out == "-7.50\n"

    def test_pads(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Precision beyond the scale pads with zeros."""
        assert main(["format", "3", "--precision", "2"]) == EXIT_OK
        assert capsys.readouterr().out == "3.00\n"

    def test_rounds_with_mode(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--rounding selects the rounding rule."""
        assert main(["format", "1.25", "-p", "1", "--rounding", "half_up"]) == EXIT_OK
        assert capsys.readouterr().out == "1.3\n"
        assert main(["format", "1.25", "-p", "1", "--rounding", "half_even"]) == EXIT_OK
        assert capsys.readouterr().out == "1.2\n"

    def test_default_rounding_from_environment(
        self, capsys: pytest.CaptureFixture[str], clean_rounding_env: pytest.MonkeyPatch
    ) -> None:
        """Without --rounding the BIGNUMBER_ROUNDING mode is used."""
        clean_rounding_env.setenv("BIGNUMBER_ROUNDING", "half_even")
        assert main(["format", "1.25", "-p", "1"]) == EXIT_OK
        assert capsys.readouterr().out == "1.2\n"

    def test_invalid_environment_still_formats(
        self, capsys: pytest.CaptureFixture[str], clean_rounding_env: pytest.MonkeyPatch
    ) -> None:
        """A bad BIGNUMBER_ROUNDING is reported on stderr and half_up is used."""
        clean_rounding_env.setenv("BIGNUMBER_ROUNDING", "sideways")
        assert main(["format", "1.25", "-p", "1"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "1.3\n"
        assert "bignumber_invalid_rounding_env" in captured.err

    def test_truncates(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--truncate drops digits without rounding."""
        assert main(["format", "1.249", "-p", "1", "--truncate"]) == EXIT_OK
        assert capsys.readouterr().out == "1.2\n"

    def test_invalid_number(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Malformed input exits with status 2 and an error on stderr."""
        assert main(["format", "12.3.4"]) == EXIT_INVALID_INPUT
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "12.3.4" in captured.err

    def test_negative_precision(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Negative precision is reported as invalid input."""
        assert main(["format", "1.5", "-p", "-1"]) == EXIT_INVALID_INPUT
        assert "Precision" in capsys.readouterr().err


class TestCompareCommand:
    """Tests for `bignumber compare`."""

    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [
            ("1.5", "1.50", "="),
            ("1.5", "1.500001", "<"),
            ("100", "99.999", ">"),
            ("-0.5", "-0.50", "="),
        ],
    )
    def test_compare(self, capsys: pytest.CaptureFixture[str], left: str, right: str, expected: str) -> None:
        """Prints the relation between the two numbers."""
        assert main(["compare", left, right]) == EXIT_OK
        assert capsys.readouterr().out == f"{expected}\n"

    def test_invalid_operand(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A malformed operand exits with status 2."""
        assert main(["compare", "1", "abc"]) == EXIT_INVALID_INPUT
        assert "abc" in capsys.readouterr().err

    def test_verbose_logs_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--verbose emits debug events on stderr, leaving stdout clean."""
        assert main(["--verbose", "compare", "1", "2"]) == EXIT_OK
        captured = capsys.readouterr()
        assert captured.out == "<\n"
        assert "bignumber_compared" in captured.err


class TestParser:
    """Tests for argument parsing."""

    def test_command_required(self) -> None:
        """A subcommand must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_unknown_rounding_rejected(self) -> None:
        """--rounding only accepts known modes."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["format", "1", "--rounding", "bankers"])
