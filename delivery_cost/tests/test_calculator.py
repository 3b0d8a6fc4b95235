"""
Tests for the delivery-cost command line.

Run with: pytest delivery_cost/tests/test_calculator.py -v
"""

import pytest

from delivery_cost.scripts.calculator import main
from delivery_cost.version import VERSION


EXAMPLE_ARGS = [
    "100", "3",
    "PKG1", "5", "5", "OFR001",
    "PKG2", "15", "5", "OFR002",
    "PKG3", "10", "100", "OFR003",
]


def run(capsys, argv):
    """Run the CLI, return (stdout lines, stderr)."""
    main(argv)
    captured = capsys.readouterr()
    return captured.out.splitlines(), captured.err


class TestSuccessfulRun:
    """Runs that exit 0 and print result lines."""

    def test_example(self, capsys):
        out, _ = run(capsys, EXAMPLE_ARGS)
        assert out == ["PKG1 0 175", "PKG2 0 275", "PKG3 35 665"]

    def test_malformed_group_excluded(self, capsys):
        argv = list(EXAMPLE_ARGS)
        argv[7] = "heavy"  # PKG2 weight
        out, _ = run(capsys, argv)
        assert out == ["PKG1 0 175", "PKG3 35 665"]

    def test_zero_packages(self, capsys):
        out, _ = run(capsys, ["100", "0"])
        assert out == []

    def test_negative_weight_token_dropped(self, capsys):
        """Negative numbers are read as package tokens, then rejected by the loader."""
        out, _ = run(capsys, ["100", "2", "PKG1", "-5", "5", "OFR001", "PKG2", "5", "5", "OFR001"])
        assert out == ["PKG2 0 175"]

    def test_breakdown(self, capsys):
        out, _ = run(capsys, EXAMPLE_ARGS + ["--breakdown"])
        assert out[:3] == ["PKG1 0 175", "PKG2 0 275", "PKG3 35 665"]
        assert "COST BREAKDOWN" in out
        assert any(line.startswith("PKG3") and "665.00" in line for line in out[3:])

    def test_large_weight(self, capsys):
        out, _ = run(capsys, ["100", "1", "PKG1", "1e18", "5", "OFR001"])
        assert out == ["PKG1 0 10000000000000000000"]

    def test_options_between_package_tokens(self, capsys):
        out, _ = run(capsys, ["100", "1", "--breakdown", "PKG1", "5", "5", "OFR001"])
        assert out[0] == "PKG1 0 175"
        assert "COST BREAKDOWN" in out

    def test_help_mentions_skipped_packages(self, capsys):
        with pytest.raises(SystemExit):
            main(["--help"])
        assert "malformed" in capsys.readouterr().out

    def test_verbose_logs_to_stderr(self, capsys, caplog):
        caplog.set_level("INFO")
        out, _ = run(capsys, EXAMPLE_ARGS + ["-v"])
        assert out == ["PKG1 0 175", "PKG2 0 275", "PKG3 35 665"]
        assert "Loaded 3 package(s)" in caplog.text


class TestFailures:
    """Argument errors exit non-zero with nothing on stdout."""

    def _exit(self, capsys, argv):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        captured = capsys.readouterr()
        return exc.value.code, captured.out, captured.err

    def test_count_mismatch(self, capsys):
        """N=2 with seven package tokens fails before any output."""
        code, out, err = self._exit(
            capsys, ["100", "2", "PKG1", "5", "5", "OFR001", "PKG2", "15", "5"]
        )
        assert code != 0
        assert out == ""
        assert "does not match the expected count" in err

    def test_invalid_base_cost(self, capsys):
        code, out, err = self._exit(capsys, ["abc", "1", "PKG1", "5", "5", "OFR001"])
        assert code != 0
        assert out == ""
        assert "invalid base delivery cost" in err

    def test_negative_base_cost(self, capsys):
        code, out, _ = self._exit(capsys, ["-10", "1", "PKG1", "5", "5", "OFR001"])
        assert code != 0
        assert out == ""

    def test_invalid_package_count(self, capsys):
        code, out, err = self._exit(capsys, ["100", "two", "PKG1", "5", "5", "OFR001"])
        assert code != 0
        assert out == ""
        assert "invalid number of packages" in err

    def test_base_cost_out_of_range(self, capsys):
        code, out, _ = self._exit(capsys, ["1e301", "1", "PKG1", "5", "5", "OFR001"])
        assert code != 0
        assert out == ""

    def test_missing_arguments(self, capsys):
        code, out, _ = self._exit(capsys, ["100"])
        assert code != 0
        assert out == ""


class TestVersion:

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert VERSION in capsys.readouterr().out
