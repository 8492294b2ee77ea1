"""Tests for the passmeter command-line interface."""

from unittest.mock import patch

from passmeter import DIGITS
from passmeter.cli import main

NO_CLASSES = ["--no-uppercase", "--no-lowercase", "--no-digits", "--no-symbols"]


def _passwords(out: str) -> list[str]:
    return [line.split()[0] for line in out.splitlines() if line.strip()]


class TestGenerateCommand:
    def test_count_and_length(self, capsys):
        assert main(["generate", "-n", "10", "-c", "3"]) == 0
        pwds = _passwords(capsys.readouterr().out)
        assert len(pwds) == 3
        assert all(len(p) == 10 for p in pwds)

    def test_default_length(self, capsys):
        assert main(["generate"]) == 0
        assert len(_passwords(capsys.readouterr().out)[0]) == 16

    def test_prints_strength(self, capsys):
        main(["generate", "-n", "12"])
        out = capsys.readouterr().out
        assert "/100)" in out

    def test_length_clamped(self, capsys):
        main(["generate", "-n", "2"])
        main(["generate", "-n", "500"])
        short, long_ = _passwords(capsys.readouterr().out)
        assert len(short) == 4
        assert len(long_) == 64

    def test_length_bounds_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("PASSMETER_MAX_LENGTH", "20")
        main(["generate", "-n", "30"])
        assert len(_passwords(capsys.readouterr().out)[0]) == 20

    def test_digits_only(self, capsys):
        main(["generate", "-n", "20", "--no-uppercase", "--no-lowercase", "--no-symbols"])
        pwd = _passwords(capsys.readouterr().out)[0]
        assert all(c in DIGITS for c in pwd)

    def test_no_classes_reports_error(self, capsys):
        assert main(["generate", *NO_CLASSES]) == 2
        captured = capsys.readouterr()
        assert "Please select at least one character type" in captured.err
        assert captured.out == ""

    @patch("passmeter.secrets.randbelow", return_value=0)
    def test_output_format(self, _mock, capsys):
        main(["generate", "-n", "10", "--no-uppercase", "--no-digits", "--no-symbols"])
        assert capsys.readouterr().out == "  aaaaaaaaaa  (Weak, 25/100)\n"


class TestScoreCommand:
    def test_strong(self, capsys):
        assert main(["score", "Ab3!Ab3!Ab3!"]) == 0
        out = capsys.readouterr().out
        assert "72/100" in out
        assert "Strong" in out

    def test_weak_exits_nonzero(self, capsys):
        code = main(["score", "aaaaaaaaaa", "--no-uppercase", "--no-digits", "--no-symbols"])
        assert code == 1
        out = capsys.readouterr().out
        assert " 25/100" in out
        assert "Weak" in out

    def test_missing_classes_listed(self, capsys):
        main(["score", "abcdefghij", "--no-lowercase", "--no-digits", "--no-symbols"])
        assert "missing requested classes: uppercase" in capsys.readouterr().out

    def test_meter_width(self, capsys):
        main(["score", "Ab3!" * 20])
        out = capsys.readouterr().out
        assert "[" + "#" * 20 + "]" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
