"""Tests for the passforge command-line interface."""

from unittest.mock import patch

from passforge import CHARACTER_SETS, UnavailableResourceError
from passforge.cli import main


class TestGenerateCommand:
    def test_generates_count_passwords(self, capsys):
        assert main(["generate", "-n", "20", "-c", "3"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        for line in lines:
            pwd = line.split()[0]
            assert len(pwd) == 20

    def test_length_is_clamped(self, capsys):
        assert main(["generate", "-n", "2"]) == 0
        pwd = capsys.readouterr().out.split()[0]
        assert len(pwd) == 6

    def test_only_digits(self, capsys):
        assert main(["generate", "--no-lowercase", "--no-uppercase", "--no-symbols"]) == 0
        out = capsys.readouterr().out
        assert out.split()[0].isdigit()
        assert "bits" in out

    def test_no_sets_is_an_error(self, capsys):
        code = main([
            "generate", "--no-lowercase", "--no-uppercase", "--no-digits", "--no-symbols",
        ])
        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "no character set selected" in captured.err

    def test_uses_configured_default_length(self, capsys, monkeypatch):
        monkeypatch.setenv("PASSFORGE_DEFAULT_LENGTH", "30")
        assert main(["generate"]) == 0
        assert len(capsys.readouterr().out.split()[0]) == 30


class TestPassphraseCommand:
    def test_prints_passphrase_and_entropy(self, capsys):
        assert main(["passphrase", "-w", "6", "-s", "-"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines[0].strip().split("-")) == 6
        assert lines[-1].strip() == "Entropy: ~66.0 bits"

    def test_entropy_follows_clamped_count(self, capsys):
        assert main(["passphrase", "-w", "50"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines[0].strip().split("-")) == 12
        assert lines[-1].strip() == "Entropy: ~132.0 bits"

    @patch("passforge.get_wordlist")
    def test_missing_wordlist_is_an_error(self, mock_get_wordlist, capsys):
        mock_get_wordlist.side_effect = UnavailableResourceError("BIP39 word list not loaded")
        assert main(["passphrase"]) == 1
        assert "word list not loaded" in capsys.readouterr().err


class TestCheckCommand:
    def test_scores_arguments(self, capsys):
        assert main(["check", "aaaaaa", "aB3!xy"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert "29/100" in lines[0] and "weak" in lines[0]
        assert "84/100" in lines[1] and "strong" in lines[1]

    def test_reads_file(self, capsys, tmp_path):
        path = tmp_path / "passwords.txt"
        path.write_text("abc\n\naB1!aB1!\n", encoding="utf-8")
        assert main(["check", "-f", str(path)]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_requires_input(self, capsys):
        assert main(["check"]) == 1
        assert "provide passwords" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "passphrase" in capsys.readouterr().out


def test_invalid_configuration(capsys, monkeypatch):
    monkeypatch.setenv("PASSFORGE_LOG_LEVEL", "chatty")
    assert main(["generate"]) == 2
    assert "LOG_LEVEL" in capsys.readouterr().err


def test_verbose_logs_metadata_not_secrets(capsys):
    assert main(["-v", "generate", "-n", "12"]) == 0
    captured = capsys.readouterr()
    pwd = captured.out.split()[0]
    assert "length=12" in captured.err
    assert pwd not in captured.err
    assert set(pwd) <= set("".join(CHARACTER_SETS.values()))
