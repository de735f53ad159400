"""Tests for word list loading."""

from unittest.mock import patch

import pytest

from passforge import UnavailableResourceError, calculate_entropy, generate_passphrase
from passforge.wordlist import get_wordlist, load_wordlist, validate_wordlist


def _write_words(path, words):
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


class TestBip39Wordlist:
    def test_size_and_bounds(self):
        words = load_wordlist()
        assert len(words) == 2048
        assert len(set(words)) == 2048
        assert words[0] == "abandon"
        assert words[-1] == "zoo"

    def test_immutable_and_cached(self):
        words = load_wordlist()
        assert isinstance(words, tuple)
        assert load_wordlist() is words

    def test_default_is_bip39(self):
        assert get_wordlist() == load_wordlist()

    @patch("passforge.wordlist.Mnemonic")
    def test_missing_language_raises(self, mock_mnemonic):
        mock_mnemonic.side_effect = FileNotFoundError("english.txt")
        with pytest.raises(UnavailableResourceError, match="BIP39"):
            load_wordlist()


class TestWordlistFile:
    def test_loads_file(self, tmp_path):
        path = _write_words(tmp_path / "words.txt", ["red", "green", "", "blue", "black"])
        assert load_wordlist(path) == ("red", "green", "blue", "black")

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(UnavailableResourceError, match="cannot read"):
            load_wordlist(tmp_path / "nope.txt")

    def test_configured_path(self, tmp_path, monkeypatch):
        path = _write_words(tmp_path / "words.txt", ["north", "south"])
        monkeypatch.setenv("PASSFORGE_WORDLIST_PATH", str(path))
        assert get_wordlist() == ("north", "south")
        assert calculate_entropy(6) == 6.0
        phrase = generate_passphrase(4, "-")
        assert set(phrase.split("-")) <= {"north", "south"}

    def test_configured_path_missing(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PASSFORGE_WORDLIST_PATH", str(tmp_path / "gone.txt"))
        with pytest.raises(UnavailableResourceError):
            generate_passphrase(6, "-")
        assert calculate_entropy(6) == 0


class TestValidateWordlist:
    def test_empty(self):
        with pytest.raises(UnavailableResourceError, match="empty"):
            validate_wordlist([])

    def test_duplicates(self):
        with pytest.raises(UnavailableResourceError, match="duplicate"):
            validate_wordlist(["a", "b", "a", "c"])

    def test_not_power_of_two(self):
        with pytest.raises(UnavailableResourceError, match="power of two"):
            validate_wordlist(["a", "b", "c"])

    def test_returns_tuple(self):
        assert validate_wordlist(iter(["a", "b"])) == ("a", "b")
