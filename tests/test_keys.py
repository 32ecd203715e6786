"""Tests for taskboard.keys: decoding raw getchar() output."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from taskboard.keys import decode, read_key


class TestDecode:
    """Tests for turning raw getchar() output into key names."""

    @pytest.mark.parametrize("raw,name", [
        ("\x1b[A", "up"),
        ("\x1b[B", "down"),
        ("\x1b[C", "right"),
        ("\x1b[D", "left"),
        ("\x1bOA", "up"),
        ("\x1b[Z", "backtab"),
        ("\x1b[3~", "delete"),
        ("\x1b", "esc"),
        ("\t", "tab"),
        ("\r", "enter"),
        ("\n", "enter"),
        ("\x7f", "backspace"),
        ("\x08", "backspace"),
    ])
    def test_named_keys(self, raw, name):
        """ANSI sequences and control characters map to names."""
        assert decode(raw) == name

    @pytest.mark.parametrize("raw,name", [
        ("\xe0H", "up"),
        ("\xe0P", "down"),
        ("\xe0K", "left"),
        ("\xe0M", "right"),
        ("\x00\x0f", "backtab"),
    ])
    def test_windows_scan_codes(self, raw, name):
        """Prefixed scan codes decode like their ANSI twins."""
        assert decode(raw) == name

    @pytest.mark.parametrize("ch", ["a", "Q", " ", "!", "<", "+", "é"])
    def test_printable_passthrough(self, ch):
        """Printable characters are returned as typed."""
        assert decode(ch) == ch

    @pytest.mark.parametrize("raw", ["", "\x01", "\x1b[99~", "\xe0z", "ab"])
    def test_unknown_is_ignored(self, raw):
        """Unknown input decodes to the empty string."""
        assert decode(raw) == ""


def test_read_key_uses_click_getchar():
    """read_key() decodes whatever click.getchar() returns."""
    with patch("taskboard.keys.click.getchar", return_value="\x1b[D"):
        assert read_key() == "left"
