"""
Tests for the command line in main.py
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

pytest.importorskip("PySide6.QtWidgets")

from main import parse_args


class TestParseArgs:
    """Option parsing."""

    def test_defaults(self):
        """Default names and log level."""
        args, rest = parse_args([])
        assert (args.player_one, args.player_two) == ("Player 1", "Player 2")
        assert args.log_level == "WARNING"
        assert rest == []

    def test_names_and_level(self):
        """Names and log level come from the given argv, not sys.argv."""
        args, rest = parse_args(["--player-one", "Ada", "--player-two", "Grace",
                                 "--log-level", "DEBUG"])
        assert (args.player_one, args.player_two, args.log_level) == ("Ada", "Grace", "DEBUG")
        assert rest == []

    def test_unknown_flags_left_for_qt(self):
        """Flags argparse doesn't know are returned for QApplication."""
        args, rest = parse_args(["--player-one", "Ada", "-reverse"])
        assert args.player_one == "Ada"
        assert rest == ["-reverse"]
