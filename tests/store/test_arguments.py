"""Tests for _arguments.py — on/off switches on the command line."""

import pytest

from paramfile.store._arguments import boolean_argument


class TestBooleanArgument:
    def test_absent_is_off(self):
        assert boolean_argument(["-x", "file.ini"], "-v", "--verbose") is False

    def test_present_is_on(self):
        assert boolean_argument(["file.ini", "--verbose"], "-v", "--verbose") is True

    def test_alias(self):
        assert boolean_argument(["-v"], "-v", "--verbose") is True

    @pytest.mark.parametrize("word", ["off", "OFF", "0", "false"])
    def test_following_off_word(self, word):
        assert boolean_argument(["cache", word, "file.ini"], "cache") is False

    def test_following_other_word(self):
        assert boolean_argument(["cache", "on"], "cache") is True

    def test_preceding_no(self):
        assert boolean_argument(["run", "no", "cache"], "cache") is False

    def test_name_inside_word_not_matched(self):
        assert boolean_argument(["cachefile"], "cache") is False

    def test_no_names(self):
        assert boolean_argument(["cache"]) is False

    def test_empty_args(self):
        assert boolean_argument([], "cache") is False
