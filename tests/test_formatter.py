"""Tests for TextFormatter."""

import os

import pytest
import yaml

from config import ConfigurationError
from textutils import TextFormatter


SENTENCE = "Here is one line of text that is going to be wrapped after 20 columns."


class TestDefaults:
    def test_loads_default_config(self):
        formatter = TextFormatter()
        assert formatter.width == 80
        assert formatter.new_line is None
        assert formatter.wrap_long_words is False
        assert formatter.wrap_on == " "
        assert formatter.lower == 0
        assert formatter.upper == -1
        assert formatter.marker == "..."
        assert formatter.delimiters is None

    def test_empty_config_uses_builtin_defaults(self):
        formatter = TextFormatter({})
        assert formatter.width == 80
        assert formatter.marker == "..."

    def test_default_wrap_uses_platform_separator(self):
        formatter = TextFormatter({"wrap": {"width": 2}})
        assert formatter.wrap("aa bb") == "aa" + os.linesep + "bb"

    def test_loads_config_path(self, tmp_path):
        path = tmp_path / "textkit.yaml"
        path.write_text(yaml.dump({"wrap": {"width": 20, "new_line": "\n"}}))
        formatter = TextFormatter(config_path=str(path))
        assert formatter.wrap(SENTENCE) == (
            "Here is one line of\ntext that is going\nto be wrapped after\n20 columns."
        )


class TestOperations:
    def test_wrap_overrides(self):
        formatter = TextFormatter({"wrap": {"width": 20, "new_line": "\n"}})
        assert formatter.wrap("abcdefghij", width=3, wrap_long_words=True) == (
            "abc\ndef\nghi\nj"
        )
        assert formatter.wrap("aa bb", width=2, new_line="|") == "aa|bb"

    def test_wrap_configured_pattern(self):
        formatter = TextFormatter(
            {"wrap": {"width": 9, "new_line": "\n", "wrap_on": "/"}}
        )
        assert formatter.wrap("flammable/inflammable") == "flammable\ninflammable"

    def test_wrap_unknown_override(self):
        formatter = TextFormatter({})
        with pytest.raises(TypeError):
            formatter.wrap("abc", columns=3)

    def test_abbreviate_with_configured_marker(self):
        formatter = TextFormatter({})
        assert formatter.abbreviate("hello world") == "hello..."
        assert formatter.abbreviate("hello world", 2, 9, "end") == "helloend"

    def test_initials_with_configured_delimiters(self):
        assert TextFormatter({}).initials("Ben John Lee") == "BJL"
        formatter = TextFormatter({"initials": {"delimiters": ".-"}})
        assert formatter.delimiters == [".", "-"]
        assert formatter.initials("Ben J.Lee-Ann") == "BLA"

    def test_swap_case(self):
        assert TextFormatter({}).swap_case("The dog has a BONE") == "tHE DOG HAS A bone"


class TestValidation:
    def test_invalid_pattern(self):
        with pytest.raises(ConfigurationError, match="wrap.wrap_on"):
            TextFormatter({"wrap": {"wrap_on": "("}})

    @pytest.mark.parametrize("width", ["ten", 2.5, True])
    def test_width_must_be_integer(self, width):
        with pytest.raises(ConfigurationError, match="wrap.width"):
            TextFormatter({"wrap": {"width": width}})

    @pytest.mark.parametrize("value", ["false", 0, 1, None])
    def test_wrap_long_words_must_be_boolean(self, value):
        with pytest.raises(ConfigurationError, match="wrap.wrap_long_words"):
            TextFormatter({"wrap": {"wrap_long_words": value}})

    def test_wrap_long_words_false_keeps_words(self):
        formatter = TextFormatter(
            {"wrap": {"wrap_long_words": False, "width": 3, "new_line": "\n"}}
        )
        assert formatter.wrap("abcdefgh") == "abcdefgh"

    def test_null_section_uses_defaults(self):
        formatter = TextFormatter({"wrap": None, "abbreviate": None})
        assert formatter.width == 80
        assert formatter.wrap_long_words is False
        assert formatter.marker == "..."

    def test_new_line_must_be_string(self):
        with pytest.raises(ConfigurationError):
            TextFormatter({"wrap": {"new_line": 5}})

    def test_abbreviate_bounds(self):
        with pytest.raises(ConfigurationError):
            TextFormatter({"abbreviate": {"lower": 5, "upper": 2}})
        with pytest.raises(ConfigurationError):
            TextFormatter({"abbreviate": {"upper": -3}})

    def test_delimiters_must_be_single_characters(self):
        with pytest.raises(ConfigurationError):
            TextFormatter({"initials": {"delimiters": ["ab"]}})
        with pytest.raises(ConfigurationError):
            TextFormatter({"initials": {"delimiters": 7}})
