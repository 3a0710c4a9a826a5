"""Tests for rendering configuration."""

from prettyjson import FormatterConfig, Style


class TestFormatterConfig:
    """Tests for FormatterConfig class."""

    def test_defaults(self):
        """Test terminal defaults."""
        config = FormatterConfig()

        assert config.key_color == Style("blue", ("bold",))
        assert config.string_color == Style("green", ("bold",))
        assert config.bool_color == Style("yellow", ("bold",))
        assert config.number_color == Style("cyan", ("bold",))
        assert config.null_color == Style("black", ("bold",))
        assert config.indent == 2
        assert config.newline == "\n"
        assert config.string_max_length == 0
        assert not config.disabled_color
        assert not config.force_color

    def test_fields_are_overridable(self):
        """Test that every field can be changed after construction."""
        config = FormatterConfig()
        config.indent = 4
        config.newline = "\r\n"
        config.key_color = None
        config.null_color = Style(attrs=("underline",))

        assert config.indent == 4
        assert config.newline == "\r\n"
        assert config.key_color is None
        assert config.null_color.color is None

    def test_instances_do_not_share_styles(self):
        """Test that each instance gets its own defaults."""
        first = FormatterConfig()
        second = FormatterConfig()
        first.key_color = Style("magenta")

        assert second.key_color == Style("blue", ("bold",))

    def test_plain_and_compact(self):
        """Test the preset constructors."""
        assert FormatterConfig.plain().disabled_color

        compact = FormatterConfig.compact()
        assert compact.is_compact
        assert compact.indent == 0

    def test_copy_leaves_original_untouched(self):
        """Test copying with changes."""
        config = FormatterConfig()
        changed = config.copy(indent=8)

        assert changed.indent == 8
        assert config.indent == 2

    def test_indent_for_depth(self):
        """Test indentation strings."""
        config = FormatterConfig(indent=3)

        assert config.indent_for(0) == ""
        assert config.indent_for(2) == "      "

    def test_negative_indent_degrades_to_none(self):
        """Test that a negative indent never produces indentation."""
        config = FormatterConfig(indent=-4)

        assert config.indent_for(3) == ""
