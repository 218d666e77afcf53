"""
Unit tests for the jsbeautifier wrapper.
"""

from js_formatter.core.beautifier import beautify, build_options
from js_formatter.core.defaults import DEFAULT_BEAUTIFY_CONFIG


class TestBuildOptions:
    """Test option conversion."""

    def test_known_options_applied(self):
        options = build_options({'indent_size': 2, 'brace_style': 'expand'})

        assert options.indent_size == 2
        assert options.brace_style == 'expand'

    def test_unknown_options_ignored(self):
        options = build_options({'indent_size': 2, 'not_an_option': True})

        assert options.indent_size == 2
        assert not hasattr(options, 'not_an_option')

    def test_js_section_wins(self):
        options = build_options({'indent_size': 2, 'js': {'indent_size': 8}, 'css': {'indent_size': 1}})

        assert options.indent_size == 8


class TestBeautify:
    """Test beautification with the default options."""

    def test_spacing_and_newline(self):
        assert beautify("var a=1;", DEFAULT_BEAUTIFY_CONFIG) == "var a = 1;\n"

    def test_function_body_indented(self):
        result = beautify("function f(){return 1;}", DEFAULT_BEAUTIFY_CONFIG)

        assert result == "function f() {\n    return 1;\n}\n"

    def test_indent_size_option(self):
        config = dict(DEFAULT_BEAUTIFY_CONFIG, indent_size=2)

        assert beautify("function f(){return 1;}", config) == "function f() {\n  return 1;\n}\n"

    def test_whitespace_only_unchanged(self):
        assert beautify("", DEFAULT_BEAUTIFY_CONFIG) == ""
        assert beautify("  \n", DEFAULT_BEAUTIFY_CONFIG) == "  \n"
