"""
Unit tests for the fixer module.
"""

import pytest
from unittest.mock import Mock

from js_formatter.core.errors import FixError
from js_formatter.core.fixer import Fixer, apply_fixes
from js_formatter.core.linter import EslintRunner, LintFix, LintMessage, LintReport


def fix_message(start, end, text, rule='semi'):
    return LintMessage(rule, 1, start + 1, 2, 'fixable', fix=LintFix(start, end, text))


class TestApplyFixes:
    """Test the single-pass splice."""

    def test_no_fixes_returns_input(self):
        messages = [LintMessage('no-undef', 1, 1, 2, "'x' is not defined.")]

        assert apply_fixes("x = 1", messages) == "x = 1"

    def test_insertion(self):
        assert apply_fixes("var a = 1", [fix_message(9, 9, ';')]) == "var a = 1;"

    def test_multiple_fixes_applied_in_range_order(self):
        contents = 'var a = "x"\nvar b = 2\n'
        messages = [
            fix_message(21, 21, ';'),
            fix_message(8, 11, "'x'", 'quotes'),
        ]

        assert apply_fixes(contents, messages) == "var a = 'x'\nvar b = 2;\n"

    def test_overlapping_fix_is_skipped(self):
        contents = "abcdef"
        messages = [
            fix_message(0, 3, "XYZ"),
            fix_message(2, 4, "!!"),
        ]

        assert apply_fixes(contents, messages) == "XYZdef"

    def test_touching_fix_is_skipped(self):
        # same rule as ESLint: a fix may not start where the last one ended
        messages = [fix_message(0, 2, "AB"), fix_message(2, 4, "CD")]

        assert apply_fixes("abcdef", messages) == "ABcdef"

    def test_out_of_range_fix_is_skipped(self):
        assert apply_fixes("abc", [fix_message(2, 10, "!")]) == "abc"

    def test_utf16_offsets(self):
        # the emoji is two UTF-16 code units, so ESLint reports offset 8
        contents = "a = '\U0001F600'\n"

        assert apply_fixes(contents, [fix_message(8, 8, ';')]) == "a = '\U0001F600';\n"

    def test_ranges_skip_byte_order_mark(self):
        # ESLint reports ranges against the text after the BOM
        contents = "\ufeffvar a = 1\n"

        assert apply_fixes(contents, [fix_message(9, 9, ';')]) == "\ufeffvar a = 1;\n"

    def test_byte_order_mark_removal(self):
        contents = "\ufeffvar a = 1;\n"

        assert apply_fixes(contents, [fix_message(-1, 0, '', rule='unicode-bom')]) == "var a = 1;\n"

    def test_byte_order_mark_removal_with_other_fixes(self):
        messages = [
            fix_message(9, 9, ';'),
            fix_message(-1, 0, '', rule='unicode-bom'),
        ]

        assert apply_fixes("\ufeffvar a = 1\n", messages) == "var a = 1;\n"


class TestFixer:
    """Test the Fixer class against a mocked runner."""

    def setup_method(self):
        self.runner = Mock(spec=EslintRunner)
        self.fixer = Fixer(self.runner)

    def test_fix_returns_eslint_output(self):
        self.runner.fix.return_value = LintReport('app.js', [], "var a = 1;")

        assert self.fixer.fix("var a = 1", 'app.js', {}) == "var a = 1;"
        self.runner.fix.assert_called_once_with("var a = 1", 'app.js', {})

    def test_fix_without_output_returns_input(self):
        self.runner.fix.return_value = LintReport('app.js', [], None)

        assert self.fixer.fix("var a = 1;", 'app.js', {}) == "var a = 1;"

    def test_fix_fatal_raises(self):
        fatal = LintMessage(None, 2, 5, 2, 'Parsing error: Unexpected token', fatal=True)
        self.runner.fix.return_value = LintReport('app.js', [fatal])

        with pytest.raises(FixError) as exc_info:
            self.fixer.fix("var = ;", 'app.js', {})

        assert exc_info.value.line == 2
        assert exc_info.value.column == 5
        assert "Parsing error" in str(exc_info.value)

    def test_safe_fix_lints_once(self):
        self.runner.lint.return_value = LintReport('app.js', [fix_message(9, 9, ';')])

        result = self.fixer.safe_fix("var a = 1", 'app.js', {'rules': {}})

        assert result == "var a = 1;"
        self.runner.lint.assert_called_once_with("var a = 1", 'app.js', {'rules': {}})
        self.runner.fix.assert_not_called()

    def test_safe_fix_fatal_raises(self):
        fatal = LintMessage(None, 1, 1, 2, 'Parsing error', fatal=True)
        self.runner.lint.return_value = LintReport('app.js', [fatal])

        with pytest.raises(FixError):
            self.fixer.safe_fix("}", 'app.js', {})

    def test_safe_fix_keeps_byte_order_mark(self):
        self.runner.lint.return_value = LintReport('app.js', [fix_message(9, 9, ';')])

        result = self.fixer.safe_fix("\ufeffvar a = 1\n", 'app.js', {})

        assert result == "\ufeffvar a = 1;\n"
