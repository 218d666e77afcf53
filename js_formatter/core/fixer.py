"""
Fixer Module

Two ways of fixing JavaScript with ESLint:

- fix(): ESLint's own fixer, which re-lints and re-applies until the
  source stops changing. Used as the first stage of fix-then-format.
- safe_fix(): lint once and apply only the fixes attached to that single
  report, in one pass. Overlapping fixes are dropped rather than
  re-linted, so each fix is applied to exactly the text it was computed
  against.
"""

from typing import Dict, List, Optional, Sequence
import logging

from .errors import FixError
from .linter import EslintRunner, LintFix, LintMessage, LintReport

logger = logging.getLogger(__name__)

BOM = "\ufeff"


def _utf16_offsets(text: str) -> Optional[List[int]]:
    """
    Map UTF-16 code unit offsets to str indices.

    ESLint reports ranges in UTF-16 code units. Returns None when the text
    has no astral characters and both coincide.
    """
    if all(ord(ch) <= 0xFFFF for ch in text):
        return None

    offsets = []
    for index, ch in enumerate(text):
        offsets.append(index)
        if ord(ch) > 0xFFFF:
            offsets.append(index)
    offsets.append(len(text))
    return offsets


def apply_fixes(contents: str, messages: Sequence[LintMessage]) -> str:
    """
    Apply the fixes carried by lint messages in a single pass.

    Fixes are applied in ascending order of their range. A fix that starts
    at or before the end of the previously applied one is skipped, as is a
    fix with an inverted range.

    ESLint computes ranges on the text after the byte-order mark, and
    reports the mark's own removal as a fix starting at -1.

    Args:
        contents: Source the messages were reported against
        messages: Lint messages, with or without fixes

    Returns:
        The fixed source
    """
    fixes: List[LintFix] = sorted(
        (m.fix for m in messages if m.fix is not None),
        key=lambda f: (f.start, f.end)
    )
    if not fixes:
        return contents

    bom = BOM if contents.startswith(BOM) else ''
    text = contents[len(bom):]
    offsets = _utf16_offsets(text)

    def to_index(offset: int) -> int:
        if offsets is None:
            return offset
        return offsets[min(offset, len(offsets) - 1)]

    parts = []
    cursor = 0
    last_end = -1
    skipped = 0

    for fix in fixes:
        start, end = to_index(max(fix.start, 0)), to_index(fix.end)
        if start <= last_end or start > end or end > len(text):
            skipped += 1
            continue
        if fix.start < 0:
            bom = ''
        parts.append(text[cursor:start])
        parts.append(fix.text)
        cursor = last_end = end

    parts.append(text[cursor:])

    if skipped:
        logger.debug(f"Skipped {skipped} overlapping fixes")
    return bom + ''.join(parts)


class Fixer:
    """Applies ESLint fixes to source text."""

    def __init__(self, runner: Optional[EslintRunner] = None):
        self.runner = runner or EslintRunner()

    def _check_fatal(self, report: LintReport):
        fatal = report.fatal
        if fatal:
            raise FixError(report.filepath, fatal.message, fatal.line, fatal.column)

    def fix(self, contents: str, filepath: str, config: Dict) -> str:
        """Fix with ESLint's multi-pass fixer."""
        report = self.runner.fix(contents, filepath, config)
        self._check_fatal(report)
        return contents if report.output is None else report.output

    def safe_fix(self, contents: str, filepath: str, config: Dict) -> str:
        """Lint once, then apply that report's fixes in one pass."""
        report = self.runner.lint(contents, filepath, config)
        self._check_fatal(report)
        logger.debug(f"{len(report.fixable)} fixable messages in {filepath}")
        return apply_fixes(contents, report.messages)
