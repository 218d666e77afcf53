"""
Core modules for fixing, formatting and streaming JavaScript files.
"""

from .formatter import JsFormatter, FormatOptions, FormatResult
from .linter import EslintRunner, LintReport, LintMessage
from .fixer import Fixer, apply_fixes
from .config import RcLoader
from .hooks import HookRegistry, detect_esnext
from .source_file import SourceFile

__all__ = [
    'JsFormatter',
    'FormatOptions',
    'FormatResult',
    'EslintRunner',
    'LintReport',
    'LintMessage',
    'Fixer',
    'apply_fixes',
    'RcLoader',
    'HookRegistry',
    'detect_esnext',
    'SourceFile'
]
