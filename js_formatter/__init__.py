"""
js-formatter

Fixes and formats JavaScript files as a stream, with ESLint doing the fixing
and jsbeautifier doing the formatting.
"""

__version__ = "1.0.0"

from .core.formatter import JsFormatter, FormatOptions
from .core.linter import EslintRunner
from .core.hooks import HookRegistry
from .core.source_file import SourceFile

__all__ = [
    'JsFormatter',
    'FormatOptions',
    'EslintRunner',
    'HookRegistry',
    'SourceFile'
]
