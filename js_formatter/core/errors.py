"""
Error types raised and recorded while fixing and formatting JavaScript.
"""

from dataclasses import dataclass


class JsFormatterError(Exception):
    """Base class for all js-formatter errors."""


class ConfigError(JsFormatterError):
    """An rc file could not be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config file {path}: {reason}")


class LinterError(JsFormatterError):
    """ESLint could not be run or returned unusable output."""


class FixError(JsFormatterError):
    """The source could not be fixed, usually because it does not parse."""

    def __init__(self, filepath: str, message: str, line: int = 0, column: int = 0):
        self.filepath = filepath
        self.line = line
        self.column = column
        super().__init__(f"{filepath} ({line}:{column}): {message}")


class FormatterClosed(JsFormatterError):
    """The formatter was used after close()."""


@dataclass
class FormatError:
    """A per-file failure recorded instead of being raised."""
    filepath: str
    error: Exception

    @property
    def message(self) -> str:
        return str(self.error)

    def __repr__(self):
        return f"FormatError(filepath='{self.filepath}', error={self.error!r})"
