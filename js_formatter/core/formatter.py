"""
JS Formatter Module

The streaming transform. Files go in one at a time and come out in the
same order, each either untouched or with fixed and formatted contents.

Two modes are supported:
- default: ESLint fix, then jsbeautifier format
- safe: a single lint pass whose reported fixes are applied once, with no
  formatting afterwards

A path is processed at most once per formatter; repeats pass through.
"""

import copy
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set
import logging

from .beautifier import beautify
from .config import RcLoader
from .defaults import (
    BEAUTIFY_RC_NAME,
    DEFAULT_BEAUTIFY_CONFIG,
    DEFAULT_LINT_CONFIG,
    LINT_RC_NAME,
)
from .errors import FormatError, FormatterClosed
from .fixer import Fixer
from .hooks import HookRegistry
from .linter import EslintRunner
from .source_file import SourceFile

logger = logging.getLogger(__name__)


def can_handle(path: str) -> bool:
    """Only .js files are fixed and formatted."""
    return path.endswith('.js')


@dataclass
class FormatOptions:
    """Options recognised by the formatter."""
    safe: bool = False      # single-pass fix, no formatting
    lookup: bool = False    # resolve per-directory rc files
    debug: bool = False     # raise errors instead of recording them


class FormatResult:
    """Outcome of formatting one file."""

    def __init__(self, filepath: str, success: bool, changed: bool = False, message: str = ""):
        self.filepath = filepath
        self.success = success
        self.changed = changed
        self.message = message

    def __repr__(self):
        return f"FormatResult(filepath='{self.filepath}', success={self.success}, changed={self.changed})"


class JsFormatter:
    """
    Fixes and formats a stream of JavaScript files.

    This class provides:
    - Per-run tracking of processed paths
    - Default or per-directory configuration
    - Fix-then-format and safe single-pass modes
    - Error recording with listener callbacks, or raising in debug mode
    """

    def __init__(
        self,
        options: Optional[FormatOptions] = None,
        runner: Optional[EslintRunner] = None,
        hooks: Optional[HookRegistry] = None,
        on_error: Optional[Callable[[FormatError], None]] = None,
        lint_defaults: Optional[Dict] = None,
        beautify_defaults: Optional[Dict] = None,
    ):
        """
        Initialize the formatter.

        Args:
            options: Mode switches, FormatOptions() when omitted
            runner: ESLint runner used for fixing
            hooks: Hooks run before fixing, the default registry when omitted
            on_error: Listener called with each recorded FormatError
            lint_defaults: Lint config used when no rc file applies
            beautify_defaults: Beautify config used when no rc file applies
        """
        self.options = options or FormatOptions()
        self.fixer = Fixer(runner)
        self.hooks = hooks if hooks is not None else HookRegistry.with_defaults()
        self.lint_defaults = lint_defaults or DEFAULT_LINT_CONFIG
        self.beautify_defaults = beautify_defaults or DEFAULT_BEAUTIFY_CONFIG

        self._lint_loader: Optional[RcLoader] = RcLoader(LINT_RC_NAME, self.lint_defaults)
        self._beautify_loader: Optional[RcLoader] = RcLoader(BEAUTIFY_RC_NAME, self.beautify_defaults)
        self._formatted: Optional[Set[str]] = set()
        self._listeners: List[Callable[[FormatError], None]] = []
        self.errors: List[FormatError] = []
        self.results: Dict[str, FormatResult] = {}

        if on_error:
            self.on_error(on_error)

    @property
    def closed(self) -> bool:
        return self._formatted is None

    def on_error(self, listener: Callable[[FormatError], None]):
        """Register a listener for per-file errors."""
        self._listeners.append(listener)

    def _emit_error(self, filepath: str, error: Exception):
        record = FormatError(filepath, error)
        self.errors.append(record)
        logger.error(f"Failed to format {filepath}: {error}")
        for listener in self._listeners:
            listener(record)

    def _resolve_configs(self, filepath: str):
        if self.options.lookup:
            return self._lint_loader.for_path(filepath), self._beautify_loader.for_path(filepath)
        return copy.deepcopy(self.lint_defaults), self.beautify_defaults

    def _format_text(self, contents: str, filepath: str) -> str:
        lint_config, beautify_config = self._resolve_configs(filepath)
        lint_config = self.hooks.run(contents, lint_config, filepath)

        if self.options.safe:
            return self.fixer.safe_fix(contents, filepath, lint_config)

        fixed = self.fixer.fix(contents, filepath, lint_config)
        return beautify(fixed, beautify_config)

    def transform(self, file: SourceFile) -> SourceFile:
        """
        Fix and format a single file.

        Args:
            file: File from the stream

        Returns:
            The same file object, with replaced contents if it was formatted
        """
        if self.closed:
            raise FormatterClosed("Formatter has been closed")

        if file.path in self._formatted or not can_handle(file.path) or file.is_null() or not file.contents:
            return file

        self._formatted.add(file.path)

        try:
            contents = file.text()
            formatted = self._format_text(contents, file.path)
            changed = formatted != contents
            file.set_text(formatted)
            self.results[file.path] = FormatResult(
                file.path, True, changed, "Formatted" if changed else "No changes needed"
            )
        except Exception as e:
            if self.options.debug:
                raise
            self.results[file.path] = FormatResult(file.path, False, False, str(e))
            self._emit_error(file.path, e)

        return file

    def process(self, files: Iterable[SourceFile]) -> Iterator[SourceFile]:
        """Transform files lazily, yielding one output per input in order."""
        for file in files:
            yield self.transform(file)

    def close(self):
        """Release per-run state. The formatter cannot be used afterwards."""
        if self.closed:
            return
        self._lint_loader.clear()
        self._beautify_loader.clear()
        self._lint_loader = None
        self._beautify_loader = None
        self._formatted = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

