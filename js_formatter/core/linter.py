"""
ESLint Runner Module

This module runs ESLint on in-memory source text and turns its JSON report
into structured data. ESLint is the external collaborator that knows how
to fix lint-detectable problems; nothing here fixes code on its own.
"""

import json
import os
import subprocess
import tempfile
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

from .errors import LinterError

logger = logging.getLogger(__name__)


@dataclass
class LintFix:
    """A replacement of source[start:end] with text, as reported by ESLint."""
    start: int
    end: int
    text: str


@dataclass
class LintMessage:
    """A single ESLint message."""
    rule: Optional[str]
    line: int
    column: int
    severity: int
    message: str
    fatal: bool = False
    fix: Optional[LintFix] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'LintMessage':
        fix = None
        if data.get('fix'):
            start, end = data['fix']['range']
            fix = LintFix(start, end, data['fix']['text'])
        return cls(
            rule=data.get('ruleId'),
            line=data.get('line', 0),
            column=data.get('column', 0),
            severity=data.get('severity', 0),
            message=data.get('message', ''),
            fatal=bool(data.get('fatal', False)),
            fix=fix
        )


@dataclass
class LintReport:
    """ESLint's verdict on one source text."""
    filepath: str
    messages: List[LintMessage] = field(default_factory=list)
    output: Optional[str] = None

    @property
    def fatal(self) -> Optional[LintMessage]:
        return next((m for m in self.messages if m.fatal), None)

    @property
    def error_count(self) -> int:
        return sum(1 for m in self.messages if m.severity == 2)

    @property
    def warning_count(self) -> int:
        return sum(1 for m in self.messages if m.severity == 1)

    @property
    def fixable(self) -> List[LintMessage]:
        return [m for m in self.messages if m.fix is not None]

    def __repr__(self):
        return f"LintReport(filepath='{self.filepath}', messages={len(self.messages)})"


class EslintRunner:
    """
    Runs ESLint over stdin with an explicit config.

    The resolved config is written to a temporary flat config module, so
    ESLint never does its own config lookup; rc resolution is handled by
    RcLoader instead.
    """

    def __init__(self, eslint_path: str = "eslint", timeout: int = 30):
        """
        Initialize the runner.

        Args:
            eslint_path: ESLint executable, a bare name or a path
            timeout: Seconds before a single ESLint run is abandoned
        """
        if os.sep in eslint_path:
            eslint_path = os.path.abspath(eslint_path)
        self.eslint_path = eslint_path
        self.timeout = timeout

    def is_available(self) -> bool:
        """Check if ESLint can be executed."""
        try:
            result = subprocess.run(
                [self.eslint_path, "--version"],
                capture_output=True,
                text=True,
                timeout=10
            )
            return result.returncode == 0
        except (subprocess.TimeoutExpired, FileNotFoundError):
            return False

    def _write_config(self, config: Dict) -> str:
        fd, config_path = tempfile.mkstemp(prefix="js-formatter-", suffix=".mjs")
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write("export default [" + json.dumps(config) + "];\n")
        return config_path

    def _run_eslint(self, contents: str, filepath: str, config: Dict, fix: bool) -> str:
        """
        Run ESLint once and return its raw stdout.

        The process runs from the file's directory so the file always lies
        inside ESLint's base path.
        """
        config_path = self._write_config(config)
        cwd = os.path.dirname(os.path.abspath(filepath))
        cmd = [
            self.eslint_path,
            "--stdin",
            "--stdin-filename", os.path.basename(filepath),
            "--format", "json",
            "--config", config_path,
        ]
        if fix:
            cmd.append("--fix-dry-run")

        try:
            result = subprocess.run(
                cmd,
                input=contents,
                capture_output=True,
                text=True,
                encoding='utf-8',
                timeout=self.timeout,
                cwd=cwd
            )
        except subprocess.TimeoutExpired as e:
            raise LinterError(f"ESLint timed out after {self.timeout}s on {filepath}") from e
        except FileNotFoundError as e:
            raise LinterError(f"ESLint executable not found: {self.eslint_path}") from e
        finally:
            os.unlink(config_path)

        # 0: clean, 1: lint errors found, anything else: ESLint itself failed
        if result.returncode not in (0, 1):
            detail = result.stderr.strip() or result.stdout.strip()
            raise LinterError(f"ESLint failed on {filepath} (exit {result.returncode}): {detail}")

        return result.stdout

    def _parse_report(self, filepath: str, stdout: str) -> LintReport:
        try:
            results = json.loads(stdout)
        except ValueError as e:
            raise LinterError(f"Unexpected ESLint output for {filepath}: {stdout[:200]!r}") from e

        if not results:
            return LintReport(filepath)

        entry = results[0]
        messages = [LintMessage.from_dict(m) for m in entry.get('messages', [])]
        return LintReport(filepath, messages, entry.get('output'))

    def lint(self, contents: str, filepath: str, config: Dict) -> LintReport:
        """
        Lint source text without fixing it.

        Args:
            contents: JavaScript source
            filepath: Path the source belongs to
            config: Flat ESLint config object

        Returns:
            LintReport whose messages carry ESLint's suggested fixes
        """
        stdout = self._run_eslint(contents, filepath, config, fix=False)
        report = self._parse_report(filepath, stdout)
        logger.debug(f"ESLint reported {len(report.messages)} messages for {filepath}")
        return report

    def fix(self, contents: str, filepath: str, config: Dict) -> LintReport:
        """
        Let ESLint fix the source with its own multi-pass fixer.

        Returns:
            LintReport; `output` is None when ESLint changed nothing
        """
        stdout = self._run_eslint(contents, filepath, config, fix=True)
        return self._parse_report(filepath, stdout)
