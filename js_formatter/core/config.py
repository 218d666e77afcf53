"""
Config Lookup Module

Resolves per-directory rc files. For a given source file, the nearest rc
file found by walking up from its directory is merged over the built-in
defaults. Rc files are JSON that may contain // and /* */ comments.
"""

import copy
import json
import os
import re
from typing import Any, Dict, Optional
import logging

from .errors import ConfigError

logger = logging.getLogger(__name__)

_COMMENT_PATTERN = re.compile(
    r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/',
    re.DOTALL
)


def parse_json(text: str) -> Any:
    """Parse JSON text, ignoring comments outside of string literals."""
    stripped = _COMMENT_PATTERN.sub(lambda m: m.group(1) or '', text)
    return json.loads(stripped)


def deep_merge(base: Dict, override: Dict) -> Dict:
    """Return a new dict with override merged recursively over base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class RcLoader:
    """
    Finds and loads the rc file that applies to a path.

    Lookups are cached per directory for the lifetime of the loader, so a
    run over many files in one tree reads each rc file once.
    """

    def __init__(self, name: str, defaults: Dict):
        """
        Initialize the loader.

        Args:
            name: rc file name to look for, e.g. '.jsbeautifyrc'
            defaults: Config used as the base of every result
        """
        self.name = name
        self.defaults = defaults
        self._cache: Dict[str, Dict] = {}

    def find(self, directory: str) -> Optional[str]:
        """Return the nearest rc file at or above directory, if any."""
        current = os.path.abspath(directory)
        while True:
            candidate = os.path.join(current, self.name)
            if os.path.isfile(candidate):
                return candidate
            parent = os.path.dirname(current)
            if parent == current:
                return None
            current = parent

    def load(self, rc_path: str) -> Dict:
        """Read and parse a single rc file."""
        try:
            with open(rc_path, 'r', encoding='utf-8') as f:
                data = parse_json(f.read())
        except OSError as e:
            raise ConfigError(rc_path, str(e)) from e
        except ValueError as e:
            raise ConfigError(rc_path, f"not valid JSON ({e})") from e

        if not isinstance(data, dict):
            raise ConfigError(rc_path, "top level must be an object")
        return data

    def for_path(self, filepath: str) -> Dict:
        """
        Resolve the config for a source file.

        Args:
            filepath: Path of the file being formatted

        Returns:
            A fresh dict; callers may mutate it freely
        """
        directory = os.path.dirname(os.path.abspath(filepath))

        if directory not in self._cache:
            rc_path = self.find(directory)
            if rc_path:
                logger.debug(f"Using {rc_path} for {filepath}")
                self._cache[directory] = deep_merge(self.defaults, self.load(rc_path))
            else:
                self._cache[directory] = copy.deepcopy(self.defaults)

        return copy.deepcopy(self._cache[directory])

    def clear(self):
        self._cache.clear()
