"""
Hooks Module

Extension point run between config resolution and fixing. A hook sees the
source text, the resolved lint config and the file path, and may return a
replacement config. Hooks are passed to the formatter where it is built;
nothing is patched into other tools.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

Hook = Callable[[str, Dict, str], Optional[Dict]]

_MODULE_SYNTAX = re.compile(
    r'^\s*(import\s+[\w{*\'"]|import\s*\(|export\s+(default|const|let|var|function|class|async|\{|\*))',
    re.MULTILINE
)


def detect_esnext(contents: str, config: Dict, filepath: str) -> Optional[Dict]:
    """Switch to module parsing when the source uses import/export."""
    if not _MODULE_SYNTAX.search(contents):
        return None

    language_options = config.setdefault('languageOptions', {})
    if language_options.get('sourceType') == 'module':
        return None

    logger.debug(f"Module syntax detected in {filepath}")
    language_options['sourceType'] = 'module'
    return config


class HookRegistry:
    """Ordered collection of named hooks."""

    def __init__(self):
        self._hooks: List[Tuple[str, Hook]] = []

    @classmethod
    def with_defaults(cls) -> 'HookRegistry':
        registry = cls()
        registry.register('esnext', detect_esnext)
        return registry

    def register(self, name: str, hook: Hook):
        if name in self.names():
            raise ValueError(f"Hook already registered: {name}")
        self._hooks.append((name, hook))

    def unregister(self, name: str):
        self._hooks = [(n, h) for n, h in self._hooks if n != name]

    def names(self) -> List[str]:
        return [name for name, _ in self._hooks]

    def run(self, contents: str, config: Dict, filepath: str) -> Dict:
        """Run every hook in registration order and return the final config."""
        for name, hook in self._hooks:
            result = hook(contents, config, filepath)
            if result is not None:
                logger.debug(f"Hook '{name}' replaced config for {filepath}")
                config = result
        return config

    def __len__(self):
        return len(self._hooks)
