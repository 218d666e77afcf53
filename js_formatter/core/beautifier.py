"""
Beautifier Module

Thin wrapper around jsbeautifier, the formatting stage of the
fix-then-format pipeline.
"""

from typing import Dict
import logging

import jsbeautifier

logger = logging.getLogger(__name__)


def build_options(config: Dict):
    """
    Turn a config dict into jsbeautifier options.

    Options nested under a "js" section, as found in many .jsbeautifyrc
    files, take precedence over top-level ones.
    """
    flat = {k: v for k, v in config.items() if not isinstance(v, dict)}
    if isinstance(config.get('js'), dict):
        flat.update(config['js'])

    options = jsbeautifier.default_options()
    for key, value in flat.items():
        if not hasattr(options, key):
            logger.debug(f"Ignoring unknown beautify option: {key}")
            continue
        setattr(options, key, value)
    return options


def beautify(contents: str, config: Dict) -> str:
    """Beautify JavaScript source with the given options."""
    if not contents.strip():
        return contents
    return jsbeautifier.beautify(contents, build_options(config))
