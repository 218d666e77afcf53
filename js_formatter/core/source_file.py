"""
Source File Module

The file object that flows through the formatting stream: a path plus an
optional content buffer. A file without contents is a "null" file and is
always passed through untouched.
"""

import os
from typing import Optional


class SourceFile:
    """A path and its raw contents."""

    def __init__(self, path: str, contents: Optional[bytes] = None):
        self.path = path
        self.contents = contents

    @classmethod
    def read(cls, path: str) -> 'SourceFile':
        """Load a file from disk. Directories become null files."""
        if os.path.isdir(path):
            return cls(path)
        with open(path, 'rb') as f:
            return cls(path, f.read())

    def is_null(self) -> bool:
        return self.contents is None

    def text(self, encoding: str = 'utf-8') -> str:
        if self.contents is None:
            return ''
        return self.contents.decode(encoding)

    def set_text(self, text: str, encoding: str = 'utf-8'):
        self.contents = text.encode(encoding)

    def __repr__(self):
        size = 'null' if self.contents is None else f"{len(self.contents)} bytes"
        return f"SourceFile(path='{self.path}', {size})"
