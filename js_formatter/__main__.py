"""
Main entry point for the js-formatter package.

This allows the package to be run as a module:
python -m js_formatter
"""

from .cli.commands import main

if __name__ == '__main__':
    main()
