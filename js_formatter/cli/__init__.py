"""
Command-line interface for js-formatter.
"""
