"""
Test package for js-formatter.

This package contains:
- Unit tests for individual components
- Integration tests for the collect, transform and write workflow
- Property-based tests using Hypothesis
- Mocks for ESLint, which is never run for real
"""
