"""Regression tests for snapshot testing.

Uses syrupy for snapshot assertions to detect unexpected changes
in recorder output:
- Mismatch reports from the default handler
- Normalized JSON log lines
"""
