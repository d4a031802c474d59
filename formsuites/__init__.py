"""
Form test suites package.

Kept importable so the runner (`run_tests.py`), IDEs and CI jobs can import
page objects and data generators directly.
"""
