"""
================================================================================
Form Test Tools
================================================================================

Support utilities for the form suite.

Modules:
    - common: Logging setup
    - report_tools: Allure attachments, result summaries, report generation

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
