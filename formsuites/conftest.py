"""
================================================================================
Suite-wide Pytest Configuration
================================================================================

Marker registry for the form suites, logger setup, and automatic ui/unit
tagging based on where a test module lives.

================================================================================
"""

import pytest

from formtest_tools.common import init_logger


MARKERS = {
    # Priority
    "P0": "Blocks a release when failing (form renders, happy-path submit)",
    "P1": "Core behavior (required fields, reset, format checks)",
    "P2": "Edge cases (long text, special characters, viewports)",
    "P3": "Exhaustive validation grids",
    # Scope
    "smoke": "Fast check that the form is alive",
    "regression": "Full regression run",
    "e2e": "Complete fill-and-submit user flows",
    # Layer
    "ui": "Drives a real browser",
    "unit": "Framework tests, no browser needed",
    # Feature
    "validation": "Required-field and format validation",
    "accessibility": "Keyboard navigation and labelling",
    "responsive": "Desktop / tablet / mobile viewports",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")

    init_logger()


def pytest_collection_modifyitems(config, items):
    """Tag tests with `ui` or `unit` from their folder."""
    for item in items:
        parts = item.path.parts
        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
        if "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    return ["", "=" * 60, "Contact Form UI Automation Suite", "=" * 60, ""]
