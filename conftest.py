"""
Repository-level pytest configuration.

Why this exists:
  - Expose the repository root to tests (config files, bundled assets)
  - Keep demo-safe defaults explicit: nothing here points the suite at a
    real deployment; `config/config.yaml` serves the bundled demo form
"""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
