"""Pytest configuration for local package import path.

Ensures tests import the local hookshot package even when invoked from
directories other than the repository root.
"""

from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hookshot import Context, get_instance  # noqa: E402


@pytest.fixture
def ctx():
    return Context()


@pytest.fixture
def shared():
    """The process-wide Context, emptied before and after the test."""
    context = get_instance()
    context.reset()
    yield context
    context.reset()
