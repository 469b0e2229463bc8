"""Global pytest configuration.

Restores the flowcut log level after every test, since the CLI and logging
tests change it globally.
"""

from __future__ import annotations

import logging

import pytest

from flowcut.logging import set_global_log_level


@pytest.fixture(autouse=True)
def _restore_log_level():
    yield
    set_global_log_level(logging.INFO)
