from __future__ import annotations

import pytest

from evhub.config import reset_config


@pytest.fixture(autouse=True)
def _reset_hub_config():
    """Keep process-wide config changes from leaking between tests."""
    reset_config()
    yield
    reset_config()
