"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import pytest

from configuration import AppConfig


@pytest.fixture(name="minimal_config")
def minimal_config_fixture() -> AppConfig:
    """Create a minimal AppConfig with only required fields.

    Returns:
        AppConfig: A minimal AppConfig instance with required fields only.
    """
    cfg = AppConfig()
    cfg.init_from_dict({"name": "test"})
    return cfg
