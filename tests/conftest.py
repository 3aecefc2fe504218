# tests/conftest.py
import pytest

from cannot.config import reset_config
from cannot.core.extensions import auto_register, reset_global_registry


@pytest.fixture(autouse=True)
def reset_state():
    """Reset registry (with built-ins reinstalled) and configuration around each test"""
    reset_global_registry()
    auto_register()
    reset_config()
    yield
    reset_global_registry()
    auto_register()
    reset_config()
