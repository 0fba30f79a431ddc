# tests/conftest.py
"""
Pytest configuration and shared fixtures for all tests
Sets up project imports and provides the shared scenario context and config steps
"""

import logging
import sys
from pathlib import Path

import pytest
from pytest_bdd import given, parsers

# Calculate project root and add to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.montyhall.config.unified_config import UnifiedConfig  # noqa: E402

# Set up debug logging for tests
logging.basicConfig(level=logging.DEBUG, format='%(name)s - %(levelname)s - %(message)s')


def get_project_root():
    """Get project root directory for path calculations"""
    return PROJECT_ROOT


@pytest.fixture
def test_context(request):
    """A per-scenario context dict with scenario name pre-attached."""
    ctx = {}
    scenario = getattr(request.node._obj, "__scenario__", None)
    if scenario:
        ctx["scenario_name"] = scenario.name
    else:
        ctx["scenario_name"] = request.node.name
    return ctx


@given(parsers.parse('config files are available in {config_directory}'))
def load_configuration_file(test_context, config_directory):
    """Load configuration from the given directory relative to project root"""
    config_path = PROJECT_ROOT / config_directory

    assert config_path.exists(), f"Configuration directory not found: {config_path}"

    test_context['config'] = UnifiedConfig(config_path=str(config_path), environment="test")
