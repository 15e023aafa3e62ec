"""
Pytest configuration shared by the unit and e2e suites
"""
import importlib.util
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import ConfigError, SuiteSettings, load_settings  # noqa: E402


def apply_runner_options(option, settings: SuiteSettings) -> dict:
    """
    Fill pytest options the command line left unset from the suite settings.

    Options belonging to plugins that are not installed are left alone.
    Returns the options that were applied.
    """
    applied = {}
    for dest, value in settings.runner_options().items():
        if hasattr(option, dest) and not getattr(option, dest):
            setattr(option, dest, value)
            applied[dest] = value
    return applied


@pytest.hookimpl(tryfirst=True)
def pytest_cmdline_main(config):
    """Apply the test timeout and CI options before the plugins read them."""
    if hasattr(config, "workerinput"):
        return None
    try:
        settings = load_settings()
    except ConfigError as e:
        raise pytest.UsageError(str(e)) from e
    apply_runner_options(config.option, settings)
    return None


def pytest_configure(config):
    """Register markers that must exist even when the e2e conftest is skipped."""
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (require playwright) - skipped if not installed"
    )
    config.addinivalue_line("markers", "unit: browser-free unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark unit tests and skip e2e tests if playwright is not installed."""
    playwright_missing = importlib.util.find_spec("playwright.sync_api") is None
    skip_e2e = pytest.mark.skip(reason="Playwright not installed")

    for item in items:
        path = item.nodeid.replace("\\", "/")
        if "/unit/" in path:
            item.add_marker(pytest.mark.unit)
        elif playwright_missing and "/e2e/" in path:
            item.add_marker(skip_e2e)
