"""
Fixtures for the unit tests
"""
import pytest

from config.env_config import ENV_VARS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run each test without any of the suite's environment variables set."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def config_dir(tmp_path):
    """Minimal config tree: base/suite.yaml plus dev and qa environments."""
    (tmp_path / "base").mkdir()
    (tmp_path / "environments").mkdir()
    (tmp_path / "base" / "suite.yaml").write_text(
        "base_url: https://base.example.com\n"
        "timeouts:\n"
        "  action: 15000\n"
        "  navigation: 30000\n"
        "browser:\n"
        "  headless: true\n"
        "  slow_mo: 0\n"
        "  viewport:\n"
        "    width: 1920\n"
        "    height: 1080\n"
        "projects:\n"
        "  chromium:\n"
        "    browser: chromium\n"
        "  mobile-chrome:\n"
        "    browser: chromium\n"
        "    device: Pixel 5\n"
        "ci:\n"
        "  retries: 2\n"
        "  workers: 2\n"
        "  max_failures: 10\n"
    )
    (tmp_path / "environments" / "dev.yaml").write_text(
        "suite:\n  base_url: https://dev.example.com\n"
    )
    (tmp_path / "environments" / "qa.yaml").write_text(
        "suite:\n"
        "  base_url: https://qa.example.com\n"
        "  browser:\n"
        "    slow_mo: 100\n"
        "  timeouts:\n"
        "    action: 20000\n"
    )
    return tmp_path
