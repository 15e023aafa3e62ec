"""
Suite Settings

Resolves the effective settings for a run from the YAML files and the
environment variable overrides.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config_loader import ConfigLoader
from .env_config import BASE_DIR, ConfigError, read_environment

logger = logging.getLogger(__name__)


@dataclass
class SuiteSettings:
    """Effective configuration for one test run."""

    environment: str
    base_url: str
    ci: bool = False
    debug: bool = False
    headless: bool = True
    slow_mo: int = 0
    viewport: Dict[str, int] = field(default_factory=lambda: {"width": 1920, "height": 1080})
    launch_args: Dict[str, List[str]] = field(default_factory=dict)
    test_timeout: int = 60000
    action_timeout: int = 15000
    navigation_timeout: int = 30000
    element_timeout: int = 10000
    projects: Dict[str, Dict[str, str]] = field(default_factory=dict)
    artifacts: Dict[str, str] = field(default_factory=dict)
    ci_retries: int = 2
    ci_workers: int = 2
    ci_max_failures: int = 10
    reachability: Dict[str, Any] = field(default_factory=dict)

    @property
    def retries(self) -> int:
        """Global retry count for failed tests."""
        return self.ci_retries if self.ci else 0

    @property
    def workers(self) -> Optional[int]:
        """Worker process count, None lets the runner decide."""
        return self.ci_workers if self.ci else None

    @property
    def reports_dir(self) -> Path:
        return BASE_DIR / self.artifacts.get("reports_dir", "reports")

    @property
    def output_dir(self) -> Path:
        return BASE_DIR / self.artifacts.get("output_dir", "test-results")

    @property
    def screenshots_dir(self) -> Path:
        return BASE_DIR / self.artifacts.get("screenshots_dir", "reports/screenshots")

    @property
    def test_timeout_seconds(self) -> float:
        return self.test_timeout / 1000

    def runner_options(self) -> Dict[str, Any]:
        """
        pytest option values implied by these settings, keyed by option dest.

        The per-test timeout always applies. Reruns, workers and fail-fast
        only apply under CI.
        """
        options: Dict[str, Any] = {"timeout": self.test_timeout_seconds}
        if self.ci:
            options["reruns"] = self.retries
            options["numprocesses"] = self.workers
            options["maxfail"] = self.ci_max_failures
        return options

    def url(self, path: str = "") -> str:
        """Absolute URL for a path on the target site."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}" if path else self.base_url

    def project(self, name: str) -> Dict[str, str]:
        """Browser/device definition for a named project."""
        if name not in self.projects:
            raise ConfigError(
                f"Unknown project '{name}'. Available: {', '.join(sorted(self.projects))}"
            )
        return self.projects[name]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "environment": self.environment,
            "base_url": self.base_url,
            "ci": self.ci,
            "headless": self.headless,
            "slow_mo": self.slow_mo,
            "retries": self.retries,
            "workers": self.workers,
            "action_timeout": self.action_timeout,
            "navigation_timeout": self.navigation_timeout,
        }


def load_settings(
    environment: Optional[str] = None, config_dir: Optional[Path] = None
) -> SuiteSettings:
    """
    Build SuiteSettings for the given (or ENV-selected) environment.

    Environment variables BASE_URL, HEADLESS and SLOW_MO take precedence
    over the YAML values.

    Raises:
        ConfigError: If an environment variable is invalid or the
            environment has no config file.
    """
    env_values = read_environment()
    environment = environment or env_values["ENV"]

    raw = ConfigLoader(config_dir=config_dir, environment=environment).load("suite")
    timeouts = raw.get("timeouts", {})
    browser = raw.get("browser", {})
    ci = raw.get("ci", {})

    settings = SuiteSettings(
        environment=environment,
        base_url=env_values["BASE_URL"] or raw["base_url"],
        ci=env_values["CI"],
        debug=env_values["DEBUG"],
        headless=browser.get("headless", True),
        slow_mo=browser.get("slow_mo", 0),
        viewport=browser.get("viewport", {"width": 1920, "height": 1080}),
        launch_args=browser.get("launch_args", {}),
        test_timeout=timeouts.get("test", 60000),
        action_timeout=timeouts.get("action", 15000),
        navigation_timeout=timeouts.get("navigation", 30000),
        element_timeout=timeouts.get("element", 10000),
        projects=raw.get("projects", {}),
        artifacts=raw.get("artifacts", {}),
        ci_retries=ci.get("retries", 2),
        ci_workers=ci.get("workers", 2),
        ci_max_failures=ci.get("max_failures", 10),
        reachability=raw.get("reachability", {}),
    )

    if env_values["HEADLESS"] is not None:
        settings.headless = env_values["HEADLESS"]
    if env_values["SLOW_MO"] is not None:
        settings.slow_mo = env_values["SLOW_MO"]

    logger.debug(f"Loaded settings for ENV={environment}: {settings.to_dict()}")
    return settings
