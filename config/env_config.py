"""
Environment variables read by the suite

Every variable the suite honours is declared once in ENV_VARS together with
its type, default and allowed values. read_environment() resolves all of
them in one pass and reports every bad value in a single ConfigError, so a
misconfigured run stops before a browser is launched.

Usage:
    from config.env_config import ENV_VARS, read_environment

    values = read_environment()
    email = ENV_VARS["TEST_USER_EMAIL"].read()
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Repository root
BASE_DIR = Path(__file__).resolve().parent.parent

ENVIRONMENTS = ["dev", "qa", "staging", "prod"]

TRUTHY = ("true", "1", "yes", "on")


class ConfigError(Exception):
    """Raised when configuration validation fails."""


@dataclass(frozen=True)
class EnvVar:
    """One environment variable: how to convert it and which values it accepts."""

    name: str
    default: Any = None
    kind: type = str
    description: str = ""
    bounds: Optional[Tuple[int, int]] = None
    choices: Optional[Sequence[str]] = None
    pattern: Optional[str] = None
    secret: bool = False

    def convert(self, raw: str) -> Any:
        if self.kind is bool:
            return raw.strip().lower() in TRUTHY
        if self.kind is int:
            try:
                return int(raw)
            except ValueError:
                raise ConfigError(f"{self.name}: '{raw}' is not an integer") from None
        return raw

    def check(self, value: Any) -> Optional[str]:
        """Describe what is wrong with a converted value, None if nothing is."""
        if self.bounds is not None:
            low, high = self.bounds
            if not low <= value <= high:
                return f"{self.name}: {value} is outside the range {low}..{high}"
        if self.choices is not None and value not in self.choices:
            return f"{self.name}: '{value}' must be one of {', '.join(self.choices)}"
        if self.pattern is not None and not re.match(self.pattern, value):
            return f"{self.name}: '{value}' does not match {self.pattern}"
        return None

    def read(self, environ: Optional[Mapping[str, str]] = None) -> Any:
        """Current value, falling back to the default when unset or empty."""
        raw = (os.environ if environ is None else environ).get(self.name, "")
        if not raw:
            return self.default

        value = self.convert(raw)
        problem = self.check(value)
        if problem:
            raise ConfigError(problem)
        return value

    def redact(self, value: Any) -> Any:
        """Value as it may appear in logs."""
        if self.secret:
            return "***" if value else "not set"
        return value


def _declare(*variables: EnvVar) -> Dict[str, EnvVar]:
    return {variable.name: variable for variable in variables}


ENV_VARS: Dict[str, EnvVar] = _declare(
    EnvVar("ENV", "dev", choices=ENVIRONMENTS, description="Selects environments/<ENV>.yaml"),
    EnvVar("CI", False, bool, "Enables retries, a fixed worker count and fail-fast"),
    EnvVar("DEBUG", False, bool, "Enables debug logging"),
    # Credentials of the pre-registered login account
    EnvVar(
        "TEST_USER_EMAIL",
        "testuser@example.com",
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        description="Email of the pre-existing login account",
    ),
    EnvVar(
        "TEST_USER_PASSWORD",
        "TestPassword123",
        secret=True,
        description="Password of the pre-existing login account",
    ),
    # Unset means the YAML value applies
    EnvVar("BASE_URL", pattern=r"^https?://", description="Overrides the site base URL"),
    EnvVar("HEADLESS", None, bool, "Overrides browser.headless"),
    EnvVar("SLOW_MO", None, int, "Overrides browser.slow_mo (ms)", bounds=(0, 10000)),
)


def read_environment(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Resolve every declared variable.

    Raises:
        ConfigError: Listing each variable that holds an invalid value
    """
    values: Dict[str, Any] = {}
    problems = []

    for name, variable in ENV_VARS.items():
        try:
            values[name] = variable.read(environ)
        except ConfigError as e:
            problems.append(str(e))
            continue
        logger.debug(f"{name} = {variable.redact(values[name])}")

    if problems:
        message = "Invalid environment:\n" + "\n".join(f"  - {p}" for p in problems)
        logger.error(message)
        raise ConfigError(message)

    return values
