"""Settings for the job-configuration helpers.

This module centralizes environment-driven settings for the ``jobconf``
package: logging, the default XML resources a fresh ``Configuration`` loads,
and whether deprecated-key warnings are emitted. It builds on
``pydantic_settings.BaseSettings`` so settings can be provided via environment
variables, ``.env`` files, or defaults.

Usage
- ``settings = get_settings()``
- Override in tests with ``JobConfSettings(jobconf_log_level="DEBUG")``
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class JobConfSettings(BaseSettings):
    """Settings shared by every ``jobconf`` component.

    Each field is read from the upper-cased environment variable of the same
    name (``JOBCONF_LOG_LEVEL`` and so on).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    jobconf_log_level: str = Field(default="INFO")
    jobconf_log_format: str = Field(default="json")

    # Resources loaded by ``Configuration(load_defaults=True)``, in order.
    jobconf_default_resources: List[str] = Field(default_factory=list)

    # Suppress the one-time warning for deprecated property names
    jobconf_quiet_deprecation: bool = Field(default=False)

    # Service name bound to every log line
    jobconf_service_name: str = Field(default="jobconf")


_settings: Optional[JobConfSettings] = None


def get_settings() -> JobConfSettings:
    """Return the process-wide settings, reading the environment once."""
    global _settings
    if _settings is None:
        _settings = JobConfSettings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next ``get_settings`` re-reads the env."""
    global _settings
    _settings = None
