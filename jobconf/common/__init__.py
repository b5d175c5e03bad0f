"""Common utilities shared across the package.

Includes:
- ``config``: pydantic-based settings read from environment variables.
- ``logging``: structured logging setup with structlog.
- ``metrics``: Prometheus metrics for option parsing and job counters.

Import pattern:
- from jobconf.common.config import get_settings
- from jobconf.common.logging import configure_logging
"""
