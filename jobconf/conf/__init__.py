"""Job configuration and the property names it understands.

- ``configuration``: ``Configuration`` plus the package's base exceptions.
- ``constants``: classic and current property names, counter names.
"""

from .configuration import Configuration, ConfigurationError, JobConfError

__all__ = ["Configuration", "ConfigurationError", "JobConfError"]
