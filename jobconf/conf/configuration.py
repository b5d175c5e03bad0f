"""In-memory job configuration.

``Configuration`` is the mutable string-keyed mapping a launcher fills in
before submitting work. Values are stored as strings; typed accessors parse
them on read. Classic property names are translated to their current
equivalents (see ``constants.DEPRECATED_KEYS``) so code written against either
generation of names sees the same value.
"""

import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Set, Union

import structlog

from ..common.config import JobConfSettings, get_settings
from .constants import DEPRECATED_KEYS

logger = structlog.get_logger("conf.configuration")

# ${name} references inside values
_VAR_PATTERN = re.compile(r"\$\{([^\}\$\s]+)\}")
_MAX_SUBSTITUTIONS = 20

_warned_deprecations: Set[str] = set()


class Configuration:
    """Mutable key/value configuration with typed accessors.

    Parameters
    - other: Optional ``Configuration`` to copy properties from
    - load_defaults: Load ``jobconf_default_resources`` from settings
    - settings: Settings override (defaults to those of ``other``, else ``get_settings()``)
    """

    def __init__(
        self,
        other: Optional["Configuration"] = None,
        load_defaults: bool = False,
        settings: Optional[JobConfSettings] = None,
    ):
        if settings is None:
            settings = other._settings if other is not None else get_settings()
        self._settings = settings
        self._properties: Dict[str, str] = {}
        self._resources = []

        if other is not None:
            self._properties.update(other._properties)
            self._resources.extend(other._resources)

        if load_defaults:
            for resource in self._settings.jobconf_default_resources:
                self.add_resource(resource)

    def _resolve_name(self, name: str) -> str:
        current = DEPRECATED_KEYS.get(name)
        if current is None:
            return name
        if not self._settings.jobconf_quiet_deprecation and name not in _warned_deprecations:
            _warned_deprecations.add(name)
            logger.warning(
                "Deprecated configuration property",
                deprecated=name,
                replacement=current,
            )
        return current

    def _substitute(self, value: str) -> str:
        for _ in range(_MAX_SUBSTITUTIONS):
            match = _VAR_PATTERN.search(value)
            if match is None:
                return value
            replacement = self.get_raw(match.group(1))
            if replacement is None:
                # Unresolvable references are left in place
                return value
            value = value[:match.start()] + replacement + value[match.end():]
        raise ConfigurationError(
            f"Variable substitution depth too large: {_MAX_SUBSTITUTIONS} {value}"
        )

    def get_raw(self, name: str) -> Optional[str]:
        """Return the stored value without variable expansion."""
        return self._properties.get(self._resolve_name(name))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of ``name`` with ``${var}`` references expanded."""
        value = self.get_raw(name)
        if value is None:
            return default
        return self._substitute(value)

    def get_trimmed(self, name: str, default: Optional[str] = None) -> Optional[str]:
        value = self.get(name)
        if value is None:
            return default
        return value.strip()

    def set(self, name: str, value: Any) -> None:
        if name is None:
            raise ValueError("Property name must not be None")
        if value is None:
            raise ValueError(f"The value of property {name} must not be None")
        self._properties[self._resolve_name(name)] = str(value)

    def unset(self, name: str) -> None:
        self._properties.pop(self._resolve_name(name), None)

    def get_int(self, name: str, default: int) -> int:
        """Return ``name`` as an int, or ``default`` when unset.

        Hexadecimal values (``0x1F``, ``-0x1F``) are accepted. A value that is
        set but not a number, including an empty one, raises ``ValueError``.
        """
        value = self.get_trimmed(name)
        if value is None:
            return default
        lowered = value.lower()
        if lowered.startswith("0x") or lowered.startswith("-0x"):
            return int(lowered, 16)
        return int(value)

    def set_int(self, name: str, value: int) -> None:
        self.set(name, str(int(value)))

    def get_boolean(self, name: str, default: bool) -> bool:
        """Return ``name`` as a bool.

        Only ``true``/``false`` (any case) are recognised; anything else,
        including an unset property, yields ``default``.
        """
        value = self.get_trimmed(name)
        if value is None:
            return default
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        return default

    def set_boolean(self, name: str, value: bool) -> None:
        self.set(name, "true" if value else "false")

    def add_resource(self, path: Union[str, Path]) -> None:
        """Merge properties from a Hadoop-style XML resource file.

        Raises ``FileNotFoundError`` when the file is missing and
        ``ConfigurationError`` when it is not a valid configuration document.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration resource not found: {path}")

        try:
            root = ET.parse(path).getroot()
        except ET.ParseError as e:
            raise ConfigurationError(f"Error parsing {path}: {e}") from e

        if root.tag != "configuration":
            raise ConfigurationError(
                f"Bad configuration file {path}: top-level element is <{root.tag}>"
            )

        loaded = 0
        for prop in root.iter("property"):
            name = prop.findtext("name")
            value = prop.findtext("value")
            if name is None or value is None:
                logger.warning("Skipping incomplete property", resource=str(path))
                continue
            self.set(name.strip(), value)
            loaded += 1

        self._resources.append(str(path))
        logger.debug("Loaded configuration resource", resource=str(path), properties=loaded)

    @property
    def settings(self) -> JobConfSettings:
        return self._settings

    @property
    def resources(self):
        """Resources merged into this configuration, in load order."""
        return list(self._resources)

    def to_dict(self) -> Dict[str, str]:
        """Return a copy of all properties with values expanded."""
        return {name: self._substitute(value) for name, value in sorted(self._properties.items())}

    def __contains__(self, name: str) -> bool:
        return self._resolve_name(name) in self._properties

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._properties))

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"Configuration(properties={len(self._properties)}, resources={self._resources!r})"


class JobConfError(Exception):
    """Base exception for job-configuration errors."""
    pass


class ConfigurationError(JobConfError):
    """A configuration resource or value could not be interpreted."""
    pass
