"""Parser for the framework-standard command line options.

Launchers accept a common set of options ahead of their own arguments::

    launcher -D mapreduce.job.maps=4 -fs hdfs://nn:8020 import --table foo

``GenericOptionsParser`` consumes the generic ones, applies them to a
``Configuration`` and leaves the rest for the application. Parsing stops at
the first argument that is not a generic option; ``--`` is consumed and also
ends parsing.

Supported options
- ``-conf <file>``: merge an XML configuration resource
- ``-D <property=value>`` (or ``-Dproperty=value``): set a property
- ``-fs <uri>``: default file system
- ``-jt <host:port|local>``: job tracker address
- ``-files``, ``-libjars``, ``-archives <comma separated paths>``
- ``-tokenCacheFile <file>``: credentials JSON file
"""

from pathlib import Path
from typing import Callable, Dict, List, Sequence
from urllib.parse import urlparse

import structlog

from ..conf.configuration import Configuration, JobConfError
from ..conf.constants import (
    FRAMEWORK_NAME_LOCAL,
    JOB_TRACKER_LOCAL,
    PROP_CREDENTIALS_JSON,
    PROP_FS_DEFAULTFS,
    PROP_GENERIC_OPTIONS_PARSER_USED,
    PROP_MAPRED_JOB_TRACKER_ADDRESS,
    PROP_MAPREDUCE_FRAMEWORK_NAME,
    PROP_TMP_ARCHIVES,
    PROP_TMP_FILES,
    PROP_TMP_JARS,
)

logger = structlog.get_logger("util.generic_options")

USAGE = """Generic options supported are:
-conf <configuration file>                 specify an application configuration file
-D <property=value>                        define a value for a given property
-fs <file:///|hdfs://namenode:port>        specify default filesystem URL to use
-jt <local|jobtracker:port>                specify a job tracker
-files <file1,...>                         specify a comma-separated list of files to be copied to the map reduce cluster
-libjars <jar1,...>                        specify a comma-separated list of jar files to be included in the classpath
-archives <archive1,...>                   specify a comma-separated list of archives to be unarchived on the compute machines
-tokenCacheFile <file>                     name of the file with the tokens

The general command line syntax is:
command [genericOptions] [commandOptions]
"""


class GenericOptionsParser:
    """Apply generic options from ``args`` to ``conf``.

    Parsing happens in the constructor; ``get_remaining_args`` returns what is
    left for the application.

    Raises
    - ``FileNotFoundError`` when a referenced file does not exist
    - ``GenericOptionsError`` when an option is missing its value
    """

    def __init__(self, conf: Configuration, args: Sequence[str]):
        self._conf = conf
        self._remaining: List[str] = []
        self.options_seen: List[str] = []
        self._handlers: Dict[str, Callable[[str], None]] = {
            "-conf": self._apply_conf,
            "-D": self._apply_property,
            "-fs": self._apply_fs,
            "-jt": self._apply_jt,
            "-files": self._apply_files,
            "-libjars": self._apply_libjars,
            "-archives": self._apply_archives,
            "-tokenCacheFile": self._apply_token_cache_file,
        }
        self._parse(list(args))

    def get_configuration(self) -> Configuration:
        return self._conf

    def get_remaining_args(self) -> List[str]:
        return list(self._remaining)

    @staticmethod
    def usage() -> str:
        return USAGE

    def _parse(self, args: List[str]) -> None:
        index = 0
        while index < len(args):
            arg = args[index]

            if arg == "--":
                index += 1
                break

            if arg.startswith("-D") and len(arg) > 2:
                self._record("-D")
                self._apply_property(arg[2:])
                index += 1
                continue

            handler = self._handlers.get(arg)
            if handler is None:
                break

            if index + 1 >= len(args):
                raise GenericOptionsError(f"Missing argument for option: {arg[1:]}")

            self._record(arg)
            handler(args[index + 1])
            index += 2

        self._remaining = args[index:]
        self._conf.set_boolean(PROP_GENERIC_OPTIONS_PARSER_USED, True)
        logger.debug(
            "Parsed generic options",
            options=self.options_seen,
            remaining=len(self._remaining),
        )

    def _record(self, option: str) -> None:
        self.options_seen.append(option)

    def _apply_conf(self, value: str) -> None:
        self._conf.add_resource(value)

    def _apply_property(self, value: str) -> None:
        key, sep, prop_value = value.partition("=")
        if not sep:
            logger.warning("Ignoring property without a value", property=value)
            return
        self._conf.set(key, prop_value)

    def _apply_fs(self, value: str) -> None:
        self._conf.set(PROP_FS_DEFAULTFS, value)

    def _apply_jt(self, value: str) -> None:
        self._conf.set(PROP_MAPRED_JOB_TRACKER_ADDRESS, value)
        if value == JOB_TRACKER_LOCAL:
            self._conf.set(PROP_MAPREDUCE_FRAMEWORK_NAME, FRAMEWORK_NAME_LOCAL)

    def _apply_files(self, value: str) -> None:
        self._conf.set(PROP_TMP_FILES, validate_files(value))

    def _apply_libjars(self, value: str) -> None:
        self._conf.set(PROP_TMP_JARS, validate_files(value))

    def _apply_archives(self, value: str) -> None:
        self._conf.set(PROP_TMP_ARCHIVES, validate_files(value))

    def _apply_token_cache_file(self, value: str) -> None:
        path = Path(value)
        if not path.is_file():
            raise FileNotFoundError(f"File {value} does not exist.")
        self._conf.set(PROP_CREDENTIALS_JSON, str(path.resolve()))


def validate_files(files: str) -> str:
    """Qualify a comma-separated list of paths.

    Local paths (no scheme, or ``file:``) must exist and are rewritten as
    absolute ``file://`` URIs. Paths on other file systems are kept as given.
    """
    qualified = []
    for entry in files.split(","):
        entry = entry.strip()
        if not entry:
            raise GenericOptionsError("File name can't be empty string")

        parsed = urlparse(entry)
        # Single-letter schemes are Windows drive letters
        if len(parsed.scheme) > 1 and parsed.scheme != "file":
            qualified.append(entry)
            continue

        local = Path(parsed.path) if parsed.scheme == "file" else Path(entry)
        if not local.exists():
            raise FileNotFoundError(f"File {entry} does not exist.")
        qualified.append(local.resolve().as_uri())
    return ",".join(qualified)


class GenericOptionsError(JobConfError, ValueError):
    """The generic options on the command line are malformed."""
    pass
