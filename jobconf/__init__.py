"""Job-configuration helpers for MapReduce-style processing.

Subpackages:
- ``jobconf.common``: settings, structured logging and metrics.
- ``jobconf.conf``: ``Configuration`` and property-name constants.
- ``jobconf.mapreduce``: job handles, counters, connector property names.
- ``jobconf.util``: the generic command line options parser.

Most callers only need ``jobconf.helper``, which gathers the configuration
accesses a launcher makes into plain functions.
"""

__version__ = "0.1.0"
