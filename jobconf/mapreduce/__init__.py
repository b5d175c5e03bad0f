"""Job handles, counters and connector property names.

- ``job``: ``JobContext`` and ``Job``.
- ``counters``: ``Counters`` addressed by group and counter name.
- ``db``: ``DBConfiguration`` property-name constants.
"""

from .counters import Counter, CounterGroup, Counters
from .db import DBConfiguration
from .job import Job, JobContext

__all__ = ["Counter", "CounterGroup", "Counters", "DBConfiguration", "Job", "JobContext"]
