"""Job handles.

``JobContext`` is the read-mostly view of a job that tasks and input formats
receive; ``Job`` is the launcher-side handle that can also report counters.
Counter retrieval may involve talking to a remote job client, so ``Job``
accepts a provider callable. Whatever the provider raises (``OSError``,
``InterruptedError``) reaches the caller untouched.
"""

from typing import Callable, Optional

from ..conf.configuration import Configuration
from ..conf.constants import PROP_MAPREDUCE_JOB_NAME
from .counters import Counters

CountersProvider = Callable[[], Counters]


class JobContext:
    """A job's configuration and identity."""

    def __init__(self, conf: Optional[Configuration] = None, job_id: Optional[str] = None):
        # The job takes its own copy so later edits to ``conf`` don't leak in.
        self._conf = Configuration(conf) if conf is not None else Configuration()
        self._job_id = job_id

    def get_configuration(self) -> Configuration:
        return self._conf

    def get_job_id(self) -> Optional[str]:
        return self._job_id

    def get_job_name(self) -> str:
        return self._conf.get(PROP_MAPREDUCE_JOB_NAME, "")


class Job(JobContext):
    """Launcher-side job handle.

    Parameters
    - conf: Configuration to copy into the job
    - job_name: Optional name stored under ``mapreduce.job.name``
    - counters_provider: Callable fetching the job's counters; when omitted
      the job reports its own in-memory ``Counters``
    """

    def __init__(
        self,
        conf: Optional[Configuration] = None,
        job_name: Optional[str] = None,
        job_id: Optional[str] = None,
        counters_provider: Optional[CountersProvider] = None,
    ):
        super().__init__(conf, job_id)
        if job_name is not None:
            self._conf.set(PROP_MAPREDUCE_JOB_NAME, job_name)
        self._counters = Counters()
        self._counters_provider = counters_provider

    @classmethod
    def get_instance(cls, conf: Optional[Configuration] = None, job_name: Optional[str] = None) -> "Job":
        return cls(conf, job_name=job_name)

    def get_counters(self) -> Counters:
        """Return the job's counters.

        Raises whatever the counters provider raises.
        """
        if self._counters_provider is not None:
            return self._counters_provider()
        return self._counters
