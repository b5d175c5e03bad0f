"""Helpers for reading and writing job configuration.

Every function here forwards to the configuration, counters or option parser
API. Keeping these accesses in one place means a change in property names or
APIs between framework versions only has to be absorbed here.
"""

from typing import List, Sequence

from .conf import constants
from .conf.configuration import Configuration
from .mapreduce.db import DBConfiguration
from .mapreduce.job import Job, JobContext
from .util.generic_options import GenericOptionsParser


def set_job_num_maps(job: Job, num_map_tasks: int) -> None:
    """Set the (hinted) number of map tasks for a job."""
    job.get_configuration().set_int(constants.PROP_MAPRED_MAP_TASKS, num_map_tasks)


def get_job_num_maps(job: JobContext) -> int:
    """Get the (hinted) number of map tasks for a job."""
    return job.get_configuration().get_int(
        constants.PROP_MAPRED_MAP_TASKS, constants.DEFAULT_NUM_MAP_TASKS
    )


def get_num_map_output_records(job: Job) -> int:
    """Return the number of mapper output records from a job's counters.

    Errors raised while fetching counters (``OSError``, ``InterruptedError``)
    propagate to the caller.
    """
    return job.get_counters().find_counter(
        constants.COUNTER_GROUP_MAPRED_TASK_COUNTERS,
        constants.COUNTER_MAP_OUTPUT_RECORDS,
    ).get_value()


def get_num_map_input_records(job: Job) -> int:
    """Return the number of mapper input records from a job's counters."""
    return job.get_counters().find_counter(
        constants.COUNTER_GROUP_MAPRED_TASK_COUNTERS,
        constants.COUNTER_MAP_INPUT_RECORDS,
    ).get_value()


def get_conf_num_maps(conf: Configuration) -> int:
    """Get the (hinted) number of map tasks from a configuration."""
    return conf.get_int(constants.PROP_MAPRED_MAP_TASKS, constants.DEFAULT_NUM_MAP_TASKS)


def set_job_map_speculative_execution(job: Job, is_enabled: bool) -> None:
    """Set the mapper speculative execution property for a job."""
    job.get_configuration().set_boolean(
        constants.PROP_MAPRED_MAP_TASKS_SPECULATIVE_EXEC, is_enabled
    )


def set_job_reduce_speculative_execution(job: Job, is_enabled: bool) -> None:
    """Set the reducer speculative execution property for a job."""
    job.get_configuration().set_boolean(
        constants.PROP_MAPRED_REDUCE_TASKS_SPECULATIVE_EXEC, is_enabled
    )


def set_jobtracker_addr(conf: Configuration, addr: str) -> None:
    """Set the job tracker address to use for a job."""
    conf.set(constants.PROP_MAPRED_JOB_TRACKER_ADDRESS, addr)


def is_local_job_tracker(conf: Configuration) -> bool:
    """Return ``True`` when jobs configured by ``conf`` run in-process.

    A framework name of ``yarn`` always means remote execution. Otherwise the
    job tracker address decides, under either its classic or current name.
    """
    framework = conf.get(constants.PROP_MAPREDUCE_FRAMEWORK_NAME)
    if framework is not None and framework.lower() == constants.FRAMEWORK_NAME_YARN:
        return False

    # mapred.job.tracker resolves to mapreduce.jobtracker.address
    address = conf.get(constants.PROP_MAPREDUCE_JOB_TRACKER_ADDRESS)
    return address == constants.JOB_TRACKER_LOCAL


def get_db_input_class_property() -> str:
    """Return the property identifying the record class to read rows into."""
    return DBConfiguration.INPUT_CLASS_PROPERTY


def get_db_username_property() -> str:
    """Return the property identifying the DB username."""
    return DBConfiguration.USERNAME_PROPERTY


def get_db_password_property() -> str:
    """Return the property identifying the DB password."""
    return DBConfiguration.PASSWORD_PROPERTY


def get_db_url_property() -> str:
    """Return the property identifying the DB connect string."""
    return DBConfiguration.URL_PROPERTY


def get_db_input_table_name_property() -> str:
    """Return the property identifying the DB input table."""
    return DBConfiguration.INPUT_TABLE_NAME_PROPERTY


def get_db_input_conditions_property() -> str:
    """Return the property specifying WHERE conditions for the input table."""
    return DBConfiguration.INPUT_CONDITIONS_PROPERTY


def get_db_driver_class_property() -> str:
    return DBConfiguration.DRIVER_CLASS_PROPERTY


def get_db_input_query_property() -> str:
    return DBConfiguration.INPUT_QUERY


def get_db_output_table_name_property() -> str:
    return DBConfiguration.OUTPUT_TABLE_NAME_PROPERTY


def parse_generic_options(conf: Configuration, args: Sequence[str]) -> List[str]:
    """Apply generic options in ``args`` to ``conf``.

    Parameters
    - conf: Configuration to populate with generic options
    - args: Command line arguments

    Returns
    - The arguments left for the application itself

    Callers must be prepared for ``OSError``: loading ``-conf`` resources and
    validating ``-files``/``-libjars``/``-archives`` touches the file system.
    """
    parser = GenericOptionsParser(conf, args)
    return parser.get_remaining_args()
