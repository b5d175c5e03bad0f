"""Property and counter names used when configuring MapReduce jobs.

Two generations of names exist for many settings. The classic names
(``mapred.*``) are what launchers historically wrote; current frameworks read
the ``mapreduce.*`` names and treat the classic ones as deprecated aliases.
``DEPRECATED_KEYS`` records that mapping so ``Configuration`` can resolve
either spelling to the same value.
"""

from typing import Dict

# Map tasks
PROP_MAPRED_MAP_TASKS = "mapred.map.tasks"
PROP_MAPREDUCE_JOB_MAPS = "mapreduce.job.maps"

# Reduce tasks
PROP_MAPRED_REDUCE_TASKS = "mapred.reduce.tasks"
PROP_MAPREDUCE_JOB_REDUCES = "mapreduce.job.reduces"

# Speculative execution
PROP_MAPRED_MAP_TASKS_SPECULATIVE_EXEC = "mapred.map.tasks.speculative.execution"
PROP_MAPREDUCE_MAP_SPECULATIVE = "mapreduce.map.speculative"
PROP_MAPRED_REDUCE_TASKS_SPECULATIVE_EXEC = "mapred.reduce.tasks.speculative.execution"
PROP_MAPREDUCE_REDUCE_SPECULATIVE = "mapreduce.reduce.speculative"

# Job tracker / framework
PROP_MAPRED_JOB_TRACKER_ADDRESS = "mapred.job.tracker"
PROP_MAPREDUCE_JOB_TRACKER_ADDRESS = "mapreduce.jobtracker.address"
PROP_MAPREDUCE_FRAMEWORK_NAME = "mapreduce.framework.name"
FRAMEWORK_NAME_LOCAL = "local"
FRAMEWORK_NAME_YARN = "yarn"
JOB_TRACKER_LOCAL = "local"

# Job identity
PROP_MAPRED_JOB_NAME = "mapred.job.name"
PROP_MAPREDUCE_JOB_NAME = "mapreduce.job.name"

# File system
PROP_FS_DEFAULT_NAME = "fs.default.name"
PROP_FS_DEFAULTFS = "fs.defaultFS"

# Distributed cache entries registered by the generic options parser
PROP_TMP_FILES = "tmpfiles"
PROP_TMP_JARS = "tmpjars"
PROP_TMP_ARCHIVES = "tmparchives"
PROP_CREDENTIALS_JSON = "mapreduce.job.credentials.json"
PROP_GENERIC_OPTIONS_PARSER_USED = "mapreduce.client.genericoptionsparser.used"

# Counters
COUNTER_GROUP_MAPRED_TASK_COUNTERS = "org.apache.hadoop.mapred.Task$Counter"
COUNTER_MAP_OUTPUT_RECORDS = "MAP_OUTPUT_RECORDS"
COUNTER_MAP_INPUT_RECORDS = "MAP_INPUT_RECORDS"

DEFAULT_NUM_MAP_TASKS = 1

# deprecated name -> current name
DEPRECATED_KEYS: Dict[str, str] = {
    PROP_MAPRED_MAP_TASKS: PROP_MAPREDUCE_JOB_MAPS,
    PROP_MAPRED_REDUCE_TASKS: PROP_MAPREDUCE_JOB_REDUCES,
    PROP_MAPRED_MAP_TASKS_SPECULATIVE_EXEC: PROP_MAPREDUCE_MAP_SPECULATIVE,
    PROP_MAPRED_REDUCE_TASKS_SPECULATIVE_EXEC: PROP_MAPREDUCE_REDUCE_SPECULATIVE,
    PROP_MAPRED_JOB_TRACKER_ADDRESS: PROP_MAPREDUCE_JOB_TRACKER_ADDRESS,
    PROP_MAPRED_JOB_NAME: PROP_MAPREDUCE_JOB_NAME,
    PROP_FS_DEFAULT_NAME: PROP_FS_DEFAULTFS,
}
