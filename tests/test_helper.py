"""Tests for the job configuration helpers."""

import pytest

from jobconf import helper
from jobconf.conf.configuration import Configuration
from jobconf.conf.constants import (
    COUNTER_GROUP_MAPRED_TASK_COUNTERS,
    COUNTER_MAP_INPUT_RECORDS,
    COUNTER_MAP_OUTPUT_RECORDS,
)
from jobconf.mapreduce.counters import Counters
from jobconf.mapreduce.job import Job, JobContext


@pytest.mark.parametrize("num_maps", [0, 1, 4, 1000])
def test_job_num_maps_round_trip(num_maps):
    """Test the map task hint reads back as written."""
    job = Job()
    helper.set_job_num_maps(job, num_maps)
    assert helper.get_job_num_maps(job) == num_maps
    assert helper.get_conf_num_maps(job.get_configuration()) == num_maps


def test_num_maps_defaults_to_one():
    """Test an unset map task hint reads as 1."""
    assert helper.get_job_num_maps(JobContext()) == 1
    assert helper.get_job_num_maps(Job()) == 1
    assert helper.get_conf_num_maps(Configuration()) == 1


def test_num_maps_visible_under_current_name():
    """Test the hint is stored where current frameworks read it."""
    job = Job()
    helper.set_job_num_maps(job, 8)
    assert job.get_configuration().get("mapreduce.job.maps") == "8"

    conf = Configuration()
    conf.set("mapreduce.job.maps", "3")
    assert helper.get_conf_num_maps(conf) == 3


@pytest.mark.parametrize("enabled", [True, False])
def test_speculative_execution_flags(enabled):
    """Test mapper and reducer speculative execution flags."""
    job = Job()
    helper.set_job_map_speculative_execution(job, enabled)
    helper.set_job_reduce_speculative_execution(job, not enabled)

    conf = job.get_configuration()
    assert conf.get_boolean("mapred.map.tasks.speculative.execution", not enabled) is enabled
    assert conf.get_boolean("mapred.reduce.tasks.speculative.execution", enabled) is (not enabled)
    assert conf.get_boolean("mapreduce.map.speculative", not enabled) is enabled


def test_set_jobtracker_addr():
    """Test the job tracker address reads back exactly."""
    conf = Configuration()
    helper.set_jobtracker_addr(conf, "tracker.example.com:8021")
    assert conf.get("mapred.job.tracker") == "tracker.example.com:8021"


def test_is_local_job_tracker():
    """Test local job tracker detection."""
    conf = Configuration()
    assert helper.is_local_job_tracker(conf) is False

    helper.set_jobtracker_addr(conf, "local")
    assert helper.is_local_job_tracker(conf) is True

    conf.set("mapreduce.framework.name", "YARN")
    assert helper.is_local_job_tracker(conf) is False

    other = Configuration()
    other.set("mapreduce.jobtracker.address", "local")
    assert helper.is_local_job_tracker(other) is True


def test_map_record_counters():
    """Test map input/output record counts come from the task counter group."""
    job = Job(job_name="import")
    counters = job.get_counters()
    counters.increment(COUNTER_GROUP_MAPRED_TASK_COUNTERS, COUNTER_MAP_INPUT_RECORDS, 120)
    counters.increment(COUNTER_GROUP_MAPRED_TASK_COUNTERS, COUNTER_MAP_OUTPUT_RECORDS, 118)

    assert helper.get_num_map_input_records(job) == 120
    assert helper.get_num_map_output_records(job) == 118


def test_map_record_counters_default_to_zero():
    """Test counters the job never touched read as zero."""
    job = Job()
    assert helper.get_num_map_input_records(job) == 0
    assert helper.get_num_map_output_records(job) == 0


def test_map_record_counters_from_provider():
    """Test counters are read from the job's counters provider."""
    remote = Counters()
    remote.increment(COUNTER_GROUP_MAPRED_TASK_COUNTERS, COUNTER_MAP_OUTPUT_RECORDS, 7)
    job = Job(counters_provider=lambda: remote)
    assert helper.get_num_map_output_records(job) == 7


@pytest.mark.parametrize("error", [OSError("connection refused"), InterruptedError()])
def test_counter_fetch_errors_propagate(error):
    """Test counter fetch failures reach the caller unmodified."""
    def failing_provider():
        raise error

    job = Job(counters_provider=failing_provider)
    with pytest.raises(type(error)) as exc_info:
        helper.get_num_map_output_records(job)
    assert exc_info.value is error

    with pytest.raises(type(error)):
        helper.get_num_map_input_records(job)


def test_db_property_names():
    """Test the connector property names are re-exported exactly."""
    assert helper.get_db_input_class_property() == "mapreduce.jdbc.input.class"
    assert helper.get_db_username_property() == "mapreduce.jdbc.username"
    assert helper.get_db_password_property() == "mapreduce.jdbc.password"
    assert helper.get_db_url_property() == "mapreduce.jdbc.url"
    assert helper.get_db_input_table_name_property() == "mapreduce.jdbc.input.table.name"
    assert helper.get_db_input_conditions_property() == "mapreduce.jdbc.input.conditions"
    assert helper.get_db_driver_class_property() == "mapreduce.jdbc.driver.class"
    assert helper.get_db_input_query_property() == "mapreduce.jdbc.input.query"
    assert helper.get_db_output_table_name_property() == "mapreduce.jdbc.output.table.name"


def test_parse_generic_options_returns_application_args():
    """Test generic options are applied and application args returned."""
    conf = Configuration()
    args = [
        "-D", "mapreduce.job.maps=4",
        "-fs", "file:///",
        "-jt", "local",
        "import", "--table", "employees", "-D", "ignored=1",
    ]

    remaining = helper.parse_generic_options(conf, args)

    assert remaining == ["import", "--table", "employees", "-D", "ignored=1"]
    assert helper.get_conf_num_maps(conf) == 4
    assert conf.get("fs.defaultFS") == "file:///"
    assert helper.is_local_job_tracker(conf) is True
    assert conf.get("ignored") is None


def test_parse_generic_options_missing_file(tmp_path):
    """Test a missing -conf resource surfaces as an OSError."""
    conf = Configuration()
    with pytest.raises(OSError):
        helper.parse_generic_options(conf, ["-conf", str(tmp_path / "missing.xml"), "run"])
