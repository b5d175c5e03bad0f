"""Tests for the generic options parser."""

import pytest

from jobconf.conf.configuration import Configuration
from jobconf.util.generic_options import GenericOptionsError, GenericOptionsParser, validate_files


def parse(args, conf=None):
    conf = conf or Configuration()
    return conf, GenericOptionsParser(conf, args)


def test_define_properties():
    """Test -D in separate and attached forms."""
    conf, parser = parse(["-D", "a.b=1", "-Dc.d=two", "-D", "empty=", "app"])

    assert conf.get("a.b") == "1"
    assert conf.get("c.d") == "two"
    assert conf.get("empty") == ""
    assert parser.get_remaining_args() == ["app"]
    assert parser.options_seen == ["-D", "-D", "-D"]


def test_define_without_value_is_ignored():
    """Test -D without '=' sets nothing."""
    conf, parser = parse(["-D", "lonely", "app"])
    assert "lonely" not in conf
    assert parser.get_remaining_args() == ["app"]


def test_values_may_contain_equals():
    """Test only the first '=' separates key and value."""
    conf, _ = parse(["-D", "query=a=b"])
    assert conf.get("query") == "a=b"


def test_fs_and_jt():
    """Test file system and job tracker options."""
    conf, _ = parse(["-fs", "hdfs://nn:8020", "-jt", "tracker:8021"])
    assert conf.get("fs.defaultFS") == "hdfs://nn:8020"
    assert conf.get("fs.default.name") == "hdfs://nn:8020"
    assert conf.get("mapred.job.tracker") == "tracker:8021"
    assert conf.get("mapreduce.framework.name") is None


def test_local_jt_sets_framework():
    """Test -jt local selects the local framework."""
    conf, _ = parse(["-jt", "local"])
    assert conf.get("mapreduce.framework.name") == "local"


def test_conf_resource(tmp_path):
    """Test -conf merges an XML resource."""
    path = tmp_path / "job.xml"
    path.write_text(
        "<configuration><property><name>job.owner</name><value>etl</value></property></configuration>"
    )
    conf, _ = parse(["-conf", str(path), "-D", "job.owner=override"])
    assert conf.get("job.owner") == "override"


def test_files_are_qualified(tmp_path):
    """Test -files/-libjars/-archives store absolute URIs."""
    data = tmp_path / "lookup.csv"
    data.write_text("x")
    jar = tmp_path / "udf.jar"
    jar.write_text("x")

    conf, _ = parse([
        "-files", f"{data},hdfs://nn/shared/dict.txt",
        "-libjars", str(jar),
        "-archives", data.as_uri(),
    ])

    assert conf.get("tmpfiles") == f"{data.resolve().as_uri()},hdfs://nn/shared/dict.txt"
    assert conf.get("tmpjars") == jar.resolve().as_uri()
    assert conf.get("tmparchives") == data.resolve().as_uri()


def test_missing_files_raise(tmp_path):
    """Test missing local files raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        parse(["-files", str(tmp_path / "nope.txt")])

    with pytest.raises(FileNotFoundError):
        parse(["-tokenCacheFile", str(tmp_path / "tokens.json")])


def test_token_cache_file(tmp_path):
    """Test -tokenCacheFile records the credentials file."""
    tokens = tmp_path / "tokens.json"
    tokens.write_text("{}")
    conf, _ = parse(["-tokenCacheFile", str(tokens)])
    assert conf.get("mapreduce.job.credentials.json") == str(tokens.resolve())


def test_empty_file_name(tmp_path):
    """Test empty entries in a file list are rejected."""
    existing = tmp_path / "lookup.csv"
    existing.write_text("x")

    with pytest.raises(GenericOptionsError):
        validate_files(",x")

    with pytest.raises(GenericOptionsError):
        validate_files(f"{existing},,")

    with pytest.raises(GenericOptionsError):
        parse(["-files", f"{existing},"])


def test_parsing_stops_at_first_application_arg():
    """Test generic options after application args are left alone."""
    conf, parser = parse(["-D", "x=1", "run", "-fs", "hdfs://nn", "-D", "y=2"])
    assert parser.get_remaining_args() == ["run", "-fs", "hdfs://nn", "-D", "y=2"]
    assert conf.get("y") is None
    assert conf.get("fs.defaultFS") is None


def test_unknown_option_stops_parsing():
    """Test an unknown option is handed to the application."""
    _, parser = parse(["--verbose", "-D", "x=1"])
    assert parser.get_remaining_args() == ["--verbose", "-D", "x=1"]


def test_double_dash_is_consumed():
    """Test '--' ends generic option parsing and is dropped."""
    conf, parser = parse(["-D", "x=1", "--", "-D", "y=2"])
    assert parser.get_remaining_args() == ["-D", "y=2"]
    assert conf.get("x") == "1"


def test_missing_option_value():
    """Test an option without its value raises GenericOptionsError."""
    with pytest.raises(GenericOptionsError) as exc_info:
        parse(["-D"])
    assert isinstance(exc_info.value, ValueError)


def test_marks_configuration():
    """Test parsed configurations are flagged."""
    conf, parser = parse([])
    assert parser.get_remaining_args() == []
    assert parser.get_configuration() is conf
    assert conf.get_boolean("mapreduce.client.genericoptionsparser.used", False) is True


def test_usage_lists_options():
    """Test the usage text mentions every option."""
    usage = GenericOptionsParser.usage()
    for option in ["-conf", "-D", "-fs", "-jt", "-files", "-libjars", "-archives", "-tokenCacheFile"]:
        assert option in usage
