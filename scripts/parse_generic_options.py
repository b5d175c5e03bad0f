#!/usr/bin/env python3
"""Script to show how generic options change a job configuration.

Everything after ``--`` is handed to the generic options parser exactly as a
launcher would receive it::

    python scripts/parse_generic_options.py --format text -- \\
        -D mapreduce.job.maps=4 -jt local import --table foo

Log lines go to stderr so the JSON output on stdout stays parseable.
``--metrics PATH`` writes the run's Prometheus metrics in text format.
"""

import argparse
import json
import sys
from typing import List, Optional, Sequence, Tuple

import structlog
from prometheus_client import write_to_textfile

from jobconf import helper
from jobconf.common.config import get_settings
from jobconf.common.logging import configure_logging
from jobconf.common.metrics import get_metrics_collector, measure_time
from jobconf.conf.configuration import Configuration, JobConfError
from jobconf.util.generic_options import GenericOptionsParser

logger = structlog.get_logger("parse_generic_options")
metrics = get_metrics_collector("parse_generic_options")


def split_argv(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split ``argv`` at the first ``--`` into script args and job args."""
    argv = list(argv)
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1:]
    return argv, []


@measure_time("parse_generic_options", collector=metrics)
def describe(job_args: Sequence[str], load_defaults: bool = True) -> dict:
    """Parse ``job_args`` into a fresh configuration and summarize the result."""
    conf = Configuration(load_defaults=load_defaults)
    parser = GenericOptionsParser(conf, job_args)
    metrics.record_generic_options(parser.options_seen)

    return {
        "remaining_args": parser.get_remaining_args(),
        "num_maps": helper.get_conf_num_maps(conf),
        "local_job_tracker": helper.is_local_job_tracker(conf),
        "properties": conf.to_dict(),
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function for CLI."""
    own_args, job_args = split_argv(sys.argv[1:] if argv is None else argv)

    parser = argparse.ArgumentParser(
        description="Apply generic options to a job configuration",
        epilog=GenericOptionsParser.usage(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--format", choices=["json", "text"], default="json", help="Output format")
    parser.add_argument("--no-defaults", action="store_true", help="Skip default resources")
    parser.add_argument("--metrics", metavar="PATH", help="Write Prometheus metrics to PATH on exit")
    args = parser.parse_args(own_args)

    settings = get_settings()
    configure_logging(
        "parse_generic_options",
        settings.jobconf_log_level,
        settings.jobconf_log_format,
        stream=sys.stderr,
    )

    try:
        summary = describe(job_args, load_defaults=not args.no_defaults)
    except (OSError, JobConfError) as e:
        logger.error("Generic option parsing failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        if args.metrics:
            write_to_textfile(args.metrics, metrics.registry)

    if args.format == "json":
        print(json.dumps(summary, indent=2))
    else:
        for name, value in summary["properties"].items():
            print(f"{name}={value}")
        print(f"remaining: {' '.join(summary['remaining_args'])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
