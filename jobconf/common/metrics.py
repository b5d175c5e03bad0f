"""Metrics for job launchers.

Provides a thin convenience wrapper around ``prometheus_client`` so launchers
can consistently record which generic options were used and how many records
their jobs' mappers consumed and produced.

Design notes
- Metrics and labels are predeclared to keep label sets small
- A single registry is kept per collector (inject one for testing)
"""

import time
from functools import wraps
from typing import Any, Callable, Iterable, Optional

import structlog
from prometheus_client import CollectorRegistry, Counter, Gauge, Histogram, generate_latest

from .. import helper
from ..mapreduce.job import Job

logger = structlog.get_logger("metrics")


class MetricsCollector:
    """Centralized metrics collection for job launchers.

    Parameters
    - service_name: Logical name of the launcher
    - registry: Optional custom ``CollectorRegistry`` (e.g. for testing)
    """

    def __init__(self, service_name: str, registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry or CollectorRegistry()

        self.generic_options = Counter(
            'jobconf_generic_options_total',
            'Generic command line options applied to job configurations',
            ['option'],
            registry=self.registry
        )

        self.map_input_records = Gauge(
            'jobconf_map_input_records',
            'Map input records reported by a job',
            ['job_name'],
            registry=self.registry
        )

        self.map_output_records = Gauge(
            'jobconf_map_output_records',
            'Map output records reported by a job',
            ['job_name'],
            registry=self.registry
        )

        self.counter_fetch_failures = Counter(
            'jobconf_counter_fetch_failures_total',
            'Failed attempts to fetch job counters',
            ['job_name'],
            registry=self.registry
        )

        self.operation_duration = Histogram(
            'jobconf_operation_duration_seconds',
            'Duration of configuration operations',
            ['operation'],
            registry=self.registry
        )

    def record_generic_options(self, options: Iterable[str]) -> None:
        """Count each generic option seen on a command line."""
        for option in options:
            self.generic_options.labels(option=option.lstrip("-")).inc()

    def record_job_counters(self, job: Job) -> None:
        """Publish a job's map input/output record counts.

        Counter fetch errors are counted and then re-raised.
        """
        job_name = job.get_job_name() or "unnamed"
        try:
            input_records = helper.get_num_map_input_records(job)
            output_records = helper.get_num_map_output_records(job)
        except OSError as e:
            self.counter_fetch_failures.labels(job_name=job_name).inc()
            logger.error("Failed to fetch job counters", job_name=job_name, error=str(e))
            raise

        self.map_input_records.labels(job_name=job_name).set(input_records)
        self.map_output_records.labels(job_name=job_name).set(output_records)

    def record_operation(self, operation: str, duration: float) -> None:
        """Record an operation duration in seconds."""
        self.operation_duration.labels(operation=operation).observe(duration)

    def get_metrics(self) -> str:
        """Get metrics in Prometheus exposition format for scraping."""
        return generate_latest(self.registry).decode('utf-8')


# Global metrics collector instance
_metrics_collector: Optional[MetricsCollector] = None


def get_metrics_collector(service_name: str) -> MetricsCollector:
    """Get or create the process-wide metrics collector."""
    global _metrics_collector
    if _metrics_collector is None:
        _metrics_collector = MetricsCollector(service_name)
    return _metrics_collector


def measure_time(operation: str, collector: Optional[MetricsCollector] = None) -> Callable:
    """Decorator to measure function execution time.

    The duration is logged and, when ``collector`` is given, recorded in its
    ``jobconf_operation_duration_seconds`` histogram.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Operation {operation} failed",
                    operation=operation,
                    duration_ms=(time.time() - start_time) * 1000,
                    error=str(e)
                )
                raise
            duration = time.time() - start_time
            if collector is not None:
                collector.record_operation(operation, duration)
            logger.info(
                f"Operation {operation} completed",
                operation=operation,
                duration_ms=duration * 1000
            )
            return result
        return wrapper
    return decorator
