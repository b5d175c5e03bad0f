"""Tests for the job-configuration helpers.

One module per area: configuration, generic options, job handles, helpers,
common utilities and scripts. Nothing here needs a running cluster.
"""
