"""Utility scripts for working with job configurations.

Scripts include:
- ``parse_generic_options.py``: apply generic options and print the result.
"""
