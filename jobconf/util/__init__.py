"""Command line utilities: the generic options parser."""
