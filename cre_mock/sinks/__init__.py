"""Output sinks for exporting generated data."""

from cre_mock.sinks.json_file import JsonFileSink

__all__ = ["JsonFileSink"]
