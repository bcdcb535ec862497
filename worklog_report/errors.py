"""Error taxonomy for worklog extraction and configuration."""

from __future__ import annotations


class WorklogError(ValueError):
    """Base class for every fatal input error raised by the report pipeline."""

    def __init__(self, message: str, *, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        location = []
        if line is not None:
            location.append(f"line {line}")
        if column is not None:
            location.append(f"column {column}")
        prefix = f"{', '.join(location).capitalize()}: " if location else ""
        super().__init__(f"{prefix}{message}")


class ConfigError(WorklogError):
    """The configuration document is missing fields or holds invalid values."""


class ConfigReferenceError(WorklogError):
    """A log-work cell names a user id that is not present in configuration."""


class MalformedEntryError(WorklogError):
    """A log-work cell does not hold four fields or its duration is not numeric."""


class InvalidDateError(WorklogError):
    """A date field could not be parsed."""


class InputDecodeError(WorklogError):
    """The export could not be decoded as UTF-8 CSV."""
