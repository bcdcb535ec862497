"""Core data schema for work-log records and aggregated reports."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from worklog_report.errors import ConfigError, ConfigReferenceError, MalformedEntryError


@dataclass(frozen=True)
class User:
    """Reference data from configuration; identity is ``id``."""

    id: str
    name: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ConfigError("User id must be a non-empty string")


@dataclass(frozen=True)
class WorkLogEntry:
    """One (date, user, duration) tuple parsed from a log-work cell."""

    date: datetime
    user: User
    minutes: float

    def __post_init__(self) -> None:
        if not isinstance(self.user, User):
            raise ConfigReferenceError(f"Work log entry references unresolved user {self.user!r}")
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, (int, float)):
            raise MalformedEntryError(f"Duration must be a number of minutes, got {self.minutes!r}")
        if not math.isfinite(self.minutes) or self.minutes < 0:
            raise MalformedEntryError(f"Duration must be a non-negative number of minutes, got {self.minutes!r}")


@dataclass(frozen=True)
class Task:
    label: str
    work_logs: tuple[WorkLogEntry, ...] = ()


@dataclass(frozen=True)
class UserSeconds:
    user: User
    seconds: float


@dataclass(frozen=True)
class TaskSummary:
    label: str
    per_user: tuple[UserSeconds, ...]
    total_seconds: float


@dataclass(frozen=True)
class UserTotal:
    user: User
    seconds: float


@dataclass(frozen=True)
class Aggregated:
    """Per-task per-user breakdown plus the per-user total row."""

    tasks: tuple[TaskSummary, ...]
    total: tuple[UserTotal, ...]

    @property
    def users(self) -> tuple[User, ...]:
        return tuple(row.user for row in self.total)
