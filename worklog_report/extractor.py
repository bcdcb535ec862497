"""Extraction of tasks and their log-work entries from export rows."""

from __future__ import annotations

import logging
import math
import re
from typing import Sequence

from worklog_report.config import ReportConfig
from worklog_report.dates import is_after, parse_date
from worklog_report.errors import ConfigReferenceError, InvalidDateError, MalformedEntryError
from worklog_report.schema import Task, WorkLogEntry

logger = logging.getLogger(__name__)

SUMMARY_INDEX = 0
LOG_WORK_HEADER = "Log Work"
FIELD_DELIMITER = ";"
_DURATION_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def log_work_indexes(header: Sequence[str]) -> list[int]:
    return [index for index, column in enumerate(header) if column == LOG_WORK_HEADER]


def _parse_minutes(raw: str, line: int, column: int) -> float:
    text = raw.strip()
    if not _DURATION_RE.fullmatch(text):
        raise MalformedEntryError(f"duration {raw!r} is not a number", line=line, column=column)
    minutes = float(text)
    if not math.isfinite(minutes) or minutes < 0:
        raise MalformedEntryError(f"duration {raw!r} must be a non-negative number", line=line, column=column)
    return minutes


def parse_log_work(cell: str, config: ReportConfig, *, line: int, column: int) -> WorkLogEntry:
    """Parse one ``tag;date;user;minutes`` cell into a work-log entry."""

    fields = cell.split(FIELD_DELIMITER)
    if len(fields) != 4:
        raise MalformedEntryError(
            f"log work {cell!r} has {len(fields)} fields, expected 4", line=line, column=column
        )

    _, date_string, user_id, minutes_raw = fields
    minutes = _parse_minutes(minutes_raw, line, column)

    try:
        date = parse_date(date_string)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"date {date_string!r} could not be parsed", line=line, column=column) from exc

    user = config.find_user(user_id.strip())
    if user is None:
        raise ConfigReferenceError(f"cannot find user with id {user_id!r} in config", line=line, column=column)

    return WorkLogEntry(date=date, user=user, minutes=minutes)


def extract(rows: Sequence[Sequence[str]], config: ReportConfig) -> list[Task]:
    """Build one Task per data row, keeping only entries after the date floor."""

    if not rows:
        return []

    header, *body = rows
    indexes = log_work_indexes(header)

    tasks: list[Task] = []
    kept = 0
    dropped = 0
    # Line numbers are 1-based with the header on line 1.
    for line, row in enumerate(body, start=2):
        label = row[SUMMARY_INDEX] if len(row) > SUMMARY_INDEX else ""
        work_logs: list[WorkLogEntry] = []

        for index in indexes:
            cell = row[index] if index < len(row) else ""
            if not cell:
                continue

            entry = parse_log_work(cell, config, line=line, column=index + 1)
            if config.date_floor is not None and not is_after(entry.date, config.date_floor):
                dropped += 1
                continue
            work_logs.append(entry)

        kept += len(work_logs)
        tasks.append(Task(label=label, work_logs=tuple(work_logs)))

    logger.debug(
        "Extracted %d tasks with %d work logs from %d log work columns (%d before date floor dropped)",
        len(tasks),
        kept,
        len(indexes),
        dropped,
    )
    return tasks
