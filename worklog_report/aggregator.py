"""Aggregation of extracted tasks into the per-task, per-user report."""

from __future__ import annotations

import logging
import unicodedata
from typing import Sequence

import numpy as np

from worklog_report.errors import ConfigReferenceError
from worklog_report.schema import Aggregated, Task, TaskSummary, User, UserSeconds, UserTotal

logger = logging.getLogger(__name__)

SECONDS_PER_MINUTE = 60


def _collation_key(user: User) -> tuple:
    decomposed = unicodedata.normalize("NFKD", user.name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # Lowercase sorts before uppercase when names differ only by case.
    return (base.casefold(), decomposed.casefold(), user.name.swapcase(), user.id)


def collect_users(tasks: Sequence[Task]) -> list[User]:
    """Return the distinct users with logged work, ordered by display name."""

    by_id: dict[str, User] = {}
    for task in tasks:
        for entry in task.work_logs:
            known = by_id.setdefault(entry.user.id, entry.user)
            if known != entry.user:
                raise ConfigReferenceError(
                    f"user id {entry.user.id!r} resolves to different records ({known.name!r}, {entry.user.name!r})"
                )
    return sorted(by_id.values(), key=_collation_key)


def _minutes_matrix(tasks: Sequence[Task], users: Sequence[User]) -> np.ndarray:
    position = {user.id: column for column, user in enumerate(users)}
    matrix = np.zeros((len(tasks), len(users)), dtype=float)
    for row, task in enumerate(tasks):
        for entry in task.work_logs:
            matrix[row, position[entry.user.id]] += entry.minutes
    return matrix


def aggregate(tasks: Sequence[Task]) -> Aggregated:
    """Sum logged time per task and user, drop empty tasks and sort by total."""

    users = collect_users(tasks)
    seconds = _minutes_matrix(tasks, users) * SECONDS_PER_MINUTE

    summaries: list[TaskSummary] = []
    for row, task in enumerate(tasks):
        per_user = tuple(
            UserSeconds(user=user, seconds=float(seconds[row, column])) for column, user in enumerate(users)
        )
        if not any(cell.seconds > 0 for cell in per_user):
            continue
        total_seconds = float(sum(entry.minutes for entry in task.work_logs) * SECONDS_PER_MINUTE)
        summaries.append(TaskSummary(label=task.label, per_user=per_user, total_seconds=total_seconds))

    # sorted() is stable, so equal totals keep extraction order.
    summaries = sorted(summaries, key=lambda summary: summary.total_seconds, reverse=True)

    column_totals = seconds.sum(axis=0)
    total = tuple(UserTotal(user=user, seconds=float(column_totals[column])) for column, user in enumerate(users))

    logger.debug(
        "Aggregated %d of %d tasks across %d users",
        len(summaries),
        len(tasks),
        len(users),
    )
    return Aggregated(tasks=tuple(summaries), total=total)
