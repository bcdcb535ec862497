from datetime import datetime

import pytest

from worklog_report.aggregator import aggregate, collect_users
from worklog_report.config import parse_config
from worklog_report.errors import ConfigReferenceError, MalformedEntryError
from worklog_report.extractor import extract
from worklog_report.schema import Task, User, WorkLogEntry

ALICE = User("u1", "Alice")
BOB = User("u2", "Bob")
CAROL = User("u3", "Carol")

DAY = datetime(2024, 2, 1)


def log(user, minutes):
    return WorkLogEntry(date=DAY, user=user, minutes=minutes)


def sample_tasks():
    return [
        Task("Short", (log(BOB, 60),)),
        Task("Nothing", ()),
        Task("Long", (log(CAROL, 30), log(ALICE, 60), log(CAROL, 30))),
    ]


def test_tasks_sorted_by_total_and_empty_tasks_dropped():
    result = aggregate(sample_tasks())

    assert [task.label for task in result.tasks] == ["Long", "Short"]
    assert [task.total_seconds for task in result.tasks] == [7200, 3600]


def test_per_user_cells_follow_name_order_and_zero_fill():
    result = aggregate(sample_tasks())
    long_task, short_task = result.tasks

    assert [cell.user.id for cell in long_task.per_user] == ["u1", "u2", "u3"]
    assert [cell.seconds for cell in long_task.per_user] == [3600, 0, 3600]
    assert [cell.seconds for cell in short_task.per_user] == [0, 3600, 0]


def test_totals_cover_every_user_and_conserve_time():
    tasks = sample_tasks()
    result = aggregate(tasks)

    assert [(row.user.name, row.seconds) for row in result.total] == [
        ("Alice", 3600),
        ("Bob", 3600),
        ("Carol", 3600),
    ]
    logged = sum(entry.minutes * 60 for task in tasks for entry in task.work_logs)
    assert sum(row.seconds for row in result.total) == logged
    assert result.users == (ALICE, BOB, CAROL)


def test_no_summary_has_only_zero_cells():
    tasks = [Task("Zero", (log(ALICE, 0),)), Task("Real", (log(BOB, 15),))]
    result = aggregate(tasks)

    assert [task.label for task in result.tasks] == ["Real"]
    assert all(any(cell.seconds > 0 for cell in task.per_user) for task in result.tasks)
    # A user who only logged zero minutes still has a total row.
    assert [(row.user.id, row.seconds) for row in result.total] == [("u1", 0), ("u2", 900)]


def test_equal_totals_keep_extraction_order():
    tasks = [Task("First", (log(ALICE, 10),)), Task("Second", (log(BOB, 10),)), Task("Third", (log(ALICE, 20),))]
    result = aggregate(tasks)
    assert [task.label for task in result.tasks] == ["Third", "First", "Second"]


def test_user_order_is_collated_by_name():
    users = [User("1", "bob"), User("2", "Émile"), User("3", "Alice"), User("4", "Bob")]
    tasks = [Task("Task", tuple(log(user, 5) for user in users))]
    assert [user.name for user in collect_users(tasks)] == ["Alice", "bob", "Bob", "Émile"]


def test_conflicting_user_records_are_rejected():
    tasks = [Task("Task", (log(ALICE, 5), log(User("u1", "Alicia"), 5)))]
    with pytest.raises(ConfigReferenceError):
        aggregate(tasks)


def test_aggregate_is_deterministic():
    tasks = sample_tasks()
    assert aggregate(tasks) == aggregate(tasks)


def test_aggregate_empty_input():
    result = aggregate([])
    assert result.tasks == ()
    assert result.total == ()


def test_date_floor_applies_to_task_and_global_totals():
    config = parse_config(
        {
            "users": [{"id": "u1", "name": "Alice"}],
            "workLogs": {"filter": {"from": "2024-01-01"}},
        }
    )
    rows = [
        ["Summary", "Log Work", "Log Work"],
        ["Boundary", "a;2024-01-01;u1;100", "b;2024-01-02;u1;5"],
    ]
    result = aggregate(extract(rows, config))

    assert result.tasks[0].total_seconds == 300
    assert result.total[0].seconds == 300


def test_work_log_entry_rejects_invalid_values():
    with pytest.raises(ConfigReferenceError):
        WorkLogEntry(date=DAY, user="u1", minutes=5)
    with pytest.raises(ValueError):
        WorkLogEntry(date=DAY, user=ALICE, minutes=-1)
    with pytest.raises(MalformedEntryError):
        WorkLogEntry(date=DAY, user=ALICE, minutes=float("nan"))
    with pytest.raises(MalformedEntryError):
        WorkLogEntry(date=DAY, user=ALICE, minutes="30")
