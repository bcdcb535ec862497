"""Demo script for worklog-report."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from worklog_report.adapters.csv_adapter import read_rows
from worklog_report.aggregator import aggregate
from worklog_report.config import load_config
from worklog_report.extractor import extract
from worklog_report.formatting import format_duration


def main() -> None:
    config = load_config("examples/config.json")
    tasks = extract(read_rows("examples/sample_worklog.csv"), config)
    aggregated = aggregate(tasks)
    for task in aggregated.tasks:
        print(f"{task.label}: {format_duration(task.total_seconds)}")
    print("Total:", {row.user.name: format_duration(row.seconds) for row in aggregated.total})


if __name__ == "__main__":
    main()
