"""Streamlit demo UI for worklog-report."""

from __future__ import annotations

import json
import logging
from typing import Any

from worklog_report.adapters import csv_adapter
from worklog_report.config import ReportConfig, load_config, parse_config
from worklog_report.formatting import format_duration
from worklog_report.pipeline import aggregate_rows
from worklog_report.report import render_html
from worklog_report.schema import Aggregated

logger = logging.getLogger(__name__)

DEMO_CSV = "examples/sample_worklog.csv"
DEMO_CONFIG = "examples/config.json"


def _parse_uploaded_rows(uploaded_file) -> list[list[str]]:
    return csv_adapter.parse_rows(uploaded_file.getvalue().decode("utf-8"))


def _parse_uploaded_config(uploaded_file) -> ReportConfig:
    try:
        payload = json.loads(uploaded_file.getvalue().decode("utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Config is not valid JSON: {exc.msg}") from exc
    return parse_config(payload)


def build_table(aggregated: Aggregated) -> list[dict[str, Any]]:
    """Flatten the report into one dict per row, blank where nothing was logged."""

    table = []
    for task in aggregated.tasks:
        row: dict[str, Any] = {"Task": task.label}
        for cell in task.per_user:
            row[cell.user.name] = format_duration(cell.seconds) if cell.seconds > 0 else ""
        table.append(row)

    total_row: dict[str, Any] = {"Task": "Total"}
    for entry in aggregated.total:
        total_row[entry.user.name] = format_duration(entry.seconds)
    table.append(total_row)
    return table


def main() -> None:
    import streamlit as st

    st.set_page_config(page_title="Worklog Report", layout="wide")
    st.title("Worklog Report — Streamlit Demo")

    with st.sidebar:
        st.header("Inputs")
        uploaded_csv = st.file_uploader("Upload worklog export", type=["csv"])
        uploaded_config = st.file_uploader("Upload config", type=["json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        run = st.button("Build report", type="primary")

    if not run:
        st.info("Choose inputs in the sidebar and click **Build report**.")
        return

    try:
        if use_demo:
            rows = csv_adapter.read_rows(DEMO_CSV)
            config = load_config(DEMO_CONFIG)
            data_source = f"demo dataset ({DEMO_CSV})"
        elif uploaded_csv is not None and uploaded_config is not None:
            rows = _parse_uploaded_rows(uploaded_csv)
            config = _parse_uploaded_config(uploaded_config)
            data_source = f"uploaded file ({uploaded_csv.name})"
        else:
            st.error("Please upload both a CSV export and a JSON config, or enable 'Load demo dataset'.")
            return

        aggregated = aggregate_rows(rows, config)

        st.success(f"Loaded {max(len(rows) - 1, 0)} tasks from {data_source}.")

        if not aggregated.tasks:
            st.warning("No time was logged after the configured date floor.")
            return

        st.subheader("Time spent per task")
        st.table(build_table(aggregated))

        st.download_button(
            "Download HTML report",
            data=render_html(aggregated),
            file_name="worklog_report.html",
            mime="text/html",
        )

    except ValueError as exc:
        st.error(f"Input error: {exc}")
    except Exception:
        logger.exception("Failed to build report")
        st.error("Something went wrong while building the report. Please verify the input format.")


if __name__ == "__main__":
    main()
