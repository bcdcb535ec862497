"""End-to-end report pipeline: decode, extract, aggregate, render."""

from __future__ import annotations

from typing import Callable, Sequence

from worklog_report.adapters import csv_adapter
from worklog_report.aggregator import aggregate
from worklog_report.config import ReportConfig
from worklog_report.extractor import extract
from worklog_report.report import render_html, render_json
from worklog_report.schema import Aggregated

RENDERERS: dict[str, Callable[[Aggregated], str]] = {
    "html": render_html,
    "json": render_json,
}


def aggregate_rows(rows: Sequence[Sequence[str]], config: ReportConfig) -> Aggregated:
    return aggregate(extract(rows, config))


def build_report(file_path: str, config: ReportConfig, output_format: str = "html") -> str:
    """Read a worklog CSV export and render its aggregated report."""

    if output_format not in RENDERERS:
        raise ValueError(f"Unsupported output format {output_format!r}, expected one of {sorted(RENDERERS)}")

    rows = csv_adapter.read_rows(file_path)
    return RENDERERS[output_format](aggregate_rows(rows, config))
