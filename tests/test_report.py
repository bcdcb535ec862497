import json
from datetime import datetime

from worklog_report.aggregator import aggregate
from worklog_report.report import render_html, render_json
from worklog_report.schema import Task, User, WorkLogEntry

ALICE = User("u1", "Alice")
BOB = User("u2", "Bob <QA>")


def sample_report():
    day = datetime(2024, 2, 1)
    return aggregate(
        [
            Task("Fix <login>", (WorkLogEntry(day, ALICE, 540),)),
            Task("Docs", (WorkLogEntry(day, BOB, 0),)),
        ]
    )


def test_render_html_table_layout():
    html = render_html(sample_report())

    assert '<th style="width: 300px"><b>Task</b></th>' in html
    assert "<th><b>Alice</b></th>" in html
    assert "<td>1d 1h 0m</td>" in html
    assert "<td><b>Total</b></td>" in html
    assert "<td><b>0h 0m</b></td>" in html
    assert "Docs" not in html


def test_render_html_blank_cell_for_zero_and_escaping():
    html = render_html(sample_report())

    assert "<td></td>" in html
    assert "Fix &lt;login&gt;" in html
    assert "Bob &lt;QA&gt;" in html
    assert "<login>" not in html


def test_render_json_payload():
    payload = json.loads(render_json(sample_report()))

    assert [user["id"] for user in payload["users"]] == ["u1", "u2"]
    assert payload["tasks"][0]["task"] == "Fix <login>"
    assert payload["tasks"][0]["total"] == {"seconds": 32400.0, "formatted": "1d 1h 0m"}
    assert payload["total"][1] == {"id": "u2", "seconds": 0.0, "formatted": "0h 0m"}
