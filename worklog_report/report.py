"""Rendering of an aggregated report as HTML or JSON."""

from __future__ import annotations

import json

from jinja2 import Environment

from worklog_report.formatting import format_duration
from worklog_report.schema import Aggregated

_HTML_TEMPLATE = """\
<html>
  <body>
    <table>
      <tbody>
        <tr>
          <th style="width: 300px"><b>Task</b></th>
          {%- for row in aggregated.total %}
          <th><b>{{ row.user.name }}</b></th>
          {%- endfor %}
        </tr>
        {%- for task in aggregated.tasks %}
        <tr>
          <td>{{ task.label }}</td>
          {%- for cell in task.per_user %}
          <td>{{ cell.seconds | duration_or_blank }}</td>
          {%- endfor %}
        </tr>
        {%- endfor %}
        <tr>
          <td><b>Total</b></td>
          {%- for row in aggregated.total %}
          <td><b>{{ row.seconds | duration }}</b></td>
          {%- endfor %}
        </tr>
      </tbody>
    </table>
    <style>
      table, th, td {
        font-family: -apple-system;
        border: 1px solid;
        border-spacing: 0;
        padding: 0 0.25rem;
        vertical-align: top;
      }

      table {
        padding: 0;
      }
    </style>
  </body>
</html>
"""


def _duration_or_blank(seconds: float) -> str:
    return format_duration(seconds) if seconds > 0 else ""


def _environment() -> Environment:
    env = Environment(autoescape=True, keep_trailing_newline=True)
    env.filters["duration"] = format_duration
    env.filters["duration_or_blank"] = _duration_or_blank
    return env


_TEMPLATE = _environment().from_string(_HTML_TEMPLATE)


def render_html(aggregated: Aggregated) -> str:
    """Render the report table; cells where a user logged nothing stay blank."""

    return _TEMPLATE.render(aggregated=aggregated)


def to_dict(aggregated: Aggregated) -> dict:
    return {
        "users": [{"id": user.id, "name": user.name} for user in aggregated.users],
        "tasks": [
            {
                "task": task.label,
                "users": [
                    {"id": cell.user.id, "seconds": cell.seconds, "formatted": format_duration(cell.seconds)}
                    for cell in task.per_user
                ],
                "total": {"seconds": task.total_seconds, "formatted": format_duration(task.total_seconds)},
            }
            for task in aggregated.tasks
        ],
        "total": [
            {"id": row.user.id, "seconds": row.seconds, "formatted": format_duration(row.seconds)}
            for row in aggregated.total
        ],
    }


def render_json(aggregated: Aggregated) -> str:
    return json.dumps(to_dict(aggregated), indent=2)
