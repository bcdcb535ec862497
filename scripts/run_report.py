"""Render a worklog report from a CSV export."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from worklog_report.cli import main


if __name__ == "__main__":
    sys.exit(main())
