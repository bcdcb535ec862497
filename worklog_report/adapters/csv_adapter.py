"""CSV adapter turning a worklog export into rows of string cells."""

from __future__ import annotations

import csv
import io

from worklog_report.errors import InputDecodeError


def parse_rows(text: str, source: str = "<text>") -> list[list[str]]:
    """Decode CSV text into rows; row 0 is the header."""

    if text.startswith("\ufeff"):
        text = text[1:]
    reader = csv.reader(io.StringIO(text, newline=""))
    try:
        return [row for row in reader if row]
    except csv.Error as exc:
        raise InputDecodeError(f"{source} is not valid CSV: {exc}", line=reader.line_num) from exc


def read_rows(file_path: str) -> list[list[str]]:
    """Read a CSV export from disk into rows of cells."""

    with open(file_path, newline="", encoding="utf-8-sig") as handle:
        reader = csv.reader(handle)
        try:
            return [row for row in reader if row]
        except UnicodeDecodeError as exc:
            raise InputDecodeError(f"{file_path} is not valid UTF-8: {exc.reason}") from exc
        except csv.Error as exc:
            raise InputDecodeError(f"{file_path} is not valid CSV: {exc}", line=reader.line_num) from exc
