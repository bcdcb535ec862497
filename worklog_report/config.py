"""Report configuration: known users and the optional date floor."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from worklog_report.dates import parse_date
from worklog_report.errors import ConfigError, InvalidDateError
from worklog_report.schema import User

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WORKLOG_REPORT_CONFIG"
DEFAULT_CONFIG_PATH = Path("config.json")


@dataclass(frozen=True)
class ReportConfig:
    """Users keyed by id and the exclusive lower bound for entry dates."""

    users: dict[str, User] = field(default_factory=dict)
    date_floor: Optional[datetime] = None

    def find_user(self, user_id: str) -> User | None:
        return self.users.get(user_id)


def _parse_user(item: Any, index: int) -> User:
    if not isinstance(item, dict):
        raise ConfigError(f"users[{index}] must be an object")

    missing = [key for key in ("id", "name") if not item.get(key)]
    if missing:
        raise ConfigError(f"users[{index}] is missing required fields {missing}")

    return User(id=str(item["id"]).strip(), name=str(item["name"]))


def _parse_floor(payload: dict) -> Optional[datetime]:
    work_logs = payload.get("workLogs")
    if work_logs is None:
        return None
    if not isinstance(work_logs, dict):
        raise ConfigError("workLogs must be an object")

    filter_section = work_logs.get("filter")
    if filter_section is None:
        return None
    if not isinstance(filter_section, dict):
        raise ConfigError("workLogs.filter must be an object")

    raw = filter_section.get("from")
    if raw in (None, ""):
        return None

    try:
        return parse_date(str(raw))
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"workLogs.filter.from is not a valid date: {raw!r}") from exc


def parse_config(payload: Any) -> ReportConfig:
    """Validate a decoded configuration document."""

    if not isinstance(payload, dict):
        raise ConfigError("Configuration must be a JSON object")

    raw_users = payload.get("users")
    if not isinstance(raw_users, list):
        raise ConfigError("Configuration must contain a 'users' list")

    users: dict[str, User] = {}
    for index, item in enumerate(raw_users):
        user = _parse_user(item, index)
        if user.id in users:
            raise ConfigError(f"Duplicate user id {user.id!r} in configuration")
        users[user.id] = user

    return ReportConfig(users=users, date_floor=_parse_floor(payload))


def resolve_config_path(path: str | Path | None = None) -> Path:
    if path is not None:
        return Path(path)
    env_value = os.getenv(CONFIG_ENV_VAR, "").strip()
    return Path(env_value) if env_value else DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> ReportConfig:
    """Load and validate the JSON configuration file."""

    config_path = resolve_config_path(path)
    with open(config_path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{config_path} is not valid JSON: {exc.msg}") from exc

    config = parse_config(payload)
    logger.info(
        "Loaded %d users from %s (date floor: %s)",
        len(config.users),
        config_path,
        config.date_floor.isoformat() if config.date_floor else "none",
    )
    return config
