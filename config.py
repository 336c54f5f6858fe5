"""
Configuration loading/saving for SalesTracker
"""
from __future__ import annotations
import json
import os
from dataclasses import asdict, dataclass, fields
from typing import Optional

from logging_setup import get_logger
from utils import app_dir

logger = get_logger("config")

SETTINGS_FILE = "settings.json"


@dataclass
class AppSettings:
    """User settings; ledger data itself is never saved"""
    currency_symbol: str = "₹"
    export_dir: str = ""  # empty -> file dialog default
    log_level: Optional[str] = None  # None -> SALES_TRACKER_LOG_LEVEL or INFO


def settings_to_dict(settings: AppSettings) -> dict:
    """Convert AppSettings object to dictionary for JSON serialization"""
    return asdict(settings)


def dict_to_settings(d: dict) -> AppSettings:
    """Convert dictionary from JSON to AppSettings, ignoring unknown keys"""
    known = {f.name for f in fields(AppSettings)}
    return AppSettings(**{k: v for k, v in d.items() if k in known})


def load_settings(path: str) -> AppSettings:
    """Load settings from JSON file, falling back to defaults"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return AppSettings()
    except json.JSONDecodeError as ex:
        logger.warning("Ignoring unreadable settings file %s: %s", path, ex)
        return AppSettings()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return AppSettings()
    return dict_to_settings(data)


def save_settings(settings: AppSettings, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings_to_dict(settings), f, ensure_ascii=False, indent=2)


def get_default_settings() -> AppSettings:
    """Settings from the per-user application directory"""
    return load_settings(os.path.join(app_dir(), SETTINGS_FILE))
