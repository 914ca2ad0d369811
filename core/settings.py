# core/settings.py
"""Environment bootstrap and logging setup for the app.

Settings come from environment variables, optionally seeded from a `.env`
file at the repository root. Values already present in the environment win
over the file.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_logger = logging.getLogger(__name__)

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

DEFAULT_PAGE_TITLE = "Calculadora de Salario Neto"
_TRUE_VALUES = {"1", "true", "yes", "on"}

_env_loaded = False


@dataclass(frozen=True)
class Settings:
    page_title: str = DEFAULT_PAGE_TITLE
    log_level: int = logging.INFO
    show_breakdown: bool = True


def _parse_bool(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _parse_log_level(raw: Optional[str]) -> int:
    level = logging.getLevelName((raw or "INFO").strip().upper())
    # getLevelName returns "Level X" strings for unknown names
    return level if isinstance(level, int) else logging.INFO


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings(
        page_title=os.getenv("SALARIONETO_PAGE_TITLE") or DEFAULT_PAGE_TITLE,
        log_level=_parse_log_level(os.getenv("SALARIONETO_LOG_LEVEL")),
        show_breakdown=_parse_bool(os.getenv("SALARIONETO_SHOW_BREAKDOWN"), True),
    )


def configure_logging(level: int = logging.INFO) -> None:
    """Short timestamped format, only if nothing configured logging yet."""
    if logging.getLogger().handlers:
        return
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")
    _logger.debug("Logging initialised")


def bootstrap_env(root_dir: Optional[str] = None) -> Settings:
    """
    Load `.env` (once) and configure logging. Safe to call on every rerun.
    """
    global _env_loaded
    if not _env_loaded:
        env_path = os.path.join(root_dir or ROOT_DIR, ".env")
        if os.path.exists(env_path):
            load_dotenv(env_path, override=False)
            _logger.info("Loaded .env from %s", env_path)
        _env_loaded = True

    settings = load_settings()
    configure_logging(settings.log_level)
    return settings
