"""Application settings.

Values come from environment variables first, then from an optional INI file
`<JOBAPP_DATA_DIR>/app.ini` (default data dir: `data`):

    [app]
    log_level = DEBUG
    dev = true
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppSettings:
    log_level: str = "INFO"
    dev_mode: bool = False

    @property
    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def _read_ini(data_dir: Path) -> configparser.SectionProxy | None:
    ini_path = data_dir / "app.ini"
    if not ini_path.exists():
        return None
    cp = configparser.ConfigParser()
    cp.read(ini_path, encoding="utf-8")
    if not cp.has_section("app"):
        return None
    return cp["app"]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    env = os.environ if environ is None else environ
    section = _read_ini(Path(env.get("JOBAPP_DATA_DIR", "data")))

    def _lookup(env_key: str, ini_key: str, default: str) -> str:
        raw = env.get(env_key)
        if raw is None and section is not None:
            raw = section.get(ini_key)
        return str(raw if raw is not None else default).strip()

    return AppSettings(
        log_level=_lookup("JOBAPP_LOG_LEVEL", "log_level", "INFO").upper() or "INFO",
        dev_mode=_lookup("JOBAPP_DEV", "dev", "0").lower() in _TRUE_VALUES,
    )


def configure_logging(settings: AppSettings) -> None:
    level = logging.DEBUG if settings.dev_mode else settings.numeric_log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


__all__ = ["AppSettings", "configure_logging", "load_settings"]
