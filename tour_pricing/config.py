# Role: Central configuration module. Loads .env into environment variables and computes runtime values
# (DEBUG, FX provider settings, catalog seed path). Importers read tour_pricing.config.<NAME> at call time.

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

DEBUG: bool = False

FX_RATES_URL: str = "https://api.exchangerate-api.com/v4/latest/JPY"
FX_REFRESH_SECONDS: int = 3600
FX_TIMEOUT_SECONDS: float = 5.0

CATALOG_PATH: Optional[str] = None

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def load_env() -> None:
    """
    Load .env into os.environ, then recompute the module-level values.
    This keeps them correct even if load_env() is called after import.
    """
    global DEBUG, FX_RATES_URL, FX_REFRESH_SECONDS, FX_TIMEOUT_SECONDS, CATALOG_PATH
    load_dotenv()
    # Key line: accept common truthy values.
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}

    FX_RATES_URL = os.getenv("FX_RATES_URL", FX_RATES_URL)
    FX_REFRESH_SECONDS = _int_env("FX_REFRESH_SECONDS", 3600)
    FX_TIMEOUT_SECONDS = _float_env("FX_TIMEOUT_SECONDS", 5.0)
    CATALOG_PATH = os.getenv("CATALOG_PATH") or None


def configure_logging() -> None:
    # Role: one root handler for app + CLI; DEBUG flips the level for the per-request breakdown logs.
    logging.basicConfig(level=logging.DEBUG if DEBUG else logging.INFO, format=_LOG_FORMAT)
