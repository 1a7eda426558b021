"""
settings.py — Central config for the AgriLink farm-logistics dashboard

Precedence for config values:
1) Streamlit secrets (if available)
2) Environment variables (a local `.env` is loaded first)
3) Sensible defaults

Secrets (database credentials) should live in .streamlit/secrets.toml for Streamlit.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

# --- Streamlit secrets (optional) ---
_ST_SECRETS = None
try:
    import streamlit as st  # noqa: F401
    _ST_SECRETS = getattr(st, "secrets", None)
except ImportError:
    _ST_SECRETS = None


# --- Helpers ---------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[1]

def from_secrets_or_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return value from st.secrets[key] if available, else os.getenv(key), else default."""
    if _ST_SECRETS is not None:
        try:
            val = _ST_SECRETS.get(key, None)
            if val is not None:
                return str(val)
        except Exception:
            # No secrets.toml on disk; fall through to the environment.
            pass
    return os.getenv(key, default)

def as_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse common truthy strings to bool."""
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "t", "yes", "y", "on"}

def as_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value is not None else default
    except ValueError:
        return default

def as_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value is not None else default
    except ValueError:
        return default


# --- Environment / Services -----------------------------------------------

ENVIRONMENT  = from_secrets_or_env("ENV", "development")
DEBUG        = as_bool(from_secrets_or_env("DEBUG", "false"), default=False)
LOG_LEVEL    = from_secrets_or_env("LOG_LEVEL", "DEBUG" if DEBUG else "INFO")

DATABASE_URL = from_secrets_or_env("DATABASE_URL", f"sqlite:///{PROJECT_ROOT / 'agrilink.db'}")

# "demo" renders every view read-only
APP_MODE = from_secrets_or_env("APP_MODE", "live")
READ_ONLY = APP_MODE.lower() == "demo"

# --- Dashboard -------------------------------------------------------------

ALERTS_LIMIT = as_int(from_secrets_or_env("ALERTS_LIMIT"), 5)
HISTORY_LIMIT = as_int(from_secrets_or_env("HISTORY_LIMIT"), 50)

CURRENCY_SYMBOL = from_secrets_or_env("CURRENCY_SYMBOL", "₹")
BATCH_CODE_PREFIX = from_secrets_or_env("BATCH_CODE_PREFIX", "AGRI")

# --- Cold chain thresholds -------------------------------------------------

COLD_MIN_C       = as_float(from_secrets_or_env("COLD_MIN_C"), 2.0)
COLD_MAX_C       = as_float(from_secrets_or_env("COLD_MAX_C"), 8.0)
HUMIDITY_MIN_PCT = as_float(from_secrets_or_env("HUMIDITY_MIN_PCT"), 85.0)
HUMIDITY_MAX_PCT = as_float(from_secrets_or_env("HUMIDITY_MAX_PCT"), 95.0)

EXPIRING_SOON_DAYS = as_int(from_secrets_or_env("EXPIRING_SOON_DAYS"), 3)
