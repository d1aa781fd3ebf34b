import os
from pathlib import Path


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


_DEFAULT_DB_PATH = Path(__file__).resolve().parent / "data" / "servers.db"

DATABASE_URL = str(os.getenv("HUB_DB_URL", f"sqlite:///{_DEFAULT_DB_PATH.as_posix()}")).strip()
SEED_SAMPLE_DATA = _bool_env("HUB_SEED_SAMPLE_DATA", False)

HUB_API_PORT = _int_env("HUB_API_PORT", 8010)
HUB_API_BIND_HOST = str(os.getenv("HUB_API_BIND_HOST", "0.0.0.0")).strip()
HUB_API_BASE_URL = str(os.getenv("HUB_API_BASE_URL", f"http://127.0.0.1:{HUB_API_PORT}")).strip()

GUI_PORT = _int_env("HUB_GUI_PORT", 5000)
GUI_BIND_HOST = str(os.getenv("HUB_GUI_BIND_HOST", "0.0.0.0")).strip()
GUI_DEBUG = _bool_env("HUB_GUI_DEBUG", False)
GUI_SECRET_KEY = str(os.getenv("HUB_GUI_SECRET_KEY", "hosted-hub-secret")).strip()

HEALTHCHECK_TIMEOUT_SECONDS = _float_env("HEALTHCHECK_TIMEOUT_SECONDS", 5.0)
HEALTHCHECK_VERIFY_TLS = _bool_env("HEALTHCHECK_VERIFY_TLS", False)
HEALTHCHECK_POLL_SECONDS = _int_env("HEALTHCHECK_POLL_SECONDS", 30)

LOG_LEVEL = str(os.getenv("HUB_LOG_LEVEL", "INFO")).strip().upper()
