from pathlib import Path
from dotenv import dotenv_values

ROOT = Path(__file__).resolve().parents[2]
ENV = dotenv_values(ROOT / ".env") if (ROOT / ".env").exists() else {}

DEFAULT_TIMEOUT = 10.0
DEFAULT_WORKERS = 1
DEFAULT_USER_AGENT = "Fuze/1.0 (+broken-link checker)"
DEFAULT_LOG_LEVEL = "INFO"

def get(key: str, default=None):
    return ENV.get(key, default)

def get_float(key: str, default: float) -> float:
    raw = get(key)
    try:
        return float(raw) if raw is not None else default
    except ValueError:
        return default

def get_int(key: str, default: int) -> int:
    raw = get(key)
    try:
        return int(raw) if raw is not None else default
    except ValueError:
        return default

def timeout() -> float:
    return get_float("FUZE_TIMEOUT", DEFAULT_TIMEOUT)

def workers() -> int:
    return max(1, get_int("FUZE_WORKERS", DEFAULT_WORKERS))

def user_agent() -> str:
    return get("FUZE_USER_AGENT", DEFAULT_USER_AGENT)

def log_level() -> str:
    return get("FUZE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
