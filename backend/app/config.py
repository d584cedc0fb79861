"""Runtime configuration read from the environment (and backend/.env, if present)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_FILE = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    api_prefix: str = ""
    cors_origins: tuple[str, ...] = ("*",)
    log_level: str = DEFAULT_LOG_LEVEL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    rng_seed: int | None = None


def _env(name: str) -> str:
    return os.environ.get(name, "").strip()


def _int_env(name: str) -> int | None:
    raw = _env(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _normalize_prefix(prefix: str) -> str:
    """'api/' -> '/api'; '' and '/' both mean no prefix."""
    prefix = prefix.strip("/")
    return f"/{prefix}" if prefix else ""


def load_settings(*, env_file: str | None = ENV_FILE) -> Settings:
    """
    Build Settings from YATZY_* environment variables.

    Variables already set in the environment win over the .env file.
    Empty values fall back to the defaults.
    """
    if env_file:
        load_dotenv(env_file)

    origins = tuple(o.strip() for o in _env("YATZY_CORS_ORIGINS").split(",") if o.strip())
    port = _int_env("YATZY_PORT")
    return Settings(
        api_prefix=_normalize_prefix(_env("YATZY_API_PREFIX")),
        cors_origins=origins or ("*",),
        log_level=(_env("YATZY_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        host=_env("YATZY_HOST") or DEFAULT_HOST,
        port=DEFAULT_PORT if port is None else port,
        rng_seed=_int_env("YATZY_RNG_SEED"),
    )
