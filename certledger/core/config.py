from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

AppEnv = Literal["dev", "test", "prod"]
LogLevel = Literal["debug", "info", "warning", "error"]

_TRUE_WORDS = ("1", "true", "yes", "on")
_FALSE_WORDS = ("0", "false", "no", "off")


def _getenv(name: str, default: str) -> str:
    return os.environ.get(name, default).strip()


@dataclass(frozen=True)
class Settings:
    app_env: AppEnv
    log_level: LogLevel
    log_json: bool
    max_certs_per_guide: int
    issuance_fee: int

    @property
    def is_dev(self) -> bool:
        return self.app_env == "dev"

    @property
    def is_test(self) -> bool:
        return self.app_env == "test"

    @property
    def is_prod(self) -> bool:
        return self.app_env == "prod"


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from None


def load_settings() -> Settings:
    app_env_raw = _getenv("APP_ENV", "dev").lower()
    log_level_raw = _getenv("LOG_LEVEL", "info").lower()
    log_json_raw = _getenv("LOG_JSON", "false").lower()
    max_certs_raw = _getenv("MAX_CERTS_PER_GUIDE", "5")
    fee_raw = _getenv("ISSUANCE_FEE", "500")

    if app_env_raw not in ("dev", "test", "prod"):
        raise ValueError(f"APP_ENV must be dev|test|prod (got {app_env_raw!r})")

    if log_level_raw not in ("debug", "info", "warning", "error"):
        raise ValueError(
            f"LOG_LEVEL must be debug|info|warning|error (got {log_level_raw!r})"
        )

    if log_json_raw not in _TRUE_WORDS + _FALSE_WORDS:
        raise ValueError(f"LOG_JSON must be a boolean (got {log_json_raw!r})")

    max_certs = _parse_int("MAX_CERTS_PER_GUIDE", max_certs_raw)
    if max_certs <= 0:
        raise ValueError(f"MAX_CERTS_PER_GUIDE must be positive (got {max_certs})")

    issuance_fee = _parse_int("ISSUANCE_FEE", fee_raw)
    if issuance_fee < 0:
        raise ValueError(f"ISSUANCE_FEE must be non-negative (got {issuance_fee})")

    return Settings(  # type: ignore[arg-type]
        app_env=app_env_raw,
        log_level=log_level_raw,
        log_json=log_json_raw in _TRUE_WORDS,
        max_certs_per_guide=max_certs,
        issuance_fee=issuance_fee,
    )


SETTINGS = load_settings()
