import os
from dataclasses import dataclass
from typing import Optional

VARIANTS = ("canonical", "verses")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    delay_min_ms: int = 3000
    delay_max_ms: int = 30000
    status_table: str = "canonical"
    verses_file: Optional[str] = None
    cors: bool = False
    seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.delay_min_ms < 0 or self.delay_max_ms < 0:
            raise ValueError("delay bounds must not be negative")
        if self.delay_min_ms > self.delay_max_ms:
            raise ValueError(
                f"delay_min_ms ({self.delay_min_ms}) is greater than "
                f"delay_max_ms ({self.delay_max_ms})"
            )
        if self.status_table not in VARIANTS:
            raise ValueError(
                f"Unknown status table {self.status_table!r}, expected one of {VARIANTS}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {self.log_level!r}, expected one of {LOG_LEVELS}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        seed = os.getenv("LIMINAL_SEED")
        return cls(
            host=os.getenv("LIMINAL_HOST", "0.0.0.0"),
            port=_int_env("PORT", 3000),
            delay_min_ms=_int_env("LIMINAL_DELAY_MIN_MS", 3000),
            delay_max_ms=_int_env("LIMINAL_DELAY_MAX_MS", 30000),
            status_table=os.getenv("LIMINAL_STATUS_TABLE", "canonical").strip().lower(),
            verses_file=os.getenv("LIMINAL_VERSES_FILE") or None,
            cors=_bool_env("LIMINAL_CORS", False),
            seed=_int_env("LIMINAL_SEED", 0) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
