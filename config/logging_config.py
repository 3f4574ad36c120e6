from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: str = "INFO"
    log_file: Path = Path(".appdata/logs/cadcli.log")
    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    def validate(self) -> None:
        if self.level not in _LEVELS:
            raise ValueError(f"LoggingConfig.level must be one of {sorted(_LEVELS)}, got {self.level!r}.")
        if not str(self.log_file).strip():
            raise ValueError("LoggingConfig.log_file must be a non-empty path.")
        if self.max_bytes <= 0:
            raise ValueError("LoggingConfig.max_bytes must be > 0.")
        if self.backup_count < 0:
            raise ValueError("LoggingConfig.backup_count must be >= 0.")

    @staticmethod
    def from_strings(
        level: str = "INFO",
        log_file: str | Path = ".appdata/logs/cadcli.log",
        max_bytes: str | int = 1024 * 1024,
        backup_count: str | int = 3,
    ) -> "LoggingConfig":
        cfg = LoggingConfig(
            level=(level or "").strip().upper(),
            log_file=Path(log_file).expanduser(),
            max_bytes=int(max_bytes),
            backup_count=int(backup_count),
        )
        cfg.validate()
        return cfg
