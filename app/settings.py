from __future__ import annotations

from dataclasses import dataclass
import os

from config.command_line_config import CommandLineConfig
from config.locale_config import LocaleConfig
from config.logging_config import LoggingConfig


@dataclass(frozen=True, slots=True)
class AppConfig:
    command_line: CommandLineConfig
    locale: LocaleConfig
    logging: LoggingConfig


def build_settings() -> AppConfig:

    command_line = CommandLineConfig.from_strings(
        min_width=60,
        width_ratio=0.66,
        edge_margin=2,
        popup_max_rows=8,
        message_panel_rows=12,
    )
    command_line.validate()

    locale = LocaleConfig.from_strings(
        default_locale=os.getenv("CADCLI_LOCALE", "en"),
        available_locales="en,zh",
    )
    locale.validate()

    logging_cfg = LoggingConfig.from_strings(
        level=os.getenv("CADCLI_LOG_LEVEL", "INFO"),
        log_file=os.getenv("CADCLI_LOG_FILE", ".appdata/logs/cadcli.log"),
        max_bytes=1024 * 1024,
        backup_count=3,
    )
    logging_cfg.validate()

    return AppConfig(
        command_line=command_line,
        locale=locale,
        logging=logging_cfg,
    )
