from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class LocaleConfig:
    default_locale: str = "en"
    available_locales: tuple[str, ...] = ("en", "zh")

    def validate(self) -> None:
        if not self.available_locales:
            raise ValueError("LocaleConfig.available_locales must not be empty.")
        for locale in self.available_locales:
            if not isinstance(locale, str) or not locale.strip():
                raise ValueError("LocaleConfig.available_locales must only contain non-empty strings.")
        if self.default_locale not in self.available_locales:
            raise ValueError(
                f"LocaleConfig.default_locale {self.default_locale!r} is not one of {list(self.available_locales)}."
            )

    @staticmethod
    def from_strings(default_locale: str = "en", available_locales: str = "en,zh") -> "LocaleConfig":
        locales = tuple(part.strip().lower() for part in available_locales.split(",") if part.strip())
        cfg = LocaleConfig(default_locale=default_locale.strip().lower(), available_locales=locales)
        cfg.validate()
        return cfg
