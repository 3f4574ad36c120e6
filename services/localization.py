from __future__ import annotations

import logging
from typing import Callable, Mapping, Sequence


logger = logging.getLogger(__name__)

LocaleListener = Callable[[str], None]

DEFAULT_LOCALE = "en"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "main.commandLine.placeholder": "Type command",
        "main.commandLine.showHistory": "Show command history",
        "main.commandLine.showMessages": "Show messages",
        "main.commandLine.noHistory": "(no history)",
        "main.commandLine.noLast": "(no last command)",
        "main.commandLine.canceled": "*Cancel*",
        "main.commandLine.executed": "Executed",
        "main.commandLine.unknownCommand": "Unknown command",
        "main.commandLine.dispatchFailed": "Command could not be sent",
        "main.commandLine.prompt": ">",
        "command.ACAD.ARC": "Draw an arc",
        "command.ACAD.CIRCLE": "Draw a circle",
        "command.ACAD.CLEAR": "Clear the drawing",
        "command.ACAD.ERASE": "Erase selected entities",
        "command.ACAD.LINE": "Draw straight line segments",
        "command.ACAD.LAYER": "Manage layers",
        "command.ACAD.OPEN": "Open a drawing file",
        "command.ACAD.PAN": "Pan the view",
        "command.ACAD.PLINE": "Draw a polyline",
        "command.ACAD.REGEN": "Regenerate the drawing",
        "command.ACAD.SELECT": "Select entities",
        "command.ACAD.ZOOM": "Zoom the view",
    },
    "zh": {
        "main.commandLine.placeholder": "输入命令",
        "main.commandLine.showHistory": "显示命令历史",
        "main.commandLine.showMessages": "显示消息",
        "main.commandLine.noHistory": "（无历史记录）",
        "main.commandLine.noLast": "（没有上一条命令）",
        "main.commandLine.canceled": "*取消*",
        "main.commandLine.executed": "已执行",
        "main.commandLine.unknownCommand": "未知命令",
        "main.commandLine.dispatchFailed": "命令无法发送",
        "main.commandLine.prompt": ">",
        "command.ACAD.ARC": "绘制圆弧",
        "command.ACAD.CIRCLE": "绘制圆",
        "command.ACAD.CLEAR": "清空图纸",
        "command.ACAD.ERASE": "删除选中的实体",
        "command.ACAD.LINE": "绘制直线段",
        "command.ACAD.LAYER": "管理图层",
        "command.ACAD.OPEN": "打开图纸文件",
        "command.ACAD.PAN": "平移视图",
        "command.ACAD.PLINE": "绘制多段线",
        "command.ACAD.REGEN": "重新生成图纸",
        "command.ACAD.SELECT": "选择实体",
        "command.ACAD.ZOOM": "缩放视图",
    },
}


class Localization:
    """
    Message catalog lookup with a locale-changed notification.

    Lookup order: current locale, then the default locale, then the caller's
    fallback, then the key itself.
    """

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
        available_locales: Sequence[str] | None = None,
    ) -> None:
        self._catalogs = {name: dict(messages) for name, messages in (catalogs or CATALOGS).items()}
        if DEFAULT_LOCALE not in self._catalogs:
            raise ValueError(f"Catalogs must include the default locale {DEFAULT_LOCALE!r}.")

        # The default catalog always backs lookups, even when it is not selectable.
        enabled = [name.strip().lower() for name in (available_locales or list(self._catalogs))]
        missing = [name for name in enabled if name not in self._catalogs]
        if missing:
            raise ValueError(f"No catalog for locale(s) {missing}; bundled: {list(self._catalogs)}")
        self._enabled = list(dict.fromkeys(enabled))
        self._locale = self._checked(locale)
        self._listeners: list[LocaleListener] = []

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def available_locales(self) -> list[str]:
        return list(self._enabled)

    def set_locale(self, locale: str) -> None:
        checked = self._checked(locale)
        if checked == self._locale:
            return
        self._locale = checked
        logger.info("Locale changed to %s", checked)
        for listener in list(self._listeners):
            listener(checked)

    def next_locale(self) -> str:
        names = self.available_locales
        idx = names.index(self._locale)
        self.set_locale(names[(idx + 1) % len(names)])
        return self._locale

    def translate(self, key: str, fallback: str | None = None) -> str:
        text = self._catalogs[self._locale].get(key)
        if text is None:
            text = self._catalogs[DEFAULT_LOCALE].get(key)
        if text is None:
            if fallback is None:
                logger.debug("Missing translation for %s", key)
            return fallback if fallback is not None else key
        return text

    def describe_command(self, group: str, command_id: str) -> str:
        return self.translate(f"command.{group}.{command_id}", fallback="")

    def add_locale_listener(self, listener: LocaleListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_locale_listener(self, listener: LocaleListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _checked(self, locale: str) -> str:
        name = (locale or "").strip().lower()
        if name not in self._enabled:
            raise ValueError(f"Unknown locale {locale!r}; available: {self.available_locales}")
        return name
