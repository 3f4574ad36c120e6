from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class CommandLineConfig:
    min_width: int = 60
    width_ratio: float = 0.66
    edge_margin: int = 2
    popup_max_rows: int = 8
    message_panel_rows: int = 12

    def validate(self) -> None:
        for name in ("min_width", "edge_margin", "popup_max_rows", "message_panel_rows"):
            value = getattr(self, name)
            # bool is a subclass of int; reject it explicitly.
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"CommandLineConfig.{name} must be an integer.")

        if self.min_width < 1:
            raise ValueError("CommandLineConfig.min_width must be >= 1.")
        if self.edge_margin < 0:
            raise ValueError("CommandLineConfig.edge_margin must be >= 0.")
        if not (0 < self.width_ratio <= 1):
            raise ValueError("CommandLineConfig.width_ratio must be in (0, 1].")
        if self.popup_max_rows < 1:
            raise ValueError("CommandLineConfig.popup_max_rows must be >= 1.")
        if self.message_panel_rows < 1:
            raise ValueError("CommandLineConfig.message_panel_rows must be >= 1.")

    @staticmethod
    def from_strings(
        min_width: str | int = 60,
        width_ratio: str | float = 0.66,
        edge_margin: str | int = 2,
        popup_max_rows: str | int = 8,
        message_panel_rows: str | int = 12,
    ) -> "CommandLineConfig":
        cfg = CommandLineConfig(
            min_width=int(min_width),
            width_ratio=float(width_ratio),
            edge_margin=int(edge_margin),
            popup_max_rows=int(popup_max_rows),
            message_panel_rows=int(message_panel_rows),
        )
        cfg.validate()
        return cfg
