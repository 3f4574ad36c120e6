from __future__ import annotations


class HistoryTracker:
    def __init__(self) -> None:
        self._entries: list[str] = []
        self._index = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    def push(self, command_id: str) -> None:
        self._entries.append(command_id)
        self._index = len(self._entries)

    def navigate(self, direction: int) -> str | None:
        """Move the recall cursor; returns the new buffer text, "" at the fresh line, None when empty."""
        if direction not in (-1, 1):
            raise ValueError(f"History direction must be -1 or 1, got {direction!r}")
        if not self._entries:
            return None

        length = len(self._entries)
        self._index = max(0, min(self._index + direction, length))
        if self._index == length:
            return ""
        return self._entries[self._index]

    def newest_first(self) -> list[str]:
        return list(reversed(self._entries))
