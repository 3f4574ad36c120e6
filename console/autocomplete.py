from __future__ import annotations

from dataclasses import dataclass
import logging

from interfaces.command_line import CommandRegistry, LocalizationProvider


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutocompleteCandidate:
    command_id: str
    display_label: str
    description: str
    group: str = ""


class AutocompleteMatcher:
    def __init__(self, registry: CommandRegistry, localization: LocalizationProvider) -> None:
        self.registry = registry
        self.localization = localization
        self._candidates: list[AutocompleteCandidate] = []
        self._selected_index = -1

    @property
    def candidates(self) -> tuple[AutocompleteCandidate, ...]:
        return tuple(self._candidates)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected(self) -> AutocompleteCandidate | None:
        if 0 <= self._selected_index < len(self._candidates):
            return self._candidates[self._selected_index]
        return None

    def update(self, text: str) -> bool:
        query = (text or "").strip()
        if not query:
            self.clear()
            return False

        matches = self.registry.search_by_prefix(query)
        self._candidates = [self._build_candidate(m.group, m.command.global_name) for m in matches]
        self._selected_index = -1
        logger.debug("Autocomplete %r matched %d command(s)", query, len(self._candidates))
        return bool(self._candidates)

    def navigate(self, direction: int) -> str | None:
        """Move the highlight; returns the selected command id, or None with no candidates."""
        if direction not in (-1, 1):
            raise ValueError(f"Autocomplete direction must be -1 or 1, got {direction!r}")
        if not self._candidates:
            return None

        if self._selected_index == -1:
            self._selected_index = 0
        else:
            last = len(self._candidates) - 1
            self._selected_index = max(0, min(self._selected_index + direction, last))
        return self._candidates[self._selected_index].command_id

    def refresh_descriptions(self) -> None:
        self._candidates = [self._build_candidate(c.group, c.command_id) for c in self._candidates]

    def clear(self) -> None:
        self._candidates = []
        self._selected_index = -1

    def _build_candidate(self, group: str, command_id: str) -> AutocompleteCandidate:
        description = self.localization.describe_command(group, command_id)
        label = f"{command_id} - {description}" if description else command_id
        return AutocompleteCandidate(
            command_id=command_id,
            display_label=label,
            description=description,
            group=group,
        )
