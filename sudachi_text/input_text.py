"""Plugins that rewrite the input text before tokenization."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Replacement:
    """Replace the characters ``start:end`` of a text with ``text``."""

    start: int
    end: int
    text: str

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid replacement range {self.start}..{self.end}")


def apply_replacements(text: str, replacements: Iterable[Replacement]) -> str:
    """Return ``text`` with every replacement applied.

    Replacements are applied in order of position and must not overlap.
    """
    parts = []
    position = 0
    for rep in sorted(replacements, key=lambda r: (r.start, r.end)):
        if rep.start < position:
            raise ValueError(
                f"replacement {rep.start}..{rep.end} overlaps a previous one"
            )
        if rep.end > len(text):
            raise ValueError(
                f"replacement {rep.start}..{rep.end} is outside text of length {len(text)}"
            )
        parts.append(text[position:rep.start])
        parts.append(rep.text)
        position = rep.end
    parts.append(text[position:])
    return "".join(parts)


class InputTextPlugin(ABC):
    """A plugin that edits the text before it is analysed."""

    @abstractmethod
    def set_up(self, settings: Mapping[str, Any]) -> None:
        """Configure the plugin from its settings object."""

    @abstractmethod
    def edits(self, text: str) -> Iterable[Replacement]:
        """Return the replacements to make in ``text``."""

    def rewrite(self, text: str) -> str:
        """Return ``text`` with this plugin's edits applied."""
        return apply_replacements(text, self.edits(text))