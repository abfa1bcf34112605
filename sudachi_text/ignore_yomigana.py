"""Removal of readings (yomigana) written in brackets after kanji."""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Mapping
from typing import Any

from .input_text import InputTextPlugin, Replacement
from .plugin_errors import ConfigError, InvalidDataFormatError, PluginError

CategoryRanges = Iterable[tuple[range, Collection[str]]]


def _escape(code: int) -> str:
    return f"\\U{code:08X}"


def _class_for(categories: list[tuple[range, frozenset[str]]], wanted: set[str]) -> str:
    """Build a character class of every code point whose categories meet ``wanted``."""
    merged: list[tuple[int, int]] = []
    for span, names in categories:
        if not names & wanted or len(span) == 0:
            continue
        if merged and merged[-1][1] == span.start:
            merged[-1] = (merged[-1][0], span.stop)
        else:
            merged.append((span.start, span.stop))
    if not merged:
        raise InvalidDataFormatError(f"no characters of category {sorted(wanted)}")
    parts = []
    for start, stop in merged:
        if stop - start == 1:
            parts.append(_escape(start))
        else:
            parts.append(f"{_escape(start)}-{_escape(stop - 1)}")
    return "[" + "".join(parts) + "]"


def _any_of(chars: Iterable[str]) -> str:
    body = "".join(_escape(ord(c)) for c in sorted(chars))
    if not body:
        raise InvalidDataFormatError("bracket set is empty")
    return f"[{body}]"


def _char_list(settings: Mapping[str, Any], key: str) -> frozenset[str]:
    value = settings.get(key)
    if value is None or isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ConfigError(f"settings must have a '{key}' list")
    for c in value:
        if not isinstance(c, str) or len(c) != 1:
            raise ConfigError(f"{key} entry must be a character, was {c!r}")
    return frozenset(value)


class IgnoreYomiganaPlugin(InputTextPlugin):
    """Removes a bracketed kana reading that directly follows a kanji.

    ``categories`` gives ranges of code points with the names of their
    character categories (``KANJI``, ``HIRAGANA``, ``KATAKANA`` and so on).
    """

    def __init__(self, categories: CategoryRanges) -> None:
        self._categories = sorted(
            ((span, frozenset(names)) for span, names in categories),
            key=lambda item: item[0].start,
        )
        self.left_bracket_set: frozenset[str] = frozenset()
        self.right_bracket_set: frozenset[str] = frozenset()
        self.max_yomigana_length = 0
        self._regex: re.Pattern[str] | None = None

    def set_up(self, settings: Mapping[str, Any]) -> None:
        """Read ``leftBrackets``, ``rightBrackets`` and ``maxYomiganaLength``."""
        if not isinstance(settings, Mapping):
            raise ConfigError(f"plugin settings must be an object, was {settings!r}")
        left = _char_list(settings, "leftBrackets")
        right = _char_list(settings, "rightBrackets")
        max_length = settings.get("maxYomiganaLength")
        if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 0:
            raise ConfigError(
                f"maxYomiganaLength must be a non-negative integer, was {max_length!r}"
            )

        kanji = _class_for(self._categories, {"KANJI"})
        reading = _class_for(self._categories, {"HIRAGANA", "KATAKANA"})
        pattern = (
            f"{kanji}({_any_of(left)}{reading}{{1,{max_length}}}{_any_of(right)})"
        )
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise InvalidDataFormatError(str(exc)) from exc

        self.left_bracket_set = left
        self.right_bracket_set = right
        self.max_yomigana_length = max_length
        self._regex = regex

    def edits(self, text: str) -> list[Replacement]:
        if self._regex is None:
            raise PluginError("IgnoreYomiganaPlugin is not set up")
        return [
            Replacement(m.start(1), m.end(1), "") for m in self._regex.finditer(text)
        ]