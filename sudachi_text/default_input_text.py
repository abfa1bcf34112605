"""Basic normalization of the input text: NFKC, lowercasing and replacements."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

from .input_text import InputTextPlugin, Replacement
from .plugin_errors import ConfigError, InvalidDataFormatError

DEFAULT_REWRITE_DEF_FILE = "rewrite.def"


class DefaultInputTextPlugin(InputTextPlugin):
    """Lowercases, NFKC-normalizes and applies the replacements of a rewrite list.

    Characters in the ignore list are not NFKC-normalized; replacements from
    the list take priority over normalization.
    """

    def __init__(self) -> None:
        self.ignore_normalize_set: frozenset[str] = frozenset()
        self.replace_char_map: dict[str, str] = {}
        self._key_lengths: dict[str, int] = {}

    def set_up(self, settings: Mapping[str, Any]) -> None:
        """Read the rewrite list named by the ``rewriteDef`` setting."""
        if not isinstance(settings, Mapping):
            raise ConfigError(f"plugin settings must be an object, was {settings!r}")
        path = settings.get("rewriteDef") or DEFAULT_REWRITE_DEF_FILE
        if not isinstance(path, (str, Path)):
            raise ConfigError(f"rewriteDef must be a path, was {path!r}")
        with open(path, encoding="utf-8") as handle:
            self.read_rewrite_lists(handle)

    def read_rewrite_lists(self, lines: Iterable[str]) -> None:
        """Load a rewrite definition.

        A line with one character adds it to the ignore list; a line with two
        strings replaces the first by the second. Empty lines and lines
        starting with ``#`` are skipped.
        """
        if isinstance(lines, str):
            lines = lines.splitlines()
        ignore: set[str] = set()
        key_lengths: dict[str, int] = {}
        replace: dict[str, str] = {}
        for number, raw in enumerate(lines):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            cols = line.split()
            if len(cols) == 1:
                if len(cols[0]) != 1:
                    raise InvalidDataFormatError(f"{cols[0]} is not character", number)
                ignore.add(cols[0])
            elif len(cols) == 2:
                key, value = cols
                if key in replace:
                    raise InvalidDataFormatError(f"{key} is already defined", number)
                first = key[0]
                key_lengths[first] = max(key_lengths.get(first, 0), len(key))
                replace[key] = value
            else:
                raise InvalidDataFormatError("", number)

        self.ignore_normalize_set = frozenset(ignore)
        self._key_lengths = key_lengths
        self.replace_char_map = replace

    def edits(self, text: str) -> list[Replacement]:
        needs_nfkc = not unicodedata.is_normalized("NFKC", text)
        needs_lower = any(ch.isupper() for ch in text)
        if needs_nfkc or needs_lower:
            return list(self._replace_slow(text))
        return list(self._replace_fast(text))

    def _match_at(self, text: str, offset: int, longest: bool) -> str | None:
        max_len = self._key_lengths.get(text[offset])
        if max_len is None:
            return None
        lengths = range(1, min(max_len, len(text) - offset) + 1)
        for length in reversed(lengths) if longest else lengths:
            candidate = text[offset:offset + length]
            if candidate in self.replace_char_map:
                return candidate
        return None

    def _replace_fast(self, text: str) -> Iterator[Replacement]:
        """Apply only the replacement list, leftmost-longest."""
        offset = 0
        while offset < len(text):
            key = self._match_at(text, offset, longest=True)
            if key is None:
                offset += 1
                continue
            yield Replacement(offset, offset + len(key), self.replace_char_map[key])
            offset += len(key)

    def _replace_slow(self, text: str) -> Iterator[Replacement]:
        """Walk every character, applying replacements, lowercasing and NFKC."""
        min_offset = 0
        for offset, ch in enumerate(text):
            if offset < min_offset:
                continue
            key = self._match_at(text, offset, longest=False)
            if key is not None:
                min_offset = offset + len(key)
                yield Replacement(offset, min_offset, self.replace_char_map[key])
                continue

            need_lower = ch.isupper()
            need_nfkc = ch not in self.ignore_normalize_set and not unicodedata.is_normalized(
                "NFKC", ch
            )
            if not (need_lower or need_nfkc):
                continue
            result = ch.lower() if need_lower else ch
            if need_nfkc:
                result = unicodedata.normalize("NFKC", result)
            if not result or result[0] == ch:
                continue
            yield Replacement(offset, offset + 1, result)