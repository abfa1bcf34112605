"""Plugins that edit connection costs of a grammar."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from .plugin_errors import ConfigError

# Largest 16-bit cost: a connection with this cost is never used.
INHIBITED_CONNECTION = 0x7FFF

_I16_MIN = -0x8000
_I16_MAX = 0x7FFF


class ConnectionGrammar(Protocol):
    """What a connection-cost plugin needs from a grammar."""

    def set_connect_cost(self, left: int, right: int, cost: int) -> None: ...


class EditConnectionCostPlugin(ABC):
    """A plugin that edits the connection cost matrix of a grammar."""

    @abstractmethod
    def set_up(self, settings: Mapping[str, Any]) -> None:
        """Configure the plugin from its settings object."""

    @abstractmethod
    def edit(self, grammar: ConnectionGrammar) -> None:
        """Edit the connection costs of ``grammar``."""


def _as_i16(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"connection id must be an integer, was {value!r}")
    if not _I16_MIN <= value <= _I16_MAX:
        raise ConfigError(f"connection id {value} is out of range")
    return value


@dataclass
class InhibitConnectionPlugin(EditConnectionCostPlugin):
    """Forbids the listed connections.

    Each pair holds the right id of the left node and the left id of the
    right node, as set by the ``inhibitPair`` setting.
    """

    inhibit_pairs: list[tuple[int, int]] = field(default_factory=list)

    def set_up(self, settings: Mapping[str, Any]) -> None:
        if not isinstance(settings, Mapping) or "inhibitPair" not in settings:
            raise ConfigError("settings must have an 'inhibitPair' list")
        raw = settings["inhibitPair"]
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
            raise ConfigError(f"inhibitPair must be a list, was {raw!r}")
        pairs = []
        for pair in raw:
            if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
                raise ConfigError(f"inhibitPair entry must be a pair, was {pair!r}")
            left, right = pair
            pairs.append((_as_i16(left), _as_i16(right)))
        self.inhibit_pairs = pairs

    def edit(self, grammar: ConnectionGrammar) -> None:
        for left, right in self.inhibit_pairs:
            grammar.set_connect_cost(left, right, INHIBITED_CONNECTION)


BUNDLED_CONNECT_COST_PLUGINS = {"InhibitConnectionPlugin": InhibitConnectionPlugin}