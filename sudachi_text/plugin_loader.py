"""Loading of plugins described by configuration objects."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from .plugin_errors import ConfigError, PluginError

T = TypeVar("T")

BUNDLED_PREFIX = "com.worksap.nlp.sudachi."

_LIBRARY_FORMATS = {
    "linux": "lib{}.so",
    "windows": "{}.dll",
    "macos": "lib{}.dylib",
}

_PLATFORM_ALIASES = {
    "win32": "windows",
    "cygwin": "windows",
    "darwin": "macos",
}


class PluginContainer(Generic[T]):
    """An ordered, immutable collection of loaded plugins."""

    def __init__(self, plugins: Iterable[T]) -> None:
        self._plugins = tuple(plugins)

    @property
    def plugins(self) -> tuple[T, ...]:
        return self._plugins

    def __iter__(self) -> Iterator[T]:
        return iter(self._plugins)

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return f"PluginContainer({list(self._plugins)!r})"


def extract_plugin_class(config: Any) -> str:
    """Return the ``class`` entry of a plugin configuration object."""
    if not isinstance(config, Mapping):
        raise ConfigError(f"plugin config must be an object, was {config!r}")
    name = config.get("class")
    if not isinstance(name, str):
        raise ConfigError(
            "plugin config must have 'class' key to indicate plugin SO file"
        )
    return name


def _normalize_platform(platform: str) -> str:
    if platform.startswith("linux"):
        return "linux"
    return _PLATFORM_ALIASES.get(platform, platform)


def system_specific_name(name: str, platform: str | None = None) -> str | None:
    """Return the platform's shared-library file name for ``name``.

    Names that already contain a dot are taken as complete and give None.
    """
    if "." in name:
        return None
    key = _normalize_platform(sys.platform if platform is None else platform)
    try:
        pattern = _LIBRARY_FORMATS[key]
    except KeyError:
        raise ValueError(f"unsupported platform: {platform!r}") from None
    stripped = name.rstrip("/")
    if not stripped:
        return None
    parent, _, file_name = stripped.rpartition("/")
    return f"{parent}/{pattern.format(file_name)}"


def _create_plugin(name: str, bundled: Mapping[str, Callable[[], T]]) -> T:
    if name.startswith(BUNDLED_PREFIX):
        factory = bundled.get(name[len(BUNDLED_PREFIX):])
        if factory is None:
            raise ConfigError(f"Failed to lookup bundled plugin: {name}")
        return factory()
    candidates = [name]
    sysname = system_specific_name(name)
    if sysname is not None:
        candidates.append(sysname)
    raise PluginError(
        f"failed to load library from: {candidates!r}; only bundled plugins are available"
    )


def load_plugins(
    configs: Iterable[Mapping[str, Any]],
    bundled: Mapping[str, Callable[[], T]],
    setup: Callable[[T, Mapping[str, Any]], None],
) -> PluginContainer[T]:
    """Create and set up one plugin for each configuration, in order.

    ``bundled`` maps short plugin names (without the bundled prefix) to
    factories; ``setup(plugin, config)`` configures a freshly made plugin.
    """
    plugins = []
    for config in configs:
        name = extract_plugin_class(config)
        plugin = _create_plugin(name, bundled)
        try:
            setup(plugin, config)
        except Exception as exc:
            raise PluginError(f"plugin {name} setup: {exc}") from exc
        plugins.append(plugin)
    return PluginContainer(plugins)