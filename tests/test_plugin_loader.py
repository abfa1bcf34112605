import pytest

from sudachi_text.plugin_errors import ConfigError, PluginError
from sudachi_text.plugin_loader import (
    BUNDLED_PREFIX,
    PluginContainer,
    extract_plugin_class,
    load_plugins,
    system_specific_name,
)


class _Recorder:
    def __init__(self):
        self.settings = None


def _setup(plugin, config):
    plugin.settings = config


def test_extract_plugin_class():
    assert extract_plugin_class({"class": "some.Plugin"}) == "some.Plugin"


@pytest.mark.parametrize("config", [[1, 2], "text", 3, None])
def test_extract_plugin_class_requires_object(config):
    with pytest.raises(ConfigError) as info:
        extract_plugin_class(config)
    assert "must be an object" in str(info.value)


@pytest.mark.parametrize("config", [{}, {"class": 5}, {"klass": "x"}])
def test_extract_plugin_class_requires_class_key(config):
    with pytest.raises(ConfigError) as info:
        extract_plugin_class(config)
    assert "'class'" in str(info.value)


def test_system_specific_name_linux():
    assert system_specific_name("dir/plugin", "linux") == "dir/libplugin.so"


def test_system_specific_name_windows():
    assert system_specific_name("dir/plugin", "win32") == "dir/plugin.dll"


def test_system_specific_name_macos():
    assert system_specific_name("dir/plugin", "darwin") == "dir/libplugin.dylib"


def test_system_specific_name_with_dot_is_none():
    assert system_specific_name("dir/plugin.so", "linux") is None


def test_system_specific_name_unknown_platform():
    with pytest.raises(ValueError):
        system_specific_name("plugin", "plan9")


def test_load_bundled_plugins_in_order():
    configs = [
        {"class": BUNDLED_PREFIX + "Recorder", "n": 1},
        {"class": BUNDLED_PREFIX + "Recorder", "n": 2},
    ]
    container = load_plugins(configs, {"Recorder": _Recorder}, _setup)
    assert len(container) == 2
    assert [p.settings["n"] for p in container] == [1, 2]
    assert container.plugins[0] is not container.plugins[1]


def test_load_no_plugins():
    container = load_plugins([], {"Recorder": _Recorder}, _setup)
    assert len(container) == 0
    assert list(container) == []


def test_unknown_bundled_plugin():
    name = BUNDLED_PREFIX + "Missing"
    with pytest.raises(ConfigError) as info:
        load_plugins([{"class": name}], {"Recorder": _Recorder}, _setup)
    assert name in str(info.value)


def test_non_bundled_plugin_cannot_load():
    with pytest.raises(PluginError) as info:
        load_plugins([{"class": "path/to/plugin"}], {"Recorder": _Recorder}, _setup)
    assert "path/to/plugin" in str(info.value)


def test_setup_failure_gets_context():
    def failing(plugin, config):
        raise ValueError("boom")

    name = BUNDLED_PREFIX + "Recorder"
    with pytest.raises(PluginError) as info:
        load_plugins([{"class": name}], {"Recorder": _Recorder}, failing)
    assert f"plugin {name} setup" in str(info.value)
    assert isinstance(info.value.__cause__, ValueError)


def test_container_iterates_given_plugins():
    container = PluginContainer(["a", "b", "c"])
    assert list(container) == ["a", "b", "c"]
    assert len(container) == 3