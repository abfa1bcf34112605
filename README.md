# sudachi_text

Pieces of a Japanese text-analysis pipeline, in pure Python with no runtime
dependencies: plugins that rewrite input text before tokenization, a plugin
that edits grammar connection costs, a loader that builds plugins from
configuration objects, and the decimal string arithmetic used for normalizing
numbers.

## Modules

- `sudachi_text.input_text`
  - `Replacement(start, end, text)`: replace the characters `start:end` of a
    string with `text`. Raises `ValueError` for a negative or reversed range.
  - `apply_replacements(text, replacements)`: apply non-overlapping
    replacements in order of position. Overlapping replacements, or ones past
    the end of the text, raise `ValueError`.
  - `InputTextPlugin`: abstract base class with `set_up(settings)`,
    `edits(text)` and `rewrite(text)`. `rewrite` returns the text with the
    plugin's edits applied.
- `sudachi_text.default_input_text`
  - `DefaultInputTextPlugin`: NFKC normalization, lowercasing and
    replacements from a rewrite list. `set_up(settings)` reads the file named
    by the `rewriteDef` setting (default `rewrite.def`);
    `read_rewrite_lists(lines)` takes the definition directly, as a string or
    an iterable of lines. A line with one character puts it on the list of
    characters that are not NFKC-normalized; a line with two strings replaces
    the first by the second; empty lines and lines starting with `#` are
    skipped. Malformed lines raise `InvalidDataFormatError` carrying the
    zero-based line number.
- `sudachi_text.ignore_yomigana`
  - `IgnoreYomiganaPlugin(categories)`: removes a bracketed kana reading that
    directly follows a kanji. `categories` is an iterable of
    `(range_of_code_points, category_names)` pairs; the names `KANJI`,
    `HIRAGANA` and `KATAKANA` are used. `set_up` reads `leftBrackets`,
    `rightBrackets` and `maxYomiganaLength`.
- `sudachi_text.connect_cost`
  - `EditConnectionCostPlugin`: abstract base class with `set_up(settings)`
    and `edit(grammar)`.
  - `InhibitConnectionPlugin`: reads pairs from the `inhibitPair` setting and
    sets each of those connections to `INHIBITED_CONNECTION` (`0x7FFF`)
    through `grammar.set_connect_cost(left, right, cost)`.
  - `BUNDLED_CONNECT_COST_PLUGINS`: the name-to-factory mapping for
    `load_plugins`.
- `sudachi_text.plugin_loader`
  - `load_plugins(configs, bundled, setup)`: for each configuration object,
    reads its `class` entry, creates the plugin from `bundled` (names start
    with `com.worksap.nlp.sudachi.`, which is stripped before lookup), calls
    `setup(plugin, config)`, and returns a `PluginContainer`.
  - `PluginContainer`: an immutable, ordered, iterable collection of plugins.
  - `extract_plugin_class(config)` and `system_specific_name(name, platform)`
    (`libname.so`, `name.dll` or `libname.dylib`, chosen by platform).
- `sudachi_text.plugin_errors`: `PluginError`, and its subclasses
  `ConfigError` and `InvalidDataFormatError`.
- `sudachi_text.string_number`
  - `StringNumber`: a number built digit by digit with `append`,
    `shift_scale`, `set_point` and `add`, printed in normalized form by
    `str()`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Examples

Normalizing text with a rewrite list:

```python
from sudachi_text.default_input_text import DefaultInputTextPlugin

plugin = DefaultInputTextPlugin()
plugin.read_rewrite_lists("ウ゛ ヴ\n")
print(plugin.rewrite("ＡＢＣ"))  # abc
print(plugin.rewrite("ウ゛"))    # ヴ
```

Removing readings after kanji:

```python
from sudachi_text.ignore_yomigana import IgnoreYomiganaPlugin

plugin = IgnoreYomiganaPlugin([
    (range(0x4E00, 0x9FB0), {"KANJI"}),
    (range(0x3041, 0x3097), {"HIRAGANA"}),
    (range(0x30A1, 0x30FB), {"KATAKANA"}),
])
plugin.set_up({
    "leftBrackets": ["(", "（"],
    "rightBrackets": [")", "）"],
    "maxYomiganaLength": 4,
})
print(plugin.rewrite("徳島（とくしま）に行く"))  # 徳島に行く
```

Loading a bundled plugin from configuration:

```python
from sudachi_text.connect_cost import BUNDLED_CONNECT_COST_PLUGINS
from sudachi_text.plugin_loader import load_plugins


class Grammar:
    def __init__(self):
        self.costs = {}

    def set_connect_cost(self, left, right, cost):
        self.costs[left, right] = cost


plugins = load_plugins(
    [{"class": "com.worksap.nlp.sudachi.InhibitConnectionPlugin",
      "inhibitPair": [[0, 233]]}],
    BUNDLED_CONNECT_COST_PLUGINS,
    lambda plugin, config: plugin.set_up(config),
)
grammar = Grammar()
for plugin in plugins:
    plugin.edit(grammar)
print(grammar.costs)  # {(0, 233): 32767}
```

Building a number:

```python
from sudachi_text.string_number import StringNumber

number = StringNumber()
number.append(1)
number.append(2)
number.shift_scale(3)
print(str(number))  # 12000
```

## What this package does not do

- It has no tokenizer, dictionary, lattice or grammar file reader; grammars
  are whatever object the caller passes in.
- It does not split text into sentences, and it does not parse numbers
  written in digits or kanji; `StringNumber` is only the arithmetic
  underneath such a parser.
- It has no plugin that collapses prolonged sound marks.
- `load_plugins` creates bundled plugins only. A `class` name without the
  bundled prefix raises `PluginError`; shared libraries are never loaded.
- There is no command-line program.