import pytest

from sudachi_text.default_input_text import DefaultInputTextPlugin
from sudachi_text.plugin_errors import ConfigError, InvalidDataFormatError

ORIGINAL_TEXT = "ÂＢΓД㈱ｶﾞウ゛⼼Ⅲ"
NORMALIZED_TEXT = "âbγд(株)ガヴ⼼ⅲ"

REWRITE_DEF = """\
# ignore normalize list
Ⅲ
ⅲ
⼼

# replace char list
ｶﾞ ガ
ウ゛ ヴ
"""


@pytest.fixture
def plugin(tmp_path):
    path = tmp_path / "rewrite.def"
    path.write_text(REWRITE_DEF, encoding="utf-8")
    p = DefaultInputTextPlugin()
    p.set_up({"rewriteDef": str(path)})
    return p


def test_after_rewrite(plugin):
    result = plugin.rewrite(ORIGINAL_TEXT)
    assert result == NORMALIZED_TEXT
    assert len(result.encode("utf-8")) == 24
    expected = (
        b"\xc3\xa2\x62\xce\xb3\xd0\xb4\x28\xe6\xa0\xaa\x29\xe3\x82\xac"
        b"\xe3\x83\xb4\xe2\xbc\xbc\xe2\x85\xb2"
    )
    assert result.encode("utf-8") == expected


def test_edits_map_original_slices(plugin):
    mapping = {ORIGINAL_TEXT[r.start:r.end]: r.text for r in plugin.edits(ORIGINAL_TEXT)}
    assert mapping == {
        "Â": "â",
        "Ｂ": "b",
        "Γ": "γ",
        "Д": "д",
        "㈱": "(株)",
        "ｶﾞ": "ガ",
        "ウ゛": "ヴ",
        "Ⅲ": "ⅲ",
    }


def test_ignore_list_two_chars():
    p = DefaultInputTextPlugin()
    with pytest.raises(InvalidDataFormatError) as info:
        p.read_rewrite_lists(["12"])
    assert info.value.line == 0


def test_replace_list_three_entries():
    p = DefaultInputTextPlugin()
    with pytest.raises(InvalidDataFormatError) as info:
        p.read_rewrite_lists(["12 21 31"])
    assert info.value.line == 0


def test_replace_list_duplicates():
    data = "\n    12 31\n    12 31"
    p = DefaultInputTextPlugin()
    with pytest.raises(InvalidDataFormatError) as info:
        p.read_rewrite_lists(data)
    assert info.value.line == 2


def test_read_lists_contents():
    p = DefaultInputTextPlugin()
    p.read_rewrite_lists(["# comment", "", "x", "ab cd"])
    assert p.ignore_normalize_set == frozenset({"x"})
    assert p.replace_char_map == {"ab": "cd"}


def test_rewrite_hiragana(plugin):
    assert plugin.rewrite("ひらがな") == "ひらがな"


def test_nfkc_works(plugin):
    assert plugin.rewrite("ひＢら①がⅢな") == "ひbら1がⅲな"


def test_lowercasing_works_simple(plugin):
    assert plugin.rewrite("ひЗДらTESTがЕСЬな") == "ひздらtestがесьな"


def test_lowercasing_works_difficult(plugin):
    assert plugin.rewrite("ひらİがẞなΣ") == "ひらi\u0307がßなσ"


def test_replacement_works(plugin):
    assert plugin.rewrite("ウ゛") == "ヴ"


def test_full_normalization_works(plugin):
    assert plugin.rewrite(ORIGINAL_TEXT) == NORMALIZED_TEXT


def test_fast_path_uses_longest_match():
    p = DefaultInputTextPlugin()
    p.read_rewrite_lists(["a 1", "ab 2"])
    assert p.rewrite("xaby") == "x2y"


def test_slow_path_uses_shortest_match():
    p = DefaultInputTextPlugin()
    p.read_rewrite_lists(["a 1", "ab 2"])
    assert p.rewrite("Xaby") == "x1by"


def test_missing_rewrite_file(tmp_path):
    p = DefaultInputTextPlugin()
    with pytest.raises(FileNotFoundError):
        p.set_up({"rewriteDef": str(tmp_path / "missing.def")})


def test_settings_must_be_object():
    p = DefaultInputTextPlugin()
    with pytest.raises(ConfigError):
        p.set_up(["rewrite.def"])