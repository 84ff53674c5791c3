import pytest

from faaskit.maps import compile_environment, merge_map, merge_slice, parse_map


def test_parse_map_pairs():
    assert parse_map(["a=b", " c=d=e "], "label") == {"a": "b", "c": "d=e"}


def test_parse_map_none_is_empty():
    assert parse_map(None, "label") == {}


def test_parse_map_missing_separator():
    with pytest.raises(ValueError) as info:
        parse_map(["novalue"], "label")
    assert str(info.value) == "label format is not correct, needs key=value"


def test_parse_map_empty_name():
    with pytest.raises(ValueError) as info:
        parse_map(["=v"], "annotation")
    assert str(info.value) == "empty annotation name: [=v]"


def test_parse_map_empty_value():
    with pytest.raises(ValueError) as info:
        parse_map(["k="], "env")
    assert str(info.value) == "empty env value: [k=]"


def test_parse_map_later_key_wins():
    assert parse_map(["k=first", "k=second"], "label") == {"k": "second"}


def test_merge_map_overlay_wins_and_inputs_untouched():
    base = {"a": "1", "b": "2"}
    overlay = {"b": "3"}
    merged = merge_map(base, overlay)
    assert merged == {"a": "1", "b": "3"}
    assert base == {"a": "1", "b": "2"}
    assert merge_map(None, None) == {}


def test_merge_slice_overlay_first_without_duplicates():
    assert merge_slice(["a", "b", "c"], ["c", "x"]) == ["c", "x", "a", "b"]
    assert merge_slice(None, None) == []


def test_merge_slice_contains_all_once():
    values = ["s1", "s2", "s3"]
    overlay = ["s2", "s4"]
    merged = merge_slice(values, overlay)
    assert sorted(merged) == sorted(set(values) | set(overlay))
    assert len(merged) == len(set(merged))


def test_compile_environment_precedence():
    env = compile_environment(
        ["shared=arg"],
        {"shared": "yaml", "only_yaml": "y"},
        {"shared": "file", "only_file": "f"},
    )
    assert env == {"shared": "arg", "only_yaml": "y", "only_file": "f"}


def test_compile_environment_file_over_yaml():
    env = compile_environment([], {"k": "yaml"}, {"k": "file"})
    assert env == {"k": "file"}


def test_compile_environment_bad_option():
    with pytest.raises(ValueError) as info:
        compile_environment(["broken"], {}, {})
    assert str(info.value) == (
        "error parsing envvars: label format is not correct, needs key=value"
    )