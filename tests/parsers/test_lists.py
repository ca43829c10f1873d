import pytest

from commentconfig.parsers.lists import parse_flag_list, parse_name_value_list
from commentconfig.types import DirectiveEntry


class Comment:
    """Stand-in for a comment node, compared by identity"""


@pytest.fixture
def comment():
    return Comment()


def test_bare_name(comment):
    result = parse_name_value_list("foo", comment)
    assert result == {"foo": DirectiveEntry(value=None, comment=comment)}
    assert result["foo"].comment is comment


def test_name_value(comment):
    result = parse_name_value_list("foo:bar baz:1", comment)
    assert result == {
        "foo": DirectiveEntry(value="bar", comment=comment),
        "baz": DirectiveEntry(value="1", comment=comment),
    }


@pytest.mark.parametrize(
    "string",
    [
        "foo :  bar , baz",
        "foo:bar,baz",
        "  foo:bar\tbaz  ",
        ",,foo:bar,,, baz,",
        "foo: bar\n baz",
    ],
)
def test_separators(comment, string):
    result = parse_name_value_list(string, comment)
    assert list(result) == ["foo", "baz"]
    assert result["foo"].value == "bar"
    assert result["baz"].value is None


@pytest.mark.parametrize("string", ["", "   ", ",,,", " , \n "])
def test_empty(comment, string):
    assert parse_name_value_list(string, comment) == {}


def test_last_write_wins(comment):
    # intended: repeated names are not reported, the later entry is kept
    result = parse_name_value_list("foo:1 bar foo:2", comment)
    assert result["foo"].value == "2"
    # the key keeps its original position
    assert list(result) == ["foo", "bar"]


def test_first_value_only(comment):
    # intended: only the first value after the name is kept
    assert parse_name_value_list("a:b:c", comment)["a"].value == "b"


def test_empty_value(comment):
    # a trailing colon gives an empty value, not a missing one
    assert parse_name_value_list("a:", comment)["a"].value == ""


def test_name_value_idempotent(comment):
    string = "window:readonly, document , foo:writable bar"
    assert parse_name_value_list(string, comment) == parse_name_value_list(
        string, comment
    )


def test_entry_frozen(comment):
    entry = parse_name_value_list("foo", comment)["foo"]
    with pytest.raises(AttributeError):
        entry.value = "bar"


@pytest.mark.parametrize(
    "string, expected",
    [
        ("", {}),
        ("a, b ,,c", {"a": True, "b": True, "c": True}),
        ("no-alert", {"no-alert": True}),
        (" , ,", {}),
        ("a,a , a", {"a": True}),
        # whitespace alone does not separate flags
        ("a b, c", {"a b": True, "c": True}),
        ("\ta ,\n b\n", {"a": True, "b": True}),
    ],
)
def test_flag_list(string, expected):
    assert parse_flag_list(string) == expected


def test_flag_list_tokens():
    string = " semi,, no-alert , eqeqeq,semi "
    expected = {t.strip() for t in string.split(",") if t.strip()}
    result = parse_flag_list(string)
    assert set(result) == expected
    assert all(v is True for v in result.values())
    assert parse_flag_list(string) == result
