import pytest

from inistore.parsers.common import check_entry, needs_quotes, split_entry_key, unquote


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('"Cabernet Sauvignon"', "Cabernet Sauvignon"),
        ("'single'", "single"),
        ('  "padded"  ', "padded"),
        ('""', ""),
        ('"', '"'),
        ("'mixed\"", "'mixed\""),
        ('""twice""', '"twice"'),
        ("yes ;", "yes ;"),
    ],
)
def test_unquote(raw, expected):
    assert unquote(raw) == expected


def test_split_entry_key_uses_first_colon():
    assert split_entry_key("pizza:ham") == ("pizza", "ham")
    assert split_entry_key("a:b:c") == ("a", "b:c")
    assert split_entry_key(":orphan") == ("", "orphan")
    assert split_entry_key("pizza") == ("pizza", None)


def test_needs_quotes():
    assert not needs_quotes("plain value")
    assert not needs_quotes("")
    assert needs_quotes(" leading")
    assert needs_quotes("trailing ")
    assert needs_quotes('"quoted"')
    assert needs_quotes("'quoted'")


@pytest.mark.parametrize(
    "entry, value",
    [
        ("s:a=b", "c"),
        ("s:#k", "v"),
        ("s:;k", "v"),
        ("s:[k", "v"),
        ("s: k", "v"),
        ("x]y:k", "v"),
        ("x]y", None),
        (" s:k", "v"),
        ("s:k\nj", "v"),
        ("s:k", "one\ntwo"),
        ("s:k", "one\rtwo"),
        ("name", "Bob"),
    ],
)
def test_check_entry_rejects_unwritable(entry, value):
    with pytest.raises(ValueError):
        check_entry(entry, value)


@pytest.mark.parametrize(
    "entry, value",
    [
        ("pizza:ham", "yes ;"),
        (":top", "1"),
        ("s:a:b", "v"),
        ("s:", "v"),
        ("s:k", "  padded  "),
        ("s:k", "a = b # c"),
        ("pizza", None),
        ("s:#k", None),
    ],
)
def test_check_entry_accepts_writable(entry, value):
    check_entry(entry, value)
