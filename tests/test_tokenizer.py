import pytest

from search_server.tokenizer import is_valid_word, make_unique_non_empty_strings, split_into_words


@pytest.mark.parametrize(
    "text,expected",
    [
        ("sweet home alabama", ["sweet", "home", "alabama"]),
        ("  leading and   trailing  ", ["leading", "and", "trailing"]),
        ("", []),
        ("     ", []),
        ("пушистый кот", ["пушистый", "кот"]),
        # Only the space separates words; a tab stays inside the word.
        ("cat\tdog bird", ["cat\tdog", "bird"]),
    ],
)
def test_split_into_words(text, expected):
    assert split_into_words(text) == expected


@pytest.mark.parametrize(
    "word,expected",
    [
        ("cat", True),
        ("кот", True),
        ("-cat", True),
        ("", True),
        ("\x00", False),
        ("ca\x02t", False),
        ("tab\t", False),
        ("\x1f", False),
        ("space ok", True),
    ],
)
def test_is_valid_word(word, expected):
    assert is_valid_word(word) is expected


def test_make_unique_non_empty_strings():
    assert make_unique_non_empty_strings(["in", "", "the", "in"]) == frozenset({"in", "the"})
