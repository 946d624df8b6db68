import re

import pytest

from algokit.kmp import kmp_search, kmp_table


@pytest.mark.parametrize("pattern", ["a", "abab", "aabaaab", "abcabcd", "SEVENTY SEVEN"])
def test_table_border_property(pattern):
    table = kmp_table(pattern)
    assert len(table) == len(pattern) + 1
    assert table[0] == -1
    for i in range(1, len(table)):
        border = table[i]
        assert 0 <= border < i
        assert pattern[:border] == pattern[i - border:i]


def test_table_empty_pattern():
    assert kmp_table("") == [-1]


def test_search_pinned():
    assert kmp_search("ababab", "ab") == [0, 2, 4]
    assert kmp_search("aaaa", "aa") == [0, 1, 2]


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("I DO NOT LIKE SEVENTY SEV BUT SEVENTY SEVENTY SEVEN", "SEVENTY SEVEN"),
        ("abcabcabcd", "abcd"),
        ("aabaacaadaabaaba", "aaba"),
        ("mississippi", "issi"),
    ],
)
def test_search_matches_every_occurrence(text, pattern):
    found = kmp_search(text, pattern)
    for index in found:
        assert text[index:index + len(pattern)] == pattern
    expected = [m.start() for m in re.finditer(f"(?={re.escape(pattern)})", text)]
    assert found == expected


def test_search_no_match():
    assert kmp_search("abc", "abcd") == []
    assert kmp_search("", "a") == []


def test_search_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("abc", "")