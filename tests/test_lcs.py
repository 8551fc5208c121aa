import logging
from itertools import product

import pytest

from tokendiff.lcs import alignment, diff, tokenize
from tokendiff.lcs_table import Alignment

FOX = "The quick brown fox jumps over the lazy dog"
DOG = "The quick brown dog leaps over the lazy cat"


def lcs_length(x, y):
    rows = [[0] * (len(y) + 1) for _ in range(len(x) + 1)]
    for i, a in enumerate(x):
        for j, b in enumerate(y):
            if a == b:
                rows[i + 1][j + 1] = rows[i][j] + 1
            else:
                rows[i + 1][j + 1] = max(rows[i][j + 1], rows[i + 1][j])
    return rows[-1][-1]


@pytest.mark.parametrize(
    "original, edited, delimiter, expected",
    [
        ("AGCAT", "GAC", "", (4, "AC")),
        ("test", "test", "", (0, "test")),
        ("test", "tost", "", (2, "tst")),
        ("test", "test", " ", (0, "test")),
        ("a b : g", "b a : b b : g g", " ", (4, "a b : g")),
        (FOX, DOG, " ", (6, "The quick brown over the lazy")),
        (FOX, DOG, "\n", (2, "")),
        (FOX, DOG, "", (16, "The quick brown o ps over the lazy ")),
        (FOX, FOX, "\n", (0, FOX)),
    ],
)
def test_it_diffs(original, edited, delimiter, expected):
    assert diff(original, edited, delimiter) == expected


def test_it_diffs_lines():
    original = "one\ntwo\nthree\n"
    edited = "one\n2\nthree\nfour\n"

    assert diff(original, edited, "\n") == (3, "one\nthree\n")


def test_it_diffs_empty_inputs():
    assert diff("", "", "\n") == (0, "")
    assert diff("", "", "") == (0, "")
    assert diff("", "abc", "") == (3, "")
    assert diff("abc", "", "") == (3, "")


def test_it_tokenizes_on_the_delimiter():
    assert tokenize("a b  c", " ") == ("a", "b", "", "c")
    assert tokenize("", " ") == ("",)
    assert tokenize("abc", "") == ("a", "b", "c")
    assert tokenize("a::b", "::") == ("a", "b")


def test_it_prefers_the_second_sequence_on_a_tie():
    assert list(alignment("b", "c", "")) == [
        (Alignment.ONLY_IN_Y, "c"),
        (Alignment.ONLY_IN_X, "b"),
    ]
    assert list(alignment("ab", "ba", "")) == [
        (Alignment.ONLY_IN_Y, "b"),
        (Alignment.SHARED, "a"),
        (Alignment.ONLY_IN_X, "b"),
    ]
    assert diff("ab", "ba", "") == (2, "a")


def test_it_reports_affixes_as_shared_in_the_alignment():
    assert list(alignment("a b d", "a c d", " ")) == [
        (Alignment.SHARED, "a"),
        (Alignment.ONLY_IN_Y, "c"),
        (Alignment.ONLY_IN_X, "b"),
        (Alignment.SHARED, "d"),
    ]


def test_it_logs_each_step(caplog):
    caplog.set_level(logging.DEBUG, logger="tokendiff.lcs")

    diff("b", "c", "")

    assert [r.getMessage() for r in caplog.records if r.name == "tokendiff.lcs"] == [
        "ONLY_IN_Y: 'c'",
        "ONLY_IN_X: 'b'",
    ]


def test_it_holds_distance_and_trimming_properties_for_small_inputs():
    texts = ["".join(s) for n in range(4) for s in product("abc", repeat=n)]

    for original, edited in product(texts, repeat=2):
        distance, merged = diff(original, edited, "")

        assert diff(original, edited, "", trim=False) == (distance, merged)

        shared = lcs_length(original, edited)
        assert len(merged) == shared
        assert distance == len(original) + len(edited) - 2 * shared
        assert abs(len(original) - len(edited)) <= distance
        assert distance <= len(original) + len(edited)

        kinds = [kind for kind, _ in alignment(original, edited, "")]
        assert kinds.count(Alignment.SHARED) == shared
        assert len(kinds) - shared == distance


def test_identical_inputs_have_no_distance():
    for text in ["", "x", "a b a", "line\nline\n", FOX]:
        for delimiter in ["", " ", "\n", "a"]:
            assert diff(text, text, delimiter) == (0, text)
