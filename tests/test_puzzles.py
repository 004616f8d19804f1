import pytest

from dsakit.interview.puzzles import (
    buddy_signature,
    group_buddies,
    group_buddies_by_signature,
    is_buddy,
    min_piano_moves,
)

SOURCE_WORDS = ["abc", "bcd", "yza", "a", "z", "acef", "bdfg"]


def test_piano_source_example():
    assert min_piano_moves([1, 5, 2, 6, 3, 7]) == 1


def test_piano_no_moves_needed():
    assert min_piano_moves([]) == 0
    assert min_piano_moves([3, 3, 3]) == 0
    assert min_piano_moves([1, 5, 3, 2]) == 0


def test_piano_far_notes_move_every_time():
    song = [0, 10, 20, 30]
    assert min_piano_moves(song) == len(song) - 1


@pytest.mark.parametrize(
    "s1, s2, expected",
    [
        ("abc", "bcd", True),
        ("abc", "yza", True),
        ("acef", "bdfg", True),
        ("abc", "bce", False),
        ("ab", "abc", False),
        ("", "", True),
    ],
)
def test_is_buddy(s1, s2, expected):
    assert is_buddy(s1, s2) is expected


def test_signature_starts_with_a_and_is_shared_by_buddies():
    assert buddy_signature("bcd") == "abc"
    for word in SOURCE_WORDS:
        assert buddy_signature(word)[0] == "a"
    assert buddy_signature("yza") == buddy_signature("abc")
    assert buddy_signature("abc") != buddy_signature("bce")


def test_group_buddies_source_example():
    expected = [["abc", "bcd", "yza"], ["a", "z"], ["acef", "bdfg"]]
    assert group_buddies(SOURCE_WORDS) == expected
    assert group_buddies_by_signature(SOURCE_WORDS) == expected


def test_group_buddies_keeps_last_word():
    assert group_buddies(["abc", "xq"]) == [["abc"], ["xq"]]
    assert group_buddies_by_signature(["abc", "xq"]) == [["abc"], ["xq"]]


def test_groups_partition_input():
    words = ["az", "ba", "cd", "de", "q", "zz", "aa"]
    groups = group_buddies(words)
    assert sorted(w for g in groups for w in g) == sorted(words)
    for group in groups:
        assert all(is_buddy(group[0], w) for w in group)
    assert groups == group_buddies_by_signature(words)