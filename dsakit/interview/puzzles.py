"""Small puzzles: piano hand moves and grouping shifted ("buddy") strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_HAND_SPAN = 4


def min_piano_moves(song: Iterable[int]) -> int:
    """Fewest hand moves to play ``song`` when one hand covers five adjacent keys."""
    notes = iter(song)
    first = next(notes, None)
    if first is None:
        return 0
    low, high = first - _HAND_SPAN, first
    moves = 0
    for note in notes:
        new_low, new_high = note - _HAND_SPAN, note
        if max(low, new_low) <= min(high, new_high):
            low, high = max(low, new_low), min(high, new_high)
        else:
            moves += 1
            low, high = new_low, new_high
    return moves


def is_buddy(s1: str, s2: str) -> bool:
    """Whether ``s2`` is ``s1`` with every letter shifted by the same amount (wrapping)."""
    if len(s1) != len(s2):
        return False
    if not s1:
        return True
    shift = (ord(s2[0]) - ord(s1[0])) % 26
    return all((ord(b) - ord(a)) % 26 == shift for a, b in zip(s1, s2))


def buddy_signature(word: str) -> str:
    """The word shifted so it starts with 'a'; buddies share a signature."""
    if not word:
        return ""
    base = ord(word[0])
    return "".join(chr((ord(ch) - base) % 26 + ord("a")) for ch in word)


def group_buddies(words: Sequence[str]) -> list[list[str]]:
    """Group words that are buddies, comparing pairwise, in order of first appearance."""
    groups: list[list[str]] = []
    for word in words:
        for group in groups:
            if is_buddy(group[0], word):
                group.append(word)
                break
        else:
            groups.append([word])
    return groups


def group_buddies_by_signature(words: Iterable[str]) -> list[list[str]]:
    """Group buddy words by their signature, in order of first appearance."""
    groups: dict[str, list[str]] = {}
    for word in words:
        groups.setdefault(buddy_signature(word), []).append(word)
    return list(groups.values())