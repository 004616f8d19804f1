"""Choosing an apartment block near amenities and the least wasteful container set."""

from __future__ import annotations

import bisect
import math
from collections.abc import Iterable, Mapping, Sequence

Block = Mapping[str, bool]


def _pick_smallest(distances: Iterable[float]) -> int:
    best, best_distance = -1, math.inf
    for index, distance in enumerate(distances):
        if distance < best_distance:
            best, best_distance = index, distance
    return best


def find_best_apartment(blocks: Sequence[Block], requirements: Iterable[str]) -> int:
    """Index of the block whose farthest required amenity is nearest.

    Compares every block with every other block. Ties go to the lower index;
    -1 is returned if no block reaches all requirements.
    """
    reqs = list(requirements)

    def farthest(i: int) -> float:
        return max(
            (
                min(
                    (abs(j - i) for j, block in enumerate(blocks) if block.get(req, False)),
                    default=math.inf,
                )
                for req in reqs
            ),
            default=0,
        )

    return _pick_smallest(farthest(i) for i in range(len(blocks)))


def _nearest_distances(blocks: Sequence[Block], requirement: str) -> list[float]:
    n = len(blocks)
    distances: list[float] = [math.inf] * n
    last: int | None = None
    for i, block in enumerate(blocks):
        if block.get(requirement, False):
            last = i
        if last is not None:
            distances[i] = i - last
    last = None
    for i in range(n - 1, -1, -1):
        if blocks[i].get(requirement, False):
            last = i
        if last is not None:
            distances[i] = min(distances[i], last - i)
    return distances


def find_best_apartment_fast(blocks: Sequence[Block], requirements: Iterable[str]) -> int:
    """Same result as :func:`find_best_apartment`, with two sweeps per requirement."""
    farthest: list[float] = [0] * len(blocks)
    for req in requirements:
        farthest = list(map(max, farthest, _nearest_distances(blocks, req)))
    return _pick_smallest(farthest)


def choose_containers(
    requirements: Iterable[int],
    set_count: int,
    containers: Iterable[Sequence[int]],
) -> int:
    """Index of the container set that packs every requirement with least waste.

    ``containers`` holds ``(set_index, size)`` pairs. Each requirement goes into
    the smallest container of the set that holds it. Ties go to the lower set
    index; -1 is returned if no set can hold the largest requirement.
    """
    reqs = sorted(requirements)
    if not reqs:
        raise ValueError("choose_containers() requires at least one requirement")
    if set_count < 0:
        raise ValueError("set_count must not be negative")

    sets: list[list[int]] = [[] for _ in range(set_count)]
    for set_index, size in containers:
        if not 0 <= set_index < set_count:
            raise IndexError(f"container set {set_index} is outside 0..{set_count - 1}")
        sets[set_index].append(size)

    total = sum(reqs)
    largest = reqs[-1]

    def wastage(sizes: list[int]) -> float:
        sizes = sorted(sizes)
        if not sizes or sizes[-1] < largest:
            return math.inf
        covered = -1
        used = 0
        for size in sizes:
            last_fitting = bisect.bisect_right(reqs, size) - 1
            if last_fitting > covered:
                used += (last_fitting - covered) * size
                covered = last_fitting
        return used - total

    return _pick_smallest(wastage(sizes) for sizes in sets)