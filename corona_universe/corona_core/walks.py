"""
Edge walk generation.

An edge walk is a run of segments along one side of the center, starting at
offset 0, each segment starting where the previous one ends, and stopping as
soon as the run covers the center length (overhang allowed).

Pruning rules (unilateral):
- no first segment with size == center (would extend the center square)
- no two consecutive segments of equal size
"""

from typing import Sequence

from .types import DEFAULT_ALLOWED_SIZES, Edge, Segment


def generate_edge_walks(
    center_size: int, allowed_sizes: Sequence[int] = DEFAULT_ALLOWED_SIZES
) -> list[Edge]:
    """
    Enumerate every valid edge walk for a center of the given size.

    Depth-first over allowed_sizes in the given order; the partial walk is an
    immutable tuple so branches never share state. Sizes must be positive for
    the search to terminate.

    Args:
        center_size: Side length of the center square
        allowed_sizes: Candidate segment sizes, tried in this order

    Returns:
        List of walks in depth-first order (possibly empty)

    Examples:
        >>> [[str(s) for s in w] for w in generate_edge_walks(1)]
        [['2^0'], ['3^0'], ['4^0']]
    """
    sizes = [s for s in allowed_sizes if s > 0]
    walks: list[Edge] = []

    def extend(walk: Edge, offset: int) -> None:
        if offset >= center_size:
            walks.append(walk)
            return

        for size in sizes:
            if offset == 0 and size == center_size:
                continue
            if walk and walk[-1].size == size:
                continue
            extend(walk + (Segment(size, offset),), offset + size)

    extend((), 0)
    return walks
