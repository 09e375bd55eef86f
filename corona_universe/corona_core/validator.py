"""
Corona validation.

Checks run in fixed order and stop at the first failure:

1. center is a positive integer
2. exactly 4 edges
3. per edge (segments sorted by (offset, size)):
   - non-empty
   - every segment: size allowed, offset in [0, center], not center-sized at 0
   - no two adjacent segments of equal size
   - first segment at offset 0
   - contiguous walk (next.offset == prev.offset + prev.size)
   - coverage reaches the center length
4. corner gaps: no unit square flanked on both sides by something larger

Invalid coronas are an ordinary outcome (most enumeration candidates fail),
so failures come back as ValidationResult values, never as exceptions.
"""

from typing import Sequence

from .types import (
    DEFAULT_ALLOWED_SIZES,
    NUM_EDGES,
    VALID,
    Corona,
    Edge,
    Reason,
    ValidationResult,
    sorted_edge,
)


def _fail(reason: Reason, where=None) -> ValidationResult:
    return ValidationResult(ok=False, reason=reason, where=where)


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def check_edge(
    ei: int, segs: Edge, center: int, allowed_sizes: Sequence[int]
) -> ValidationResult:
    """
    Per-edge rules for edge index ei. segs must already be sorted.

    Returns VALID or the first violation on this edge.
    """
    if not segs:
        return _fail(Reason.EDGE_EMPTY, {"edge": ei})

    for seg in segs:
        if seg.size not in allowed_sizes or seg.size <= 0:
            return _fail(Reason.INVALID_SIZE, {"edge": ei, "segment": seg})
        if seg.offset < 0 or seg.offset > center:
            return _fail(Reason.OFFSET_OUT_OF_RANGE, {"edge": ei, "segment": seg})
        if seg.size == center and seg.offset == 0:
            return _fail(Reason.CENTER_SIZED_ALIGNED, {"edge": ei, "segment": seg})

    for a, b in zip(segs, segs[1:]):
        if a.size == b.size:
            return _fail(Reason.EQUAL_ADJACENT_SIZES, {"edge": ei, "a": a, "b": b})

    if segs[0].offset != 0:
        return _fail(Reason.NOT_STARTING_AT_ZERO, {"edge": ei})

    for prev, nxt in zip(segs, segs[1:]):
        if nxt.offset != prev.end:
            return _fail(Reason.INVALID_WALK, {"edge": ei, "prev": prev, "next": nxt})

    if segs[-1].end < center:
        return _fail(Reason.SHORT_EDGE, {"edge": ei})

    return VALID


def check_corner_gaps(sorted_edges: Sequence[Edge], center: int) -> ValidationResult:
    """
    Reject unit squares trapped between larger neighbours.

    A unit segment's "before" neighbour is the previous segment on its edge,
    or the previous edge's overhang past the corner when it is first. Its
    "after" neighbour is the next segment on its edge, or the next edge's
    first segment when it is last. A single-segment edge takes both corner
    branches at once.

    Needs every edge's overhang up front, so it runs only after all edges
    pass check_edge().
    """
    n = len(sorted_edges)
    overhangs = [segs[-1].end - center for segs in sorted_edges]

    for ei, segs in enumerate(sorted_edges):
        prev_overhang = overhangs[(ei - 1) % n]
        next_first = sorted_edges[(ei + 1) % n][0]

        for i, seg in enumerate(segs):
            if seg.size != 1:
                continue

            before_size = prev_overhang if i == 0 else segs[i - 1].size
            after_size = next_first.size if i == len(segs) - 1 else segs[i + 1].size

            if before_size > 1 and after_size > 1:
                return _fail(
                    Reason.ISOLATED_UNIT_SQUARE,
                    {
                        "edge": ei,
                        "segment": i,
                        "before_size": before_size,
                        "after_size": after_size,
                    },
                )

    return VALID


def validate(
    corona: Corona, allowed_sizes: Sequence[int] = DEFAULT_ALLOWED_SIZES
) -> ValidationResult:
    """
    Validate a corona against all structural, geometric and corner-gap rules.

    Pure: never mutates the corona and never raises for bad content.

    Args:
        corona: Corona to check
        allowed_sizes: Permitted segment sizes

    Returns:
        VALID, or a ValidationResult carrying the first violated Reason and
        a `where` dict locating it

    Examples:
        >>> from corona_core.codec import from_compact
        >>> validate(from_compact("2|3^0|3^0|3^0|3^0")).ok
        True
        >>> str(validate(from_compact("1|1^0|2^0|2^0|2^0")).reason)
        'not unilateral (center-sized aligned)'
    """
    center = corona.center
    if not _is_positive_int(center):
        return _fail(Reason.CENTER_NOT_POSITIVE)

    if len(corona.edges) != NUM_EDGES:
        return _fail(Reason.WRONG_EDGE_COUNT)

    sorted_edges = [sorted_edge(edge) for edge in corona.edges]

    for ei, segs in enumerate(sorted_edges):
        result = check_edge(ei, segs, center, allowed_sizes)
        if not result.ok:
            return result

    return check_corner_gaps(sorted_edges, center)
