"""
Core type definitions for corona enumeration.

A corona is a square center tile of integer side length surrounded on its
four sides by edges. Each edge is a run of smaller square segments laid out
along the side, starting at the corner shared with the center.

Provides:
- Segment: one placed square (size, offset)
- Edge: tuple of segments along one side
- Corona: center size plus four edges in cyclic order
- Reason / ValidationResult: closed set of validator outcomes
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

# Allowed segment sizes unless a caller overrides them
DEFAULT_ALLOWED_SIZES: tuple[int, ...] = (1, 2, 3, 4)

# Number of sides around the center square
NUM_EDGES = 4


@dataclass(frozen=True)
class Segment:
    """Square tile of side `size` starting `offset` units from the corner."""
    size: int
    offset: int

    @property
    def end(self) -> int:
        """Offset just past this segment."""
        return self.offset + self.size

    def __str__(self) -> str:
        return f"{self.size}^{self.offset}"


# Edge = ordered run of segments along one side
Edge = tuple[Segment, ...]


def segment_order(seg: Segment) -> tuple[int, int]:
    """Sort key used everywhere segments are ordered: (offset, size)."""
    return (seg.offset, seg.size)


def sorted_edge(edge: Iterable[Segment]) -> Edge:
    """Return the edge's segments sorted by (offset, size)."""
    return tuple(sorted(edge, key=segment_order))


@dataclass(frozen=True)
class Corona:
    """
    Center square plus its bordering edges.

    Edges are kept in fixed cyclic order around the center. Construction
    normalizes the edge containers to tuples but performs no geometric or
    structural checks: a corona with the wrong number of edges, empty
    edges or out-of-range segments can be built and is rejected by
    validate() instead.
    """
    center: int
    edges: tuple[Edge, ...]

    def __post_init__(self):
        object.__setattr__(self, "edges", tuple(tuple(e) for e in self.edges))

    def rotated(self, k: int) -> "Corona":
        """Rotate the edge list left by k positions (wrapping)."""
        n = len(self.edges)
        if n == 0:
            return self
        k %= n
        return Corona(self.center, self.edges[k:] + self.edges[:k])


class Reason(str, Enum):
    """Validator failure reasons, one per rule (in check order)."""
    CENTER_NOT_POSITIVE = "center must be a positive integer"
    WRONG_EDGE_COUNT = "edges must have length 4"
    EDGE_EMPTY = "edge empty"
    INVALID_SIZE = "invalid segment size"
    OFFSET_OUT_OF_RANGE = "offset out of range"
    CENTER_SIZED_ALIGNED = "not unilateral (center-sized aligned)"
    EQUAL_ADJACENT_SIZES = "not unilateral (equal adjacent sizes)"
    NOT_STARTING_AT_ZERO = "edge does not start at 0"
    INVALID_WALK = "invalid edge walk"
    SHORT_EDGE = "edge does not reach center length"
    ISOLATED_UNIT_SQUARE = "isolated 1x1 square trapped by larger squares"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a corona.

    - ok: True when no rule is violated
    - reason: the first violated rule (None when ok)
    - where: structured location of the violation (edge index, offending
      segment(s), flanking sizes for the corner-gap rule)
    """
    ok: bool
    reason: Optional[Reason] = None
    where: Optional[dict[str, Any]] = None

    def __bool__(self) -> bool:
        return self.ok


VALID = ValidationResult(ok=True)
