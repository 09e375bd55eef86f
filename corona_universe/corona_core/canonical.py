"""
Rotation canonicalization of a corona's edge list.

The four edges sit in fixed cyclic order around the center, so rotating the
list by k positions describes the same corona turned by k quarter turns.
Reflections are NOT identified: an edge list and its mirror image stay
distinct.

Provides:
- rotations(edges): the 4 left rotations, k = 0..3
- edge_signature(edge): canonical JSON [[size, offset], ...] of one edge
- canonical_key(edges): lex-min rotation signature
"""

from typing import Iterator, Sequence

from .order_hash import canonical_json, lex_min
from .types import Edge, Segment, sorted_edge

# Joins per-edge signatures into one rotation signature
EDGE_SEPARATOR = ";"


def rotations(edges: Sequence[Edge]) -> Iterator[tuple[Edge, ...]]:
    """Yield every cyclic left rotation of edges, starting with the identity."""
    edges = tuple(edges)
    for k in range(len(edges)):
        yield edges[k:] + edges[:k]


def edge_signature(edge: Sequence[Segment]) -> str:
    """Serialize an edge as [[size, offset], ...] sorted by (offset, size)."""
    return canonical_json([[seg.size, seg.offset] for seg in sorted_edge(edge)])


def canonical_key(edges: Sequence[Edge]) -> str:
    """
    Rotation-invariant key for an edge list.

    Builds the signature of each of the cyclic rotations and returns the
    lexicographically smallest one. Two edge lists get the same key iff one
    is a rotation of the other (segment order within an edge is ignored).

    Raises:
        ValueError: If edges is empty
    """
    signatures = (
        EDGE_SEPARATOR.join(edge_signature(e) for e in rot)
        for rot in rotations(edges)
    )
    return lex_min(signatures)
