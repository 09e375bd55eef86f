"""
Compact text notation for coronas.

Format: center|e0|e1|e2|e3, each edge a comma-separated list of size^offset
tokens sorted by (offset, size). Example: "2|1^0,2^1|3^0|4^0|3^0".

Parsing is purely syntactic. Non-positive centers, negative offsets and other
geometric nonsense parse fine and are left for validate() to reject.
"""

import re

from .types import NUM_EDGES, Corona, Segment, sorted_edge

# ASCII digits only; int() would also accept other Unicode digits
SEGMENT_PATTERN = re.compile(r"^(\d+)\^(-?\d+)$", re.ASCII)
CENTER_PATTERN = re.compile(r"^-?\d+$", re.ASCII)


class CompactParseError(ValueError):
    """Text cannot be interpreted as a corona-shaped value."""


def to_compact(corona: Corona) -> str:
    """Render a corona in compact notation."""
    parts = [str(corona.center)]
    for edge in corona.edges:
        parts.append(",".join(str(seg) for seg in sorted_edge(edge)))
    return "|".join(parts)


def from_compact(text: str) -> Corona:
    """
    Parse compact notation into a Corona (no validation).

    All whitespace is ignored.

    Raises:
        CompactParseError: wrong number of fields, bad center or bad token
    """
    parts = re.sub(r"\s", "", text).split("|")
    if len(parts) != NUM_EDGES + 1:
        raise CompactParseError("Expected center + 4 edges")

    center_txt = parts[0]
    if not CENTER_PATTERN.match(center_txt):
        raise CompactParseError(f"Bad center: {center_txt}")

    edges = []
    for edge_txt in parts[1:]:
        segs = []
        for tok in edge_txt.split(","):
            m = SEGMENT_PATTERN.match(tok)
            if not m:
                raise CompactParseError(f"Bad segment token: {tok}")
            segs.append(Segment(size=int(m.group(1)), offset=int(m.group(2))))
        edges.append(segs)

    return Corona(int(center_txt), edges)
