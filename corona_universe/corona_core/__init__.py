"""
corona_core: Core primitives for corona enumeration.

Provides:
- types: Segment, Edge, Corona, Reason, ValidationResult
- order_hash: Canonical JSON, deterministic hashing, lex-min
- walks: Edge walk generation (constrained depth-first search)
- validator: Structural, geometric and corner-gap rules
- canonical: Rotation-canonical keys for edge lists
- enumeration: Unique corona catalogs per center size
- codec: Compact text notation
"""

from .canonical import canonical_key
from .codec import CompactParseError, from_compact, to_compact
from .enumeration import enumerate_unique_coronas, iter_unique_coronas
from .types import (
    DEFAULT_ALLOWED_SIZES,
    Corona,
    Edge,
    Reason,
    Segment,
    ValidationResult,
)
from .validator import validate
from .walks import generate_edge_walks

__all__ = [
    "DEFAULT_ALLOWED_SIZES",
    "CompactParseError",
    "Corona",
    "Edge",
    "Reason",
    "Segment",
    "ValidationResult",
    "canonical_key",
    "enumerate_unique_coronas",
    "from_compact",
    "generate_edge_walks",
    "iter_unique_coronas",
    "to_compact",
    "validate",
]
