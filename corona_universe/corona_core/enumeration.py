"""
Exhaustive enumeration of unique coronas for a center size.

Every ordered choice of 4 edge walks (full cartesian product, edges chosen
independently per side) is validated; survivors are deduplicated by their
rotation-canonical key, keeping the first one seen.

Iteration order is lexicographic over (e0, e1, e2, e3) in walk-generation
order, so the catalog is deterministic.
"""

from itertools import product
from typing import Iterator, Sequence

from .canonical import canonical_key
from .types import DEFAULT_ALLOWED_SIZES, NUM_EDGES, Corona
from .validator import validate
from .walks import generate_edge_walks


def iter_unique_coronas(
    center_size: int, allowed_sizes: Sequence[int] = DEFAULT_ALLOWED_SIZES
) -> Iterator[Corona]:
    """Yield unique valid coronas lazily, in first-encountered order."""
    walks = generate_edge_walks(center_size, allowed_sizes)
    seen: set[str] = set()

    for edges in product(walks, repeat=NUM_EDGES):
        corona = Corona(center_size, edges)
        if not validate(corona, allowed_sizes).ok:
            continue

        key = canonical_key(corona.edges)
        if key in seen:
            continue

        seen.add(key)
        yield corona


def enumerate_unique_coronas(
    center_size: int, allowed_sizes: Sequence[int] = DEFAULT_ALLOWED_SIZES
) -> list[Corona]:
    """
    Catalog of coronas for one center size, unique up to cyclic rotation.

    Examples:
        >>> len(enumerate_unique_coronas(1))
        24
        >>> len(enumerate_unique_coronas(2))
        34
    """
    return list(iter_unique_coronas(center_size, allowed_sizes))
