"""
Corona catalogs: generation, JSON persistence and summaries.

A catalog holds the unique coronas for several center sizes in compact
notation, plus generation metadata:

    {
      "metadata": {
        "generated": "2024-01-01T00:00:00",
        "centerSizes": [1, 2],
        "allowedSizes": [1, 2, 3, 4],
        "counts": {"1": 24, "2": 34},
        "totalCoronas": 58,
        "fingerprints": {"1": <hash64>, "2": <hash64>}
      },
      "coronas": {"1": ["1|2^0|2^0|2^0|2^0", ...], "2": [...]}
    }

Loading never raises: a missing or corrupt file is logged and yields an
empty result so callers can carry on.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from corona_core.codec import from_compact, to_compact
from corona_core.enumeration import enumerate_unique_coronas
from corona_core.order_hash import hash64
from corona_core.types import DEFAULT_ALLOWED_SIZES, Corona, sorted_edge

logger = logging.getLogger(__name__)

DEFAULT_CENTER_SIZES = (1, 2, 3, 4)
DEFAULT_CATALOG_FILE = "valid-coronas.json"

# Anything a malformed catalog document can raise while being read
LOAD_ERRORS = (OSError, ValueError, KeyError, TypeError, AttributeError)


def build_catalog(
    center_sizes: Sequence[int] = DEFAULT_CENTER_SIZES,
    allowed_sizes: Sequence[int] = DEFAULT_ALLOWED_SIZES,
) -> Dict[str, Any]:
    """
    Enumerate unique coronas for each center size.

    Args:
        center_sizes: Center sizes to cover, in output order
        allowed_sizes: Permitted segment sizes

    Returns:
        Catalog dictionary (JSON-serializable)
    """
    coronas: Dict[str, List[str]] = {}
    counts: Dict[str, int] = {}
    fingerprints: Dict[str, int] = {}

    for center in center_sizes:
        logger.info(f"Enumerating center = {center}...")
        compacts = [to_compact(c) for c in enumerate_unique_coronas(center, allowed_sizes)]
        logger.info(f"  Found {len(compacts)} unique coronas")

        coronas[str(center)] = compacts
        counts[str(center)] = len(compacts)
        fingerprints[str(center)] = hash64(compacts)

    metadata = {
        "generated": datetime.now().isoformat(),
        "centerSizes": list(center_sizes),
        "allowedSizes": list(allowed_sizes),
        "counts": counts,
        "totalCoronas": sum(counts.values()),
        "fingerprints": fingerprints,
    }

    return {"metadata": metadata, "coronas": coronas}


def save_catalog(catalog: Dict[str, Any], path: Path) -> None:
    """
    Save catalog to a JSON file.

    Args:
        catalog: Catalog dictionary from build_catalog()
        path: Output file; parent directories are created
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(catalog, f, indent=2)

    logger.info(f"Saved {catalog['metadata']['totalCoronas']} coronas to {path}")


def load_catalog(path: Path) -> Optional[Dict[str, Any]]:
    """Read a catalog document, or None (logged) if missing or corrupt."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Error loading catalog from {path}: {type(e).__name__}: {e}")
        return None

    if not isinstance(data, dict):
        logger.error(f"Error loading catalog from {path}: expected a JSON object")
        return None

    return data


def _compacts_for(data: Dict[str, Any], center: Optional[int]) -> List[str]:
    entries = data["coronas"]

    # Single-center document: {"center": 1, "count": 24, "coronas": [...]}
    if isinstance(entries, list):
        if center is not None and data.get("center") != center:
            logger.warning(f"Catalog holds center {data.get('center')}, not {center}")
            return []
        return entries

    if center is not None:
        return entries.get(str(center), [])

    compacts: List[str] = []
    for key in sorted(entries, key=int):
        compacts.extend(entries[key])
    return compacts


def load_coronas(path: Path, center: Optional[int] = None) -> List[Corona]:
    """
    Load coronas from a catalog file.

    Args:
        path: Catalog JSON file
        center: Center size to load; None loads every center in ascending order

    Returns:
        Parsed (unvalidated) coronas; [] if the file is missing, corrupt or
        contains an entry that does not parse
    """
    data = load_catalog(path)
    if data is None:
        return []

    coronas = coronas_from_catalog(data, center, source=path)
    return coronas if coronas is not None else []


def coronas_from_catalog(
    data: Dict[str, Any], center: Optional[int] = None, source: Any = "<catalog>"
) -> Optional[List[Corona]]:
    """
    Parse the coronas held by an already-loaded catalog document.

    Returns:
        Parsed (unvalidated) coronas, or None (logged) if the document has an
        unexpected shape or an entry that does not parse
    """
    try:
        return [from_compact(text) for text in _compacts_for(data, center)]
    except LOAD_ERRORS as e:
        logger.error(f"Error loading coronas from {source}: {type(e).__name__}: {e}")
        return None


def summarize_coronas(coronas: Sequence[Corona]) -> Dict[str, Any]:
    """
    Summary statistics over a list of coronas.

    Returns:
        - count: number of coronas
        - size_histogram: segment size -> number of segments with that size
        - mean_segments_per_edge: average edge length in segments
        - max_overhang: largest coverage past the center over all edges
    """
    edges = [(c.center, sorted_edge(e)) for c in coronas for e in c.edges]
    if not edges:
        return {
            "count": len(coronas),
            "size_histogram": {},
            "mean_segments_per_edge": 0.0,
            "max_overhang": 0,
        }

    sizes = np.array([seg.size for _, segs in edges for seg in segs], dtype=np.int64)
    lengths = np.array([len(segs) for _, segs in edges], dtype=np.int64)
    overhangs = np.array(
        [segs[-1].end - center for center, segs in edges if segs], dtype=np.int64
    )

    histogram: Dict[int, int] = {}
    if sizes.size:
        counts = np.bincount(sizes[sizes >= 0])
        histogram = {int(s): int(n) for s, n in enumerate(counts) if n > 0}

    return {
        "count": len(coronas),
        "size_histogram": histogram,
        "mean_segments_per_edge": float(lengths.mean()),
        "max_overhang": int(overhangs.max()) if overhangs.size else 0,
    }
