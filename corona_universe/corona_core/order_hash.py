"""
Deterministic ordering and hashing helpers.

Provides:
- canonical_json: compact, sorted-key JSON text for any JSON-serializable value
- hash64: SHA-256 of canonical JSON truncated to a 64-bit int
- lex_min: lexicographically minimal item under a key

All functions are deterministic and stable across runs.
No use of Python's built-in hash() (salted per process for str).
"""

import hashlib
import json
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")


def canonical_json(obj: Any) -> str:
    """
    Serialize obj to canonical JSON (sorted keys, no whitespace).

    Examples:
        >>> canonical_json([[2, 0], [3, 2]])
        '[[2,0],[3,2]]'
        >>> canonical_json({"b": 1, "a": 2})
        '{"a":2,"b":1}'
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"))


def hash64(obj: Any) -> int:
    """
    Deterministic 64-bit hash using SHA-256 on canonical JSON.

    Args:
        obj: Any JSON-serializable Python object

    Returns:
        64-bit integer hash (0 to 2^64-1), first 8 digest bytes big-endian

    Examples:
        >>> hash64([1, 2, 3]) == hash64([1, 2, 3])
        True
        >>> hash64({"a": 1, "b": 2}) == hash64({"b": 2, "a": 1})
        True
    """
    sha = hashlib.sha256(canonical_json(obj).encode("utf-8"))
    return int.from_bytes(sha.digest()[:8], byteorder="big", signed=False)


def lex_min(items: Iterable[T], key: Callable[[T], Any] = lambda x: x) -> T:
    """
    Return the lexicographically minimal item.

    Ties keep the first item encountered (min() is stable).

    Raises:
        ValueError: If items is empty
    """
    items_list = list(items)
    if not items_list:
        raise ValueError("lex_min requires non-empty iterable")

    return min(items_list, key=key)
