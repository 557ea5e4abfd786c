"""
Identifiers

Area, item, link and command names are plain strings compared
case-insensitively. Every container key goes through normalize() so the
comparison rule lives in one place.
"""

import sys
from typing import Iterable, List


def normalize(name: str) -> str:
    """Return the interned, case-folded form of an identifier."""
    return sys.intern(name.strip().lower())


def normalize_all(names: Iterable[str]) -> List[str]:
    """Normalize a sequence of identifiers, dropping duplicates but keeping order."""
    seen = set()
    result = []
    for name in names:
        key = normalize(name)
        if key and key not in seen:
            seen.add(key)
            result.append(key)
    return result


def same(a: str, b: str) -> bool:
    """Check whether two identifiers name the same thing."""
    return normalize(a) == normalize(b)
