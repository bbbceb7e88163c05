"""
Canonical serialization of state and actions.

Used for stable state hashes and log output: identical state always
serializes to identical bytes, whatever the dict insertion order. States
that JSON cannot represent exactly (non-string keys, arbitrary objects) are
rejected with TypeError rather than coerced.
"""

import json
from dataclasses import asdict, is_dataclass
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert nested state to canonical form.

    Rules:
    - mapping keys sorted; keys must be strings
    - tuples converted to lists
    - dataclass instances converted to dicts

    Raises:
        TypeError: If a mapping has a non-string key
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return canonicalize(asdict(obj))
    if isinstance(obj, dict):
        for k in obj:
            if not isinstance(k, str):
                raise TypeError(f"Canonical keys must be str, got {type(k).__name__}: {k!r}")
        return {k: canonicalize(obj[k]) for k in sorted(obj)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Raises:
        TypeError: If obj contains keys or values JSON cannot encode
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    return canonical_json_bytes(obj).decode("utf-8")
