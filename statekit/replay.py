"""
Action log replay.

An action log is a JSONL file with one action object per line:

    {"type": "todos/added", "payload": {"text": "write tests"}}

Replaying the same log into a fresh store always yields the same state.
"""

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Optional

from .core.canonical import canonical_json_bytes
from .core.errors import ActionLogError


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Store state after the last applied action
        applied: Number of actions dispatched
    """
    state: Any
    applied: int


def read_actions(path: str) -> Iterator[Dict[str, Any]]:
    """
    Read actions from a JSONL file.

    Yields:
        Action dicts in file order

    Raises:
        ActionLogError: If a line is not a JSON object with a "type" key
    """
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                action = json.loads(line)
            except json.JSONDecodeError as e:
                raise ActionLogError(f"{path}:{lineno}: invalid JSON: {e.msg}") from e
            if not isinstance(action, dict) or "type" not in action:
                raise ActionLogError(f'{path}:{lineno}: expected an object with a "type" key')
            yield action


def replay(store: Any, actions: Iterable[Any], to_index: Optional[int] = None) -> ReplayResult:
    """
    Dispatch actions into a store in order.

    Args:
        store: Store (or enhanced store) to dispatch into
        actions: Actions to dispatch
        to_index: Stop after this zero-based index (inclusive, None = all)

    Returns:
        ReplayResult with final state and count

    Raises:
        ValueError: If to_index is negative
    """
    if to_index is not None and to_index < 0:
        raise ValueError(f"to_index must be >= 0, got {to_index}")

    count = 0
    for index, action in enumerate(actions):
        if to_index is not None and index > to_index:
            break
        store.dispatch(action)
        count += 1

    return ReplayResult(state=store.get_state(), applied=count)


def compute_state_hash(state: Any) -> str:
    """
    SHA-256 hex digest of the canonical JSON form of state.

    Raises:
        TypeError: If state has non-string keys or values JSON cannot encode
    """
    return hashlib.sha256(canonical_json_bytes(state)).hexdigest()
