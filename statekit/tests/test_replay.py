"""
Tests for action log replay.

Critical: replaying the same log must produce identical state.
"""

import json

import pytest

from statekit.core.combine import combine_reducers
from statekit.core.errors import ActionLogError
from statekit.replay import compute_state_hash, read_actions, replay
from statekit.store import create_store


def counter(state, action):
    if state is None:
        return 0
    if action["type"] == "add":
        return state + action["n"]
    return state


def history(state, action):
    if state is None:
        return []
    if action["type"] == "add":
        return state + [action["n"]]
    return state


REDUCERS = {"counter": counter, "history": history}


def write_log(path, actions):
    with open(path, "w", encoding="utf-8") as f:
        for action in actions:
            f.write(json.dumps(action) + "\n")


def test_replay_determinism(tmp_path):
    """Replay same log many times must produce identical state hashes."""
    log_path = tmp_path / "actions.jsonl"
    write_log(log_path, [{"type": "add", "n": i} for i in range(10)])

    hashes = set()
    for _ in range(20):
        store = create_store(combine_reducers(REDUCERS))
        result = replay(store, read_actions(str(log_path)))
        hashes.add(compute_state_hash(result.state))

    assert len(hashes) == 1
    assert result.applied == 10
    assert result.state == {"counter": 45, "history": list(range(10))}


def test_replay_partial(tmp_path):
    """to_index stops after that action (inclusive)."""
    log_path = tmp_path / "actions.jsonl"
    write_log(log_path, [{"type": "add", "n": 1} for _ in range(5)])

    store = create_store(combine_reducers(REDUCERS))
    result = replay(store, read_actions(str(log_path)), to_index=2)
    assert result.applied == 3
    assert result.state["counter"] == 3


def test_read_actions_skips_blank_lines(tmp_path):
    log_path = tmp_path / "actions.jsonl"
    log_path.write_text('{"type": "a"}\n\n   \n{"type": "b"}\n', encoding="utf-8")
    assert [a["type"] for a in read_actions(str(log_path))] == ["a", "b"]


def test_read_actions_rejects_bad_lines(tmp_path):
    """Invalid JSON or missing type reports the line number."""
    bad_json = tmp_path / "bad.jsonl"
    bad_json.write_text('{"type": "a"}\nnot json\n', encoding="utf-8")
    with pytest.raises(ActionLogError, match=":2:"):
        list(read_actions(str(bad_json)))

    no_type = tmp_path / "no_type.jsonl"
    no_type.write_text('{"payload": 1}\n', encoding="utf-8")
    with pytest.raises(ActionLogError, match='"type"'):
        list(read_actions(str(no_type)))


def test_state_hash_ignores_key_order():
    """Hash depends on content, not insertion order."""
    assert compute_state_hash({"a": 1, "b": [1, 2]}) == compute_state_hash({"b": [1, 2], "a": 1})
    assert compute_state_hash({"a": 1}) != compute_state_hash({"a": 2})


def test_state_hash_rejects_non_string_keys():
    """Int and str keys must not collide, so non-string keys are rejected."""
    with pytest.raises(TypeError):
        compute_state_hash({1: "x"})
    with pytest.raises(TypeError):
        compute_state_hash({"nested": {2: "y"}})
    assert compute_state_hash({"1": "x"})


def test_state_hash_rejects_unencodable_values():
    """Objects are not coerced to their str() form."""
    class LooksLikeOne:
        def __str__(self):
            return "1"

    with pytest.raises(TypeError):
        compute_state_hash({"a": LooksLikeOne()})
    assert compute_state_hash({"a": [1]}) != compute_state_hash({"a": ["1"]})


def test_replay_rejects_negative_index():
    store = create_store(combine_reducers(REDUCERS))
    with pytest.raises(ValueError):
        replay(store, [{"type": "add", "n": 1}], to_index=-1)
    assert store.get_state() == {"counter": 0, "history": []}
