"""
Tests for bundled middleware.
"""

import logging

from statekit.core.combine import combine_reducers
from statekit.core.middleware import apply_middleware
from statekit.interceptors import create_logger_middleware
from statekit.store import create_store


def counter(state, action):
    if state is None:
        return 0
    if action["type"] == "increment":
        return state + 1
    return state


def test_logger_middleware_logs_action_and_next_state(caplog):
    """Logs the action type, then the canonical state after it."""
    store = create_store(
        combine_reducers({"b": counter, "a": counter}),
        enhancer=apply_middleware(create_logger_middleware()),
    )

    with caplog.at_level(logging.INFO, logger="statekit.interceptors"):
        result = store.dispatch({"type": "increment"})

    assert result == {"type": "increment"}
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["action increment", 'next state {"a":1,"b":1}']


def test_logger_middleware_custom_logger_and_level(caplog):
    logger = logging.LoggerAdapter(logging.getLogger("custom.audit"), {"trace_id": "t-1"})
    store = create_store(
        counter,
        enhancer=apply_middleware(create_logger_middleware(logger, level=logging.DEBUG)),
    )

    with caplog.at_level(logging.DEBUG, logger="custom.audit"):
        store.dispatch({"type": "increment"})

    records = [r for r in caplog.records if r.name == "custom.audit"]
    assert [r.levelno for r in records] == [logging.DEBUG, logging.DEBUG]
    assert records[0].trace_id == "t-1"


def test_logger_middleware_non_json_state(caplog):
    """States canonical JSON cannot encode are logged by repr."""
    def by_id(state, action):
        if state is None:
            return {}
        if action["type"] == "put":
            return {**state, action["id"]: "x"}
        return state

    store = create_store(by_id, enhancer=apply_middleware(create_logger_middleware()))
    with caplog.at_level(logging.INFO, logger="statekit.interceptors"):
        store.dispatch({"type": "put", "id": 7})

    assert store.get_state() == {7: "x"}
    assert caplog.records[-1].getMessage() == "next state {7: 'x'}"
