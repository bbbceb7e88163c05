"""
Reserved action types.

These are private. Reducers must not handle them; for any unknown action a
reducer returns its current state, or its initial state when given None.
"""

import random
import string

_ALPHABET = string.digits + string.ascii_lowercase


def random_suffix() -> str:
    """Short random base-36 string with dot-separated characters."""
    chars = random.choices(_ALPHABET, k=6)
    return ".".join(chars)


INIT = f"@@statekit/INIT{random_suffix()}"
REPLACE = f"@@statekit/REPLACE{random_suffix()}"


def probe_unknown_action() -> str:
    return f"@@statekit/PROBE_UNKNOWN_ACTION{random_suffix()}"
