"""
Action model.

Actions are opaque records with a `type` discriminator. Both mappings
({"type": ...}) and objects with a `type` attribute are accepted.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional


@dataclass(frozen=True)
class Action(Mapping):
    """
    Immutable action record.

    Fields:
        type: Action type (e.g., "todos/added")
        payload: Action-specific data
        meta: Metadata (source, reason, etc.)

    Also readable as a mapping, so reducers may use either action.type or
    action["type"]. The private actions sent by the store are Action records.
    """
    type: str
    payload: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "payload": dict(self.payload), "meta": dict(self.meta)}

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def __iter__(self) -> Iterator[str]:
        return iter(("type", "payload", "meta"))

    def __len__(self) -> int:
        return 3


def get_action_type(action: Any) -> Optional[Any]:
    """
    Read the type discriminator of an action.

    Returns:
        The action's type, or None if the action is None or carries no type
    """
    if action is None:
        return None
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)
