"""
Device models returned by an NVR session.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


@dataclass(frozen=True)
class Entity:
    """A logical entity (camera head, input, output) exposed by a device."""

    logical_id: int
    name: Optional[str] = None


@dataclass(frozen=True)
class Device:
    """A device attached to the NVR and whether the NVR can currently reach it."""

    entities: List[Entity] = field(default_factory=list)
    connected: bool = False

    @property
    def logical_id(self) -> Optional[int]:
        """Logical id of the primary entity, used as the snapshot key."""
        if not self.entities:
            return None
        return self.entities[0].logical_id


class LoginResult(IntEnum):
    """Result of a login attempt. Anything other than SUCCESS is a failure."""

    SUCCESS = 0
    INVALID_USERNAME = 1
    INVALID_CREDENTIALS = 2
    ACCOUNT_DISABLED = 3
    CONNECTION_ERROR = 4
    UNKNOWN_ERROR = 5
