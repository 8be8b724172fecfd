"""Event data passed to handlers of the guidelines-style msg_arrived event."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_message_id() -> str:
    return f"msg_{uuid.uuid4().hex[:8]}"


@dataclass(frozen=True)
class MsgArrivedEventArgs:
    """The message text of one msg_arrived event, with an id and send time."""

    message: str
    message_id: str = field(default_factory=_new_message_id)
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for logging."""
        return {
            "message_id": self.message_id,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }
