"""
Wire format for one command string.

The networked transports publish the whole envelope, so the id, timestamp
and origin travel with the command and the vehicle side can deduplicate and
acknowledge by `command_id`.
"""

import json
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Dict, Any


@dataclass(frozen=True)
class CommandEnvelope:
    command_id: str
    created_at: str
    origin: str
    payload: Dict[str, Any]

    def to_json(self) -> str:
        return json.dumps(asdict(self))


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


def wrap_command(command: str, drone_id: str, origin: str = "scratch") -> CommandEnvelope:
    """Fresh uuid4 id and UTC timestamp around `{"cmd", "drone_id"}`."""
    return CommandEnvelope(
        command_id=str(uuid.uuid4()),
        created_at=utc_timestamp(),
        origin=origin,
        payload={
            "cmd": command,
            "drone_id": drone_id
        }
    )
