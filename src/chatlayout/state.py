"""Read-only application state consumed by the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Mapping


class Role(Enum):
    ADMIN = "admin"
    MEMBER = "member"
    INVITED = "invited"


@dataclass(frozen=True)
class Message:
    sender: str
    body: str
    arrived_at: datetime


@dataclass(frozen=True)
class Member:
    hash: str
    role: Role = Role.MEMBER


@dataclass
class Channel:
    id: str
    name: str
    messages: list[Message] = field(default_factory=list)
    members: list[Member] = field(default_factory=list)
    unread_messages: int = 0
    description: str = ""
    display_name: str | None = None

    @property
    def best_name(self) -> str:
        """The name shown in the channel list."""
        return self.display_name or self.name


@dataclass(frozen=True)
class ChannelSelection:
    """Selected channel index plus the channel list scroll offset."""

    selected: int | None = None
    offset: int = 0


@dataclass(frozen=True)
class InputBuffer:
    """Outgoing message being typed; ``cursor`` counts characters."""

    text: str = ""
    cursor: int = 0

    @property
    def clamped_cursor(self) -> int:
        return max(0, min(self.cursor, len(self.text)))


def _unknown_name(member_hash: str) -> str:
    return member_hash


@dataclass
class Snapshot:
    """Everything a redraw reads, borrowed from the state store."""

    channels: list[Channel] = field(default_factory=list)
    selection: ChannelSelection = field(default_factory=ChannelSelection)
    input: InputBuffer = field(default_factory=InputBuffer)
    presences: Mapping[str, bool] = field(default_factory=dict)
    resolve_name: Callable[[str], str] = _unknown_name

    @property
    def selected_channel(self) -> Channel | None:
        idx = self.selection.selected
        if idx is None or not 0 <= idx < len(self.channels):
            return None
        return self.channels[idx]

    def is_present(self, member_hash: str) -> bool:
        return self.presences.get(member_hash) is True
