from datetime import datetime, timedelta, timezone

import pytest
from chatlayout.config import LayoutConfig
from chatlayout.state import (
    Channel,
    ChannelSelection,
    InputBuffer,
    Member,
    Message,
    Role,
    Snapshot,
)

NAMES = {"h1": "Alice", "h2": "Bob", "h3": "Carol"}


@pytest.fixture
def utc_config():
    """Default theme with timestamps rendered in UTC."""
    return LayoutConfig(timezone=timezone.utc)


@pytest.fixture
def messages():
    """Five messages a minute apart, oldest first."""
    start = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    senders = ["Alice Smith", "Bob", "Alice Smith", "Carol Jones", "Bob"]
    return [
        Message(sender=sender, body=f"message {i}", arrived_at=start + timedelta(minutes=i))
        for i, sender in enumerate(senders)
    ]


@pytest.fixture
def members():
    return [
        Member("h1", Role.ADMIN),
        Member("h2", Role.MEMBER),
        Member("h3", Role.INVITED),
    ]


@pytest.fixture
def snapshot(messages, members):
    """Two channels, the first one selected and carrying members."""
    channels = [
        Channel(
            id="c1",
            name="general",
            messages=messages,
            members=members,
            unread_messages=2,
            description="General chat",
        ),
        Channel(id="c2", name="random"),
    ]
    return Snapshot(
        channels=channels,
        selection=ChannelSelection(selected=0),
        input=InputBuffer(text="hello", cursor=5),
        presences={"h1": True, "h2": False},
        resolve_name=lambda h: NAMES.get(h, h),
    )
