from __future__ import annotations


ROOM_NOT_FOUND = "room_not_found"
ROOM_FULL = "room_full"
EMPTY_NAME = "empty_name"


class JoinRejected(Exception):
    """Raised when a player cannot join a room; ``reason`` is a wire error code."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
