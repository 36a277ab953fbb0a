from __future__ import annotations

import logging
import random
import uuid
from threading import RLock

from ..config import Config
from .errors import EMPTY_NAME, ROOM_FULL, ROOM_NOT_FOUND, JoinRejected
from .models import Player, Room
from .prompts import resolve_theme


logger = logging.getLogger(__name__)

# No 0/O, 1/I.
ROOM_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"

# Guards the code -> room mapping only; room state has its own lock.
_lock = RLock()
_rooms: dict[str, Room] = {}


def generate_room_code(length: int | None = None) -> str:
    return "".join(random.choices(ROOM_CODE_ALPHABET, k=length or Config.ROOM_CODE_LENGTH))


def normalize_code(code: str | None) -> str:
    return str(code or "").strip().upper()


def create_room(theme: str | None = None, max_players: int | None = None) -> Room:
    resolved = resolve_theme(theme)

    cap = resolved.max_players
    if isinstance(max_players, int) and not isinstance(max_players, bool):
        cap = min(max(2, max_players), Config.MAX_PLAYERS_LIMIT)

    with _lock:
        code = generate_room_code()
        while code in _rooms:
            code = generate_room_code()

        room = Room(code=code, theme=resolved.key, max_players=cap)
        room.game.questions_per_round = Config.QUESTIONS_PER_ROUND
        _rooms[code] = room

    logger.info("[room-create] code=%s theme=%s max_players=%s", code, resolved.key, cap)
    return room


def get_room(code: str | None) -> Room | None:
    with _lock:
        return _rooms.get(normalize_code(code))


def list_rooms() -> list[Room]:
    with _lock:
        return list(_rooms.values())


def clean_name(raw: str | None) -> str:
    n = "".join(ch for ch in str(raw or "") if ord(ch) >= 32 and ord(ch) != 127)
    return n.strip()[: Config.NAME_MAX_LEN].strip()


def _new_player_id(room: Room) -> str:
    pid = f"p_{uuid.uuid4().hex[:8]}"
    while pid in room.players:
        pid = f"p_{uuid.uuid4().hex[:8]}"
    return pid


def add_player(room: Room, name: str | None, session_id: str = "") -> Player:
    """Adds a new player to ``room`` or raises JoinRejected."""
    with room.lock:
        if len(room.players) >= room.max_players:
            raise JoinRejected(ROOM_FULL)

        n = clean_name(name)
        if not n:
            raise JoinRejected(EMPTY_NAME)

        player = Player(id=_new_player_id(room), name=n, session_id=session_id)
        room.players[player.id] = player

    logger.info("[join] room=%s player=%s name=%r", room.code, player.id, player.name)
    return player


def join_room(code: str | None, name: str | None, session_id: str = "") -> tuple[Room, Player]:
    room = get_room(code)
    if room is None:
        raise JoinRejected(ROOM_NOT_FOUND)
    return room, add_player(room, name, session_id=session_id)


def owns_player(room: Room, player_id: str | None, session_id: str | None) -> bool:
    with room.lock:
        player = room.players.get(player_id or "")
        if player is None or not session_id:
            return False
        return player.session_id == session_id
