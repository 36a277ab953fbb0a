from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..game import service, views
from ..game.errors import ROOM_NOT_FOUND

bp = Blueprint("rooms", __name__)


@bp.post("/rooms")
def create_room():
    data = request.get_json(silent=True) or {}

    theme = data.get("theme") if isinstance(data.get("theme"), str) else None
    max_players = data.get("maxPlayers") if isinstance(data.get("maxPlayers"), int) else None

    room = service.create_room(theme=theme, max_players=max_players)
    return (
        jsonify({"roomCode": room.code, "theme": room.theme, "maxPlayers": room.max_players}),
        201,
    )


@bp.get("/rooms/<code>")
def get_room(code: str):
    room = service.get_room(code)
    if not room:
        return jsonify({"error": ROOM_NOT_FOUND}), 404
    return jsonify(views.player_state(room))
