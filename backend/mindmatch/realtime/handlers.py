from __future__ import annotations

import logging
from typing import Any

from flask import request
from flask_socketio import SocketIO, emit, join_room, rooms

from ..game import machine, service, views
from ..game.errors import ROOM_NOT_FOUND, JoinRejected


logger = logging.getLogger(__name__)

# sid -> (room_code, player_id) for the player created by that socket
_session_players: dict[str, tuple[str, str]] = {}


def host_channel(room_code: str) -> str:
    return f"{room_code}-host"


def _room_code(payload: dict) -> str:
    return service.normalize_code(payload.get("roomCode"))


def _reject(error: str) -> dict:
    emit("room:error", {"error": error})
    return {"ok": False, "error": error}


def broadcast_room_state(socketio: SocketIO, room_code: str) -> None:
    room = service.get_room(room_code)
    if not room:
        return

    # Emit under the room lock so subscribers never see snapshots out of order.
    with room.lock:
        socketio.emit("host:state", views.host_state(room), to=host_channel(room.code))
        socketio.emit("room:state", views.player_state(room), to=room.code)


def register_socketio_handlers(socketio: SocketIO) -> None:
    def _safe_broadcast_room_state(room_code: str) -> None:
        try:
            broadcast_room_state(socketio, room_code)
        except Exception:
            logger.exception("[broadcast-failed] room=%s", room_code)

    def _resolve(data: Any):
        payload = data if isinstance(data, dict) else {}
        room_code = _room_code(payload)
        if not room_code:
            return payload, None, _reject("invalid_payload")
        room = service.get_room(room_code)
        if not room:
            return payload, None, _reject(ROOM_NOT_FOUND)
        return payload, room, None

    def _resolve_as_host(data: Any):
        payload, room, error = _resolve(data)
        if error:
            return payload, None, error
        if host_channel(room.code) not in rooms():
            logger.debug("[only-host] sid=%s room=%s", request.sid, room.code)
            return payload, None, _reject("only_host")
        return payload, room, None

    def _resolve_as_player(data: Any):
        payload, room, error = _resolve(data)
        if error:
            return payload, None, None, error
        player_id = str(payload.get("playerId", "")).strip()
        if not service.owns_player(room, player_id, request.sid):
            logger.debug("[not-your-player] sid=%s room=%s player=%s", request.sid, room.code, player_id)
            return payload, None, None, _reject("not_your_player")
        return payload, room, player_id, None

    @socketio.on("host:subscribe")
    def host_subscribe(data):
        _, room, error = _resolve(data)
        if error:
            return error

        join_room(host_channel(room.code))
        _safe_broadcast_room_state(room.code)
        return {"ok": True, "roomCode": room.code}

    @socketio.on("room:join")
    def room_join(data):
        payload = data if isinstance(data, dict) else {}
        room_code = _room_code(payload)
        if not room_code:
            return _reject("invalid_payload")

        # One player per socket.
        if request.sid in _session_players:
            return _reject("not_allowed")

        try:
            room, player = service.join_room(room_code, payload.get("name"), session_id=request.sid)
        except JoinRejected as exc:
            logger.debug("[join-rejected] room=%s reason=%s", room_code, exc.reason)
            return _reject(exc.reason)

        _session_players[request.sid] = (room.code, player.id)
        join_room(room.code)

        joined = {"playerId": player.id, "roomCode": room.code, "name": player.name}
        emit("room:joined", joined)
        _safe_broadcast_room_state(room.code)
        return {"ok": True, **joined}

    @socketio.on("player:ready")
    def player_ready(data):
        payload, room, player_id, error = _resolve_as_player(data)
        if error:
            return error

        machine.set_ready(room, player_id, bool(payload.get("ready")))
        _safe_broadcast_room_state(room.code)
        return {"ok": True}

    @socketio.on("game:start")
    def game_start(data):
        _, room, error = _resolve_as_host(data)
        if error:
            return error

        if not machine.start_round(room):
            return _reject("not_allowed")

        _safe_broadcast_room_state(room.code)
        return {"ok": True}

    @socketio.on("answer:submit")
    def answer_submit(data):
        payload, room, player_id, error = _resolve_as_player(data)
        if error:
            return error

        ok = machine.submit_answer(
            room,
            player_id,
            payload.get("self"),
            payload.get("predictions"),
        )
        if not ok:
            return _reject("not_allowed")

        _safe_broadcast_room_state(room.code)
        return {"ok": True}

    @socketio.on("reveal:next")
    def reveal_next(data):
        _, room, error = _resolve_as_host(data)
        if error:
            return error

        if not machine.advance_reveal(room):
            return _reject("not_allowed")

        _safe_broadcast_room_state(room.code)
        return {"ok": True}

    @socketio.on("question:next")
    def question_next(data):
        _, room, error = _resolve_as_host(data)
        if error:
            return error

        if not machine.advance_question(room):
            return _reject("not_allowed")

        _safe_broadcast_room_state(room.code)
        return {"ok": True}

    @socketio.on("disconnect")
    def on_disconnect(reason=None):
        bound = _session_players.pop(request.sid, None)
        if not bound:
            return

        room_code, player_id = bound
        room = service.get_room(room_code)
        if not room:
            return

        if machine.disconnect_player(room, player_id):
            logger.info("[disconnect] room=%s player=%s reason=%s", room_code, player_id, reason)
            _safe_broadcast_room_state(room_code)
