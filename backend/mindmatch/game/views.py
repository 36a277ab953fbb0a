from __future__ import annotations

from .models import Room
from .prompts import resolve_theme


def _players(room: Room) -> list[dict]:
    # Do NOT expose session ids or any answer text.
    return [
        {
            "id": p.id,
            "name": p.name,
            "ready": p.ready,
            "connected": p.connected,
            "score": p.score,
        }
        for p in room.players.values()
    ]


def player_state(room: Room) -> dict:
    """Snapshot safe for every client in the room."""
    with room.lock:
        game = room.game
        return {
            "roomCode": room.code,
            "theme": room.theme,
            "themeLabel": resolve_theme(room.theme).label,
            "maxPlayers": room.max_players,
            "phase": game.phase,
            "players": _players(room),
            "round": game.round,
            "question": game.question,
            "questionsPerRound": game.questions_per_round,
            "submissionsCount": len(game.submissions),
            "revealOrder": list(game.reveal_order),
            "revealIndex": game.reveal_index,
        }


def _reveal_data(room: Room) -> dict | None:
    game = room.game
    if game.phase != "REVEAL" or game.reveal_index >= len(game.reveal_order):
        return None

    target_id = game.reveal_order[game.reveal_index]
    target = room.players.get(target_id)
    target_sub = game.submissions.get(target_id)

    predictors = []
    for p in room.players.values():
        if p.id == target_id:
            continue
        sub = game.submissions.get(p.id)
        predictors.append(
            {
                "predictorId": p.id,
                "predictorName": p.name,
                "predicted": sub.predictions.get(target_id, "") if sub else "",
                "match": game.match_map.get(target_id, {}).get(p.id, False),
            }
        )

    return {
        "targetId": target_id,
        "targetName": target.name if target else "",
        "targetAnswer": target_sub.self_answer if target_sub else "",
        "predictors": predictors,
    }


def host_state(room: Room) -> dict:
    """Player snapshot plus prompt, who submitted, and the current reveal."""
    with room.lock:
        payload = player_state(room)
        payload["prompt"] = room.game.prompt
        # Ids only, never the answers themselves.
        payload["submittedIds"] = list(room.game.submissions.keys())
        payload["revealData"] = _reveal_data(room)
        return payload
