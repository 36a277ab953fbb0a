"""Per-room game lifecycle.

LOBBY -> ANSWERING -> REVEAL -> SCOREBOARD -> (ANSWERING | LOBBY)

Every operation takes ``room.lock`` for its whole duration and returns True
when it changed the room, False when it was a no-op. Invalid calls for the
current phase never raise.
"""

from __future__ import annotations

import logging
from typing import Any

from ..config import Config
from .models import Room, Submission
from .prompts import shuffled_prompts
from .scoring import award_points, build_match_map


logger = logging.getLogger(__name__)


def clean_text(value: Any, max_len: int | None = None) -> str:
    """Trimmed, truncated text; falsy values (None, False, 0) become ""."""
    limit = max_len if max_len is not None else Config.ANSWER_MAX_LEN
    if not value:
        return ""
    return str(value).strip()[:limit]


def _start_question_locked(room: Room) -> None:
    game = room.game
    if not game.prompt_pool:
        game.prompt_pool = shuffled_prompts(room.theme)

    game.prompt = game.prompt_pool.pop(0)
    game.phase = "ANSWERING"

    game.submissions = {}
    game.reveal_order = list(room.players.keys())
    game.reveal_index = 0

    game.match_map = {}
    game.scored_pairs.clear()


def set_ready(room: Room, player_id: str, ready: bool) -> bool:
    with room.lock:
        player = room.players.get(player_id)
        if player is None:
            return False
        player.ready = bool(ready)
        return True


def disconnect_player(room: Room, player_id: str) -> bool:
    """Flags the player as gone. Their score and any stored submission stay."""
    with room.lock:
        player = room.players.get(player_id)
        if player is None:
            return False
        player.connected = False
        player.ready = False
        return True


def can_start_round(room: Room) -> bool:
    with room.lock:
        if room.game.phase != "LOBBY":
            return False
        connected = [p for p in room.players.values() if p.connected]
        if len(connected) < 2:
            return False
        return all(p.ready for p in connected)


def start_round(room: Room) -> bool:
    with room.lock:
        if not can_start_round(room):
            return False

        for p in room.players.values():
            p.score = 0

        game = room.game
        game.question = 1
        game.questions_per_round = Config.QUESTIONS_PER_ROUND
        game.prompt_pool = shuffled_prompts(room.theme)

        _start_question_locked(room)

        logger.info(
            "[round-start] room=%s round=%s players=%s",
            room.code,
            game.round,
            len(room.players),
        )
        return True


def submit_answer(
    room: Room,
    player_id: str,
    self_answer: Any,
    predictions: Any,
) -> bool:
    with room.lock:
        game = room.game
        if game.phase != "ANSWERING":
            return False
        if player_id not in room.players:
            return False

        clean_predictions: dict[str, str] = {}
        raw = predictions if isinstance(predictions, dict) else {}
        for target_id, text in raw.items():
            if target_id == player_id or target_id not in room.players:
                continue
            clean_predictions[target_id] = clean_text(text)

        game.submissions[player_id] = Submission(
            self_answer=clean_text(self_answer),
            predictions=clean_predictions,
        )

        if len(game.submissions) == len(room.players):
            _complete_question_locked(room)

        return True


def _complete_question_locked(room: Room) -> None:
    game = room.game
    game.match_map = build_match_map(game)
    awarded = award_points(room)

    game.phase = "REVEAL"
    game.reveal_index = 0

    logger.info(
        "[question-complete] room=%s round=%s question=%s points=%s",
        room.code,
        game.round,
        game.question,
        awarded,
    )


def advance_reveal(room: Room) -> bool:
    with room.lock:
        game = room.game
        if game.phase != "REVEAL":
            return False

        game.reveal_index += 1
        if game.reveal_index >= len(game.reveal_order):
            game.reveal_index = len(game.reveal_order)
            game.phase = "SCOREBOARD"
        return True


def advance_question(room: Room) -> bool:
    with room.lock:
        game = room.game
        if game.phase != "SCOREBOARD":
            return False

        if game.question < game.questions_per_round:
            game.question += 1
            _start_question_locked(room)
            return True

        _end_round_locked(room)
        return True


def _end_round_locked(room: Room) -> None:
    game = room.game
    logger.info(
        "[round-end] room=%s round=%s scores=%s",
        room.code,
        game.round,
        {p.id: p.score for p in room.players.values()},
    )

    game.round += 1
    game.question = 0
    game.prompt = None
    game.prompt_pool = []
    game.submissions = {}
    game.reveal_order = []
    game.reveal_index = 0
    game.match_map = {}
    game.scored_pairs.clear()
    game.phase = "LOBBY"

    for p in room.players.values():
        p.ready = False
