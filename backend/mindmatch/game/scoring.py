from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .matching import matches

if TYPE_CHECKING:
    from .models import GameState, Room


logger = logging.getLogger(__name__)

ScoreKey = tuple[int, int, str, str]


class ScoreLedger:
    """Remembers which (round, question, predictor, target) pairs were scored."""

    def __init__(self) -> None:
        self._scored: set[ScoreKey] = set()

    def try_score(self, key: ScoreKey) -> bool:
        """Returns True the first time ``key`` is seen, False afterwards."""
        if key in self._scored:
            return False
        self._scored.add(key)
        return True

    def clear(self) -> None:
        self._scored.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._scored

    def __len__(self) -> int:
        return len(self._scored)


def _pairs(state: GameState):
    for target_id in state.reveal_order:
        for predictor_id in state.reveal_order:
            if predictor_id != target_id:
                yield predictor_id, target_id


def build_match_map(state: GameState) -> dict[str, dict[str, bool]]:
    """target_id -> predictor_id -> whether the prediction matched."""
    match_map: dict[str, dict[str, bool]] = {t: {} for t in state.reveal_order}
    for predictor_id, target_id in _pairs(state):
        target_sub = state.submissions.get(target_id)
        predictor_sub = state.submissions.get(predictor_id)
        target_self = target_sub.self_answer if target_sub else ""
        predicted = predictor_sub.predictions.get(target_id, "") if predictor_sub else ""
        match_map[target_id][predictor_id] = matches(target_self, predicted)
    return match_map


def award_points(room: Room) -> int:
    """Apply one point per matched pair that has not been scored yet.

    Returns the number of points handed out by this call.
    """
    state = room.game
    awarded = 0
    for predictor_id, target_id in _pairs(state):
        key = (state.round, state.question, predictor_id, target_id)
        if not state.scored_pairs.try_score(key):
            continue
        if not state.match_map.get(target_id, {}).get(predictor_id, False):
            continue
        predictor = room.players.get(predictor_id)
        if predictor is not None:
            predictor.score += 1
            awarded += 1

    logger.debug(
        "[score] room=%s round=%s question=%s awarded=%s",
        room.code,
        state.round,
        state.question,
        awarded,
    )
    return awarded
