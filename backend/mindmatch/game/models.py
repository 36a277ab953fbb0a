from __future__ import annotations

from dataclasses import dataclass, field
from threading import RLock
from typing import Literal

from .scoring import ScoreLedger


Phase = Literal["LOBBY", "ANSWERING", "REVEAL", "SCOREBOARD"]


@dataclass
class Player:
    id: str
    name: str
    ready: bool = False
    connected: bool = True
    score: int = 0
    session_id: str = ""


@dataclass
class Submission:
    self_answer: str
    predictions: dict[str, str] = field(default_factory=dict)


@dataclass
class GameState:
    phase: Phase = "LOBBY"
    round: int = 1
    # 1..questions_per_round while a round runs, 0 in the lobby
    question: int = 0
    questions_per_round: int = 10
    prompt: str | None = None
    prompt_pool: list[str] = field(default_factory=list)
    submissions: dict[str, Submission] = field(default_factory=dict)
    reveal_order: list[str] = field(default_factory=list)
    reveal_index: int = 0
    # target_id -> predictor_id -> matched
    match_map: dict[str, dict[str, bool]] = field(default_factory=dict)
    scored_pairs: ScoreLedger = field(default_factory=ScoreLedger)


@dataclass
class Room:
    code: str
    theme: str
    max_players: int
    players: dict[str, Player] = field(default_factory=dict)
    game: GameState = field(default_factory=GameState)
    lock: RLock = field(default_factory=RLock, repr=False, compare=False)
