from __future__ import annotations

import random
from dataclasses import dataclass

from ..config import Config


@dataclass(frozen=True)
class Theme:
    key: str
    label: str
    max_players: int
    prompts: tuple[str, ...]


DEFAULT_PROMPTS_NL = (
    "Ooit wil ik nog eens op vakantie naar …",
    "Als ik voor de rest van mijn leven nog één keuken mag kiezen, dan kies ik de … keuken",
    "Ik zou later graag willen wonen in …",
    "Mijn grootste guilty pleasure is …",
    "Ik kan echt niet zonder …",
    "Als ik morgen €1.000.000 win, dan koop ik als eerste …",
    "Mijn meest random talent is …",
    "Mijn grootste irritant in het verkeer is …",
    "Op een zonnige dag op het terras, bestel ik …",
    "Het eerste wat ik doe als ik wakker word is …",
    "Als ik een superkracht mag kiezen, dan is dat …",
    "Mijn favoriete genre muziek is …",
    "Mijn favoriete kleur is …",
)

DATING_PROMPTS_NL = (
    "Mijn ideale eerste date is …",
    "Het meest romantische wat iemand voor mij kan doen is …",
    "Op een lazy zondag wil ik het liefst …",
    "Mijn grootste turn-off is …",
    "Samen op reis zou ik het liefst gaan naar …",
    "Als we samen koken, maken we …",
    "Het liedje dat ik altijd meezing in de auto is …",
    "Mijn love language is …",
    "Het eerste wat mij opvalt aan iemand is …",
    "Mijn droomhuis staat in …",
    "Op een feestje ben ik meestal degene die …",
    "Mijn favoriete film om samen te kijken is …",
)


THEMES: dict[str, Theme] = {
    "default": Theme(
        key="default",
        label="Ken je mij?",
        max_players=Config.MAX_PLAYERS,
        prompts=DEFAULT_PROMPTS_NL,
    ),
    "dating": Theme(
        key="dating",
        label="Date night",
        max_players=2,
        prompts=DATING_PROMPTS_NL,
    ),
}


def resolve_theme(key: str | None) -> Theme:
    k = (key or "").strip().lower()
    if k in THEMES:
        return THEMES[k]
    return THEMES.get(Config.DEFAULT_THEME, THEMES["default"])


def shuffled_prompts(theme_key: str | None) -> list[str]:
    pool = list(resolve_theme(theme_key).prompts)
    random.shuffle(pool)
    return pool


def list_themes() -> list[dict]:
    return [
        {
            "key": t.key,
            "label": t.label,
            "maxPlayers": t.max_players,
            "promptCount": len(t.prompts),
        }
        for t in THEMES.values()
    ]
