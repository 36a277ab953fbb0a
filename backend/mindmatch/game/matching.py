"""Lenient free-text comparison for predictions.

Players type their answers by hand, so two answers that mean the same thing
rarely match verbatim. ``matches`` accepts a prediction when the normalized
texts are equal, when one contains the other, or when their content words
overlap enough.
"""

from __future__ import annotations

import re
import unicodedata


MIN_SUBSTRING_LEN = 4
JACCARD_THRESHOLD = 0.6

STOPWORDS_NL = frozenset(
    {
        "de", "het", "een", "en", "of", "maar", "ik", "jij", "je", "u", "we", "wij",
        "jullie", "hij", "zij", "ze", "mijn", "jouw", "zijn", "haar", "onze", "hun",
        "naar", "van", "voor", "met", "zonder", "op", "in", "uit", "die", "dat",
        "dit", "daar", "hier", "nog", "eens", "echt", "heel", "veel", "altijd", "nooit",
    }
)


def _strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(text: str | None) -> str:
    t = _strip_diacritics(str(text or "").lower())
    t = re.sub(r"[^a-z0-9 ]", " ", t)
    t = re.sub(r"\s+", " ", t)
    return t.strip()


def tokenize(text: str | None) -> set[str]:
    n = normalize(text)
    if not n:
        return set()
    return {t for t in n.split(" ") if len(t) >= 2 and t not in STOPWORDS_NL}


def jaccard(a: set[str], b: set[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def matches(target: str | None, predicted: str | None) -> bool:
    """True when ``predicted`` is close enough to the target's own answer."""
    na = normalize(target)
    nb = normalize(predicted)
    if not na or not nb:
        return False

    if na == nb:
        return True

    if len(na) >= MIN_SUBSTRING_LEN and na in nb:
        return True
    if len(nb) >= MIN_SUBSTRING_LEN and nb in na:
        return True

    ta = tokenize(na)
    tb = tokenize(nb)
    if not ta or not tb:
        return False

    return jaccard(ta, tb) >= JACCARD_THRESHOLD
