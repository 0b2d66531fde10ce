"""Scoring of a Wordle guess against the answer."""

from __future__ import annotations

from collections import Counter
from enum import Enum


class LetterStatus(str, Enum):
    """Per-letter feedback, as the game board colours it."""

    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


def evaluate_guess(guess: str, target: str) -> list[LetterStatus]:
    """Score `guess` letter by letter.

    Exact matches are settled first; the remaining target letters form a
    budget so a repeated guess letter is only marked present as many times
    as it is still unaccounted for in the target.
    """

    guess = guess.strip().upper()
    target = target.strip().upper()
    if len(guess) != len(target):
        raise ValueError(f"guess has {len(guess)} letters, answer has {len(target)}")

    status: list[LetterStatus | None] = [None] * len(target)
    remaining: Counter[str] = Counter()

    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            status[i] = LetterStatus.CORRECT
        else:
            remaining[t] += 1

    for i, g in enumerate(guess):
        if status[i] is not None:
            continue
        if remaining[g] > 0:
            status[i] = LetterStatus.PRESENT
            remaining[g] -= 1
        else:
            status[i] = LetterStatus.ABSENT

    return [s for s in status if s is not None]
