from __future__ import annotations

DEFAULT_LABEL = "Wordle"


def format_puzzle_label(raw: str) -> str:
    """Turn the puzzle-number cell into a display label.

    The source sometimes renders a full label ("Wordle #1234"), sometimes a
    bare number with or without `#`.
    """

    trimmed = (raw or "").strip()
    if not trimmed:
        return DEFAULT_LABEL

    if "wordle" in trimmed.lower():
        return trimmed

    if trimmed.startswith("#"):
        return f"{DEFAULT_LABEL} {trimmed}"

    return f"{DEFAULT_LABEL} #{trimmed}"
