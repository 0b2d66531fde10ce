"""Error type shared by every extraction stage.

There is a single exception class on purpose: callers only tell success
from failure, and the message names the stage that broke.
"""

from __future__ import annotations


class PuzzleExtractionError(Exception):
    """A fetch, parse or validation step failed; `str(exc)` is the user-facing text."""

