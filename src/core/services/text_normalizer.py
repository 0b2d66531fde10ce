"""Text helpers for table cells scraped from markup."""

from __future__ import annotations

from bs4 import Tag

WORD_LENGTH = 5


def _text_of(fragment: Tag | str, separator: str = "") -> str:
    if isinstance(fragment, Tag):
        return fragment.get_text(separator)
    return fragment or ""


def collapse_text(fragment: Tag | str) -> str:
    """Join every whitespace-separated run of the fragment's text with single spaces.

    Text nodes are kept apart, so `<td>12<br>34</td>` becomes `"12 34"`.
    """

    return " ".join(_text_of(fragment, " ").split())


def extract_hidden_word(fragment: Tag | str) -> str | None:
    """Return the fragment's letters as an uppercase 5-letter word, or None.

    CSS does not hide anything from the parser: text inside
    `display:none` elements is included here on purpose.
    """

    letters = "".join(ch for ch in _text_of(fragment) if ch.isascii() and ch.isalpha())
    word = letters.strip().upper()
    if len(word) == WORD_LENGTH:
        return word
    return None
