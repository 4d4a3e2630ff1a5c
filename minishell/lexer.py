"""Splitting a command line into pipeline segments and words."""

from __future__ import annotations

from collections.abc import Iterator

_QUOTES = ('"', "'")


def _scan(text: str) -> Iterator[tuple[str, bool]]:
    """Yield each character with whether it lies strictly inside quotes."""
    quote: str | None = None
    for ch in text:
        if quote is None:
            if ch in _QUOTES:
                quote = ch
            yield ch, False
        elif ch == quote:
            quote = None
            yield ch, False
        else:
            yield ch, True


def _split(text: str, separators: str, protected: str) -> list[str]:
    pieces: list[str] = []
    current: list[str] = []
    for ch, inside in _scan(text):
        if ch in separators and not (inside and ch in protected):
            if current:
                pieces.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        pieces.append("".join(current))
    return pieces


def pad_redirections(line: str) -> str:
    """Surround every unquoted redirection operator with single spaces."""
    out: list[str] = []
    quote: str | None = None
    i, n = 0, len(line)
    while i < n:
        ch = line[i]
        if quote is not None:
            out.append(ch)
            if ch == quote:
                quote = None
        elif ch in _QUOTES:
            quote = ch
            out.append(ch)
        elif ch in ("<", ">"):
            if i + 1 < n and line[i + 1] == ch:
                out.append(f" {ch}{ch} ")
                i += 1
            else:
                out.append(f" {ch} ")
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def split_pipes(line: str) -> list[str]:
    """Split a line on pipes outside quotes, dropping empty pieces."""
    return _split(line, "|", "|")


def split_words(segment: str) -> list[str]:
    """Split a pipeline segment into words on blanks.

    Spaces inside quotes are kept; tabs always separate words.
    """
    return _split(segment, " \t", " ")