"""Variable expansion and quote removal for words."""

from __future__ import annotations

import string

from minishell.environment import Environment

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_QUOTES = ('"', "'")


def expand_variables(text: str, env: Environment, status: int) -> str:
    """Expand ``$NAME`` and ``$?`` in ``text``.

    A run with an even number of dollars is kept literally.  With an odd
    number, the last dollar introduces the expansion and the others are kept
    only when the variable is set.  An unset name expands to nothing, except
    that a name starting with a digit drops just that digit.  A dollar with no
    name after it stays as it is.
    """
    out: list[str] = []
    i, n = 0, len(text)
    while i < n:
        start = text.find("$", i)
        if start == -1:
            out.append(text[i:])
            break
        out.append(text[i:start])
        end = start
        while end < n and text[end] == "$":
            end += 1
        run = end - start
        if run % 2 == 0:
            out.append(text[start:end])
            i = end
            continue
        name_end = end
        while name_end < n and text[name_end] in _NAME_CHARS:
            name_end += 1
        name = text[end:name_end]
        value = env.get(name) if name else None
        if value is not None:
            out.append("$" * (run - 1) + value)
            i = name_end
        elif text.startswith("?", end):
            out.append(str(status))
            i = end + 1
        elif name and name[0] in string.digits:
            out.append(name[1:])
            i = name_end
        elif name:
            i = name_end
        else:
            out.append("$")
            i = end
    return "".join(out)


def quote_segments(word: str) -> list[tuple[str, str]]:
    """Split a word into ``(text, quote)`` pieces.

    ``quote`` is the quote character that enclosed the piece, or ``""`` for
    unquoted text.  An unclosed quote runs to the end of the word.
    """
    segments: list[tuple[str, str]] = []
    i, n = 0, len(word)
    while i < n:
        ch = word[i]
        if ch in _QUOTES:
            close = word.find(ch, i + 1)
            if close == -1:
                close = n
            segments.append((word[i + 1 : close], ch))
            i = close + 1
        else:
            j = i
            while j < n and word[j] not in _QUOTES:
                j += 1
            segments.append((word[i:j], ""))
            i = j
    return segments


def expand_word(word: str, env: Environment, status: int) -> str:
    """Remove quotes from a word, expanding variables outside single quotes."""
    return "".join(
        text if quote == "'" else expand_variables(text, env, status)
        for text, quote in quote_segments(word)
    )


def strip_quotes(word: str) -> str:
    """Remove quotes from a word without expanding anything."""
    return "".join(text for text, _ in quote_segments(word))