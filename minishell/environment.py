"""The shell's environment: ordered variables, some of them without a value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple


class Assignment(NamedTuple):
    """A parsed ``KEY=VALUE``, ``KEY+=VALUE`` or bare ``KEY`` word."""

    key: str
    value: str | None
    append: bool


def parse_assignment(text: str) -> Assignment:
    """Split an assignment word into its key, its value and whether it appends.

    The key runs up to the first ``=`` or ``+``.  A word with no ``=`` after
    the key has no value (``None``).
    """
    cut = len(text)
    for index, ch in enumerate(text):
        if ch in ("=", "+"):
            cut = index
            break
    key = text[:cut]
    rest = text[cut:]
    if rest.startswith("+="):
        return Assignment(key, rest[2:], True)
    if rest.startswith("="):
        return Assignment(key, rest[1:], False)
    return Assignment(key, None, False)


class Environment:
    """Variables in insertion order; a value of ``None`` means declared but unset."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._vars: dict[str, str | None] = {}
        for entry in entries:
            key, value, _ = parse_assignment(entry)
            self._vars[key] = "" if value is None else value

    def get(self, key: str) -> str | None:
        """Return the value of ``key``, or ``None`` if it is missing or has no value."""
        return self._vars.get(key)

    def set(self, key: str, value: str | None) -> None:
        """Give ``key`` a value, keeping its place if it already exists."""
        self._vars[key] = value

    def remove(self, key: str) -> None:
        """Drop ``key`` if present."""
        self._vars.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        return iter(list(self._vars.items()))

    def to_list(self) -> list[str]:
        """Return ``KEY=VALUE`` strings for every variable that has a value."""
        return [f"{key}={value}" for key, value in self._vars.items() if value is not None]

    def declarations(self) -> list[str]:
        """Return ``declare -x`` lines for every variable, sorted by key."""
        lines = []
        for key, value in sorted(self._vars.items(), key=lambda item: item[0]):
            if value is None:
                lines.append(f"declare -x {key}")
            else:
                lines.append(f'declare -x {key}="{value}"')
        return lines