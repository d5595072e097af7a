"""Filename wildcard matching with ``*`` and ``?``."""

from __future__ import annotations

import os
from functools import lru_cache

WILDCARDS = frozenset("*?")


def match(pattern: str, text: str) -> bool:
    """Return True if ``text`` matches ``pattern``.

    ``?`` matches exactly one character and ``*`` matches any run of
    characters. A pattern character equal to the text character is always
    consumed literally, even when it is ``*``.
    """
    plen, tlen = len(pattern), len(text)

    @lru_cache(maxsize=None)
    def _match_from(p: int, t: int) -> bool:
        if p == plen and t == tlen:
            return True

        if p < plen and pattern[p] == "*":
            while p + 1 < plen and pattern[p + 1] == "*":
                p += 1
            if p + 1 < plen and t == tlen:
                return False

        pc = pattern[p] if p < plen else None
        tc = text[t] if t < tlen else None

        if pc is not None and (pc == "?" or pc == tc):
            if tc is None:
                return False
            return _match_from(p + 1, t + 1)

        if pc == "*":
            return _match_from(p + 1, t) or _match_from(p, t + 1)
        return False

    return _match_from(0, 0)


def contains_wildcard(text: str) -> bool:
    """Return True if ``text`` holds a ``*`` or ``?``."""
    return any(c in WILDCARDS for c in text)


def _directory_entries(directory: str | os.PathLike[str]) -> list[str]:
    entries = os.listdir(directory)
    return [".", "..", *entries]


def matching_filenames(
    pattern: str, directory: str | os.PathLike[str] = "."
) -> list[str]:
    """Return the entries of ``directory`` whose names match ``pattern``.

    The listing includes ``.`` and ``..``. Raises ``OSError`` if the
    directory cannot be read.
    """
    return [name for name in _directory_entries(directory) if match(pattern, name)]


def substitute(word: str, directory: str | os.PathLike[str] = ".") -> list[str]:
    """Expand ``word`` into matching filenames if it holds a wildcard.

    A word without wildcards is returned unchanged as a single item; a
    wildcard word that matches nothing expands to an empty list.
    """
    if not contains_wildcard(word):
        return [word]
    return matching_filenames(word, directory)