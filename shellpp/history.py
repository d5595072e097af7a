"""Command history kept in memory and persisted to a file."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

DEFAULT_HISTORY_FILE = ".history"


class History:
    """An ordered list of entered commands backed by a text file.

    A command is not recorded twice in a row. The file holds one command
    per line.
    """

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_HISTORY_FILE) -> None:
        self.path = Path(path)
        self._entries: list[str] = []

    def load(self) -> None:
        """Read the history file, creating it if it does not exist."""
        self.path.touch(exist_ok=True)
        with self.path.open(encoding="utf-8") as stream:
            self._entries = [line.removesuffix("\n") for line in stream]

    def add(self, command: str) -> bool:
        """Record ``command`` unless it repeats the latest entry.

        Returns True if the command was recorded.
        """
        if self._entries and self._entries[-1] == command:
            return False
        self._entries.append(command)
        return True

    def save(self) -> None:
        """Write every entry to the history file."""
        with self.path.open("w", encoding="utf-8") as stream:
            stream.writelines(f"{entry}\n" for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)