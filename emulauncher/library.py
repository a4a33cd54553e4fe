"""The emulator library and its ``emulators.txt`` text format."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from emulauncher.model import Emulator, GameData

_RULE = "-" * 40


class EmulatorLibrary:
    """Emulators keyed by name, iterated in name order."""

    def __init__(self) -> None:
        self._emulators: dict[str, Emulator] = {}

    def add(self, emulator: Emulator) -> None:
        """Insert an emulator, replacing any with the same name."""
        self._emulators[emulator.name] = emulator

    def __getitem__(self, name: str) -> Emulator:
        return self._emulators[name]

    def __contains__(self, name: object) -> bool:
        return name in self._emulators

    def __iter__(self) -> Iterator[Emulator]:
        return (self._emulators[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._emulators)

    def names(self) -> list[str]:
        """Return the emulator names in sorted order."""
        return sorted(self._emulators)

    def _get_or_create(self, name: str) -> Emulator:
        if name not in self._emulators:
            self._emulators[name] = Emulator()
        return self._emulators[name]

    def report(self) -> str:
        """Return a listing of every emulator, its path, arguments and games."""
        lines = ["List of All Emulators, Paths, and Games"]
        for emu in self:
            lines.append(_RULE)
            lines.append(f"Emulator Name: {emu.name}")
            lines.append(f"Executable Path: {emu.path}")
            lines.append(f"Launch Arguments: {emu.args}")
            if not emu.games:
                lines.append("  No games found.")
            for game in emu.games:
                lines.append(f"  Game Title: {game.title}")
                lines.append(f"  ROM Path: {game.rom_path}")
                lines.append(f"  Game toString: {game.to_line()}")
        lines.append(_RULE)
        return "\n".join(lines)


def parse_library(lines: Iterable[str]) -> EmulatorLibrary:
    """Build a library from the lines of an emulators file.

    ``#`` starts an emulator (only before its first game), ``-`` adds a game
    to the current emulator, ``+`` closes the current emulator's block.
    """
    library = EmulatorLibrary()
    current = ""
    game_count = 0
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#") and game_count == 0:
            emulator = Emulator.from_line(line[1:].strip())
            library.add(emulator)
            current = emulator.name
        elif line.startswith("-"):
            library._get_or_create(current).add_game(
                GameData.from_line(line[1:].strip())
            )
            game_count += 1
        elif line.startswith("+"):
            game_count = 0
    return library


def format_library(library: EmulatorLibrary) -> str:
    """Render a library in the emulators file format."""
    out = []
    for emu in library:
        out.append(emu.to_line() + "\n")
        out.extend(game.to_line() + "\n" for game in emu.games)
        out.append("+\n")
    return "".join(out)


def load_library(path: str | Path) -> EmulatorLibrary:
    """Read a library from a file; raises OSError if it cannot be read."""
    with open(path, encoding="utf-8") as handle:
        return parse_library(handle)


def save_library(library: EmulatorLibrary, path: str | Path) -> None:
    """Write a library to a file, replacing its contents."""
    Path(path).write_text(format_library(library), encoding="utf-8")