"""Emulator and game records and their one-line text forms."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GameData:
    """A game known to an emulator: a display title and a ROM path."""

    title: str = ""
    rom_path: str = ""

    def to_line(self) -> str:
        """Return the library-file line for this game."""
        return f"- {self.title}|{self.rom_path}"

    @classmethod
    def from_line(cls, line: str) -> GameData:
        """Parse ``title|rom_path`` (the leading ``-`` already removed)."""
        parts = line.split("|")
        title = parts[0] if parts else ""
        rom_path = parts[1] if len(parts) > 1 else ""
        return cls(title, rom_path)


@dataclass
class Emulator:
    """An emulator executable, its launch arguments and its games."""

    name: str = ""
    path: str = ""
    args: str = ""
    games: list[GameData] = field(default_factory=list)

    def add_game(self, game: GameData) -> None:
        """Append a game to this emulator."""
        self.games.append(game)

    def game_count(self) -> int:
        """Return how many games have been added."""
        return len(self.games)

    def to_line(self) -> str:
        """Return the library-file header line for this emulator."""
        return f"# {self.name}|{self.path}"

    @classmethod
    def from_line(cls, line: str) -> Emulator:
        """Parse ``name|path{args`` (the leading ``#`` already removed)."""
        parts = line.split("|")
        name = parts[0] if parts else ""
        path_with_args = parts[1] if len(parts) > 1 else ""
        path, brace, args = path_with_args.partition("{")
        if not brace:
            args = ""
        return cls(name.strip(), path.strip(), args.strip())

    def describe(self) -> str:
        """Return a short multi-line summary of the emulator and its games."""
        lines = [f"Emulator: {self.name} - Total Games: {self.game_count()}"]
        lines.extend(
            f"  Game Title: {game.title}, ROM Path: {game.rom_path}"
            for game in self.games
        )
        return "\n".join(lines)