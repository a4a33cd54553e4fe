"""Starting emulators and registering ROMs."""

from __future__ import annotations

import os
import subprocess

from emulauncher.model import Emulator, GameData


def game_command(emulator: Emulator, game: GameData) -> str:
    """Return the argument string that launches ``game`` on ``emulator``."""
    return f'{emulator.args} "{game.rom_path}"'


def _split_command(command: str) -> list[str]:
    """Split a command line on whitespace, honouring double quotes.

    Three consecutive quotes give one literal quote character.
    """
    args: list[str] = []
    current: list[str] = []
    quote_count = 0
    in_quote = False
    for char in command:
        if char == '"':
            quote_count += 1
            if quote_count == 3:
                quote_count = 0
                current.append(char)
            continue
        if quote_count:
            if quote_count == 1:
                in_quote = not in_quote
            quote_count = 0
        if not in_quote and char.isspace():
            if current:
                args.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        args.append("".join(current))
    return args


def game_arguments(emulator: Emulator, game: GameData) -> list[str]:
    """Return the argument list passed to the emulator for ``game``."""
    return _split_command(game_command(emulator, game))


def _start_detached(command: list[str]) -> int:
    if os.name == "nt":
        options = {
            "creationflags": subprocess.DETACHED_PROCESS
            | subprocess.CREATE_NEW_PROCESS_GROUP
        }
    else:
        options = {"start_new_session": True}
    process = subprocess.Popen(command, **options)
    return process.pid


def launch_game(emulator: Emulator, game: GameData) -> int:
    """Start the emulator on ``game`` detached; return its process id."""
    return _start_detached([emulator.path, *game_arguments(emulator, game)])


def launch_emulator(emulator: Emulator) -> int:
    """Start the emulator with no arguments, detached; return its process id."""
    return _start_detached([emulator.path])


def _complete_base_name(path: str) -> str:
    name = os.path.basename(path)
    stem, dot, _ = name.rpartition(".")
    return stem if dot else name


def add_rom(emulator: Emulator, rom_path: str) -> GameData:
    """Add a ROM to the emulator, titled after its file name; return the game."""
    if not rom_path:
        raise ValueError("no ROM path given")
    native = rom_path.replace("/", os.sep)
    game = GameData(_complete_base_name(native), native)
    emulator.add_game(game)
    return game