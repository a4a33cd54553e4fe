"""Command-line front end for managing and launching emulators."""

from __future__ import annotations

import argparse
import sys

from emulauncher.launcher import add_rom, launch_emulator, launch_game
from emulauncher.library import EmulatorLibrary, load_library, save_library
from emulauncher.model import Emulator

DEFAULT_FILE = "emulators.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emulauncher")
    parser.add_argument("--file", default=DEFAULT_FILE, help="library file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="show every emulator and its games")

    new = sub.add_parser("add-emulator", help="register an emulator")
    new.add_argument("name")
    new.add_argument("path")
    new.add_argument("args", nargs="?", default="")

    game = sub.add_parser("add-game", help="add a ROM to an emulator")
    game.add_argument("emulator")
    game.add_argument("rom")

    launch = sub.add_parser("launch", help="start an emulator, optionally on a game")
    launch.add_argument("emulator")
    launch.add_argument("game", nargs="?")
    return parser


def _load(path: str) -> EmulatorLibrary:
    try:
        return load_library(path)
    except OSError:
        print(f"Could not open file: {path}", file=sys.stderr)
        return EmulatorLibrary()


def main(argv: list[str] | None = None) -> int:
    """Run the launcher; return the process exit status."""
    options = _build_parser().parse_args(argv)
    library = _load(options.file)

    if options.command == "list":
        print(library.report())
        return 0

    if options.command == "add-emulator":
        library.add(Emulator(options.name, options.path, options.args))
        save_library(library, options.file)
        return 0

    if options.emulator not in library:
        print(f"Unknown emulator: {options.emulator}", file=sys.stderr)
        return 1
    emulator = library[options.emulator]

    if options.command == "add-game":
        try:
            add_rom(emulator, options.rom)
        except ValueError as error:
            print(error, file=sys.stderr)
            return 1
        save_library(library, options.file)
        return 0

    try:
        if options.game is None:
            launch_emulator(emulator)
        else:
            game = next((g for g in emulator.games if g.title == options.game), None)
            if game is None:
                print(f"Unknown game: {options.game}", file=sys.stderr)
                return 1
            launch_game(emulator, game)
    except OSError:
        print("Failed to start emulator.", file=sys.stderr)
        return 1
    print("Emulator started successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())