# emulauncher

A small command-line launcher for game emulators. It keeps a list of
emulators and their games in a plain text file. It starts an emulator on
its own, or with a chosen ROM.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## The library file

Emulators and their games are stored as plain lines. The default file is
`emulators.txt` in the current directory:

```
# Dolphin|/opt/emulators/dolphin/dolphin-emu{-b -e
- Some Game|/home/player/roms/some-game.iso
- Another Game|/home/player/roms/another-game.rvz
+
# Other Emulator|/opt/emulators/other/other-emu
+
```

Each line is read as follows:

- A line starting with `#` opens an emulator entry. It holds the name, a
  `|`, and the path of the executable. Launch arguments may follow the
  path after a `{`. A `#` line is only honoured before the first game of
  the current entry. After that, it is ignored until the next `+`.
- A line starting with `-` adds a game to the current emulator. It holds
  the title, a `|`, and the path of the ROM.
- A line starting with `+` closes the current emulator entry.

Surrounding whitespace is stripped. Blank lines and lines with any other
start are ignored. If two entries share a name, the later one replaces
the earlier one.

When the library is saved, emulators are written in order of name. Each
one is written as a `#` line, then its `-` game lines, then `+`. The `#`
line holds only the name and the path, so **launch arguments are not
written back**: any `{...}` part of an entry is lost on save.

## Command line

```
emulauncher [--file FILE] COMMAND ...
```

`--file` names the library file. The default is `emulators.txt`. If the
file cannot be read, the command reports `Could not open file: ...` and
carries on with an empty library.

| Command | What it does |
| --- | --- |
| `emulauncher list` | Prints every emulator with its path, its launch arguments and its games. |
| `emulauncher add-emulator NAME PATH [ARGS]` | Adds an emulator, or replaces one of the same name, and saves the file. |
| `emulauncher add-game EMULATOR ROM` | Adds a ROM to the named emulator and saves the file. The game is titled after the ROM's file name without its last extension. |
| `emulauncher launch EMULATOR [GAME]` | Starts the emulator. If a game title is given, it starts the emulator on that game. |

The exit status is 1 in these cases:

- the emulator is unknown;
- the game title is unknown;
- the ROM path is empty;
- the process cannot be started.

The same entry point can also be run as `python -m emulauncher.cli`.

### Launching games

A game is started with the emulator's executable and an argument list.
That list is the emulator's launch arguments followed by the quoted ROM
path, split the way a shell would split it:

- arguments are separated by whitespace;
- double quotes group words into one argument;
- three double quotes in a row give one literal quote.

The process is started detached from the launcher, so the launcher does
not wait for the emulator to exit:

- on POSIX, it runs in a new session;
- on Windows, it runs as a detached process in a new process group.

## Using it from Python

```python
from emulauncher.library import load_library, save_library
from emulauncher.launcher import add_rom, game_arguments, launch_game

library = load_library("emulators.txt")
for name in library.names():
    print(name)

dolphin = library["Dolphin"]
game = add_rom(dolphin, "/home/player/roms/new-game.iso")
print(game_arguments(dolphin, game))
pid = launch_game(dolphin, game)

save_library(library, "emulators.txt")
```

### `emulauncher.model`

- `GameData` holds one game: a `title` and a `rom_path`.
- `Emulator` holds one emulator: a `name`, a `path`, its `args` and a list
  of `games`.
- `to_line()` and `from_line()` turn either one into, or out of, a line of
  the library file. `from_line()` expects the line without its leading
  `#` or `-`.
- `Emulator.describe()` gives a short summary of an emulator and its
  games.

### `emulauncher.library`

- `EmulatorLibrary` maps names to emulators. It supports `in`, indexing
  by name, `len()`, and iteration in name order. `add()` inserts or
  replaces an emulator, and `names()` lists the names sorted.
- `report()` returns the listing printed by `emulauncher list`.
- `parse_library()` builds a library from lines of text, and
  `format_library()` renders a library back to text.
- `load_library()` and `save_library()` do the same with a file. A file
  that cannot be read raises `OSError`.

### `emulauncher.launcher`

- `game_command()` and `game_arguments()` give the argument string and
  the argument list for a game.
- `launch_game()` and `launch_emulator()` start the emulator detached and
  return the process id. A failure to start raises `OSError`.
- `add_rom()` adds a ROM to an emulator and returns the new `GameData`.
  Forward slashes in the path are turned into the platform's separator.
  An empty path raises `ValueError`.

## What it does not do

emulauncher is a command-line tool only. It has none of the following:

- a graphical window;
- file pickers or browsing for ROMs;
- commands to remove or rename emulators or games.

As noted above, launch arguments survive in the file only if the file is
edited by hand and never saved by `emulauncher`.