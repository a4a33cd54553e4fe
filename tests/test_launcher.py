import os
from unittest import mock

import pytest

from emulauncher.launcher import (
    add_rom,
    game_arguments,
    game_command,
    launch_emulator,
    launch_game,
)
from emulauncher.model import Emulator, GameData


def test_game_command_quotes_rom():
    emu = Emulator("Dolphin", "/bin/dolphin", "-b -e")
    game = GameData("Mario", "/roms/a b.iso")
    assert game_command(emu, game) == '-b -e "/roms/a b.iso"'


def test_game_arguments_keep_quoted_path_whole():
    emu = Emulator("Dolphin", "/bin/dolphin", "-b -e")
    game = GameData("Mario", "/roms/a b.iso")
    assert game_arguments(emu, game) == ["-b", "-e", "/roms/a b.iso"]


def test_game_arguments_without_args():
    emu = Emulator("Dolphin", "/bin/dolphin")
    game = GameData("Mario", "/roms/mario.iso")
    assert game_arguments(emu, game) == ["/roms/mario.iso"]


def test_triple_quote_is_literal():
    emu = Emulator("E", "/bin/e", '--name="""x"""')
    game = GameData("G", "/g")
    assert game_arguments(emu, game)[0] == '--name="x"'


def test_launch_game_spawns_path_with_arguments():
    emu = Emulator("Dolphin", "/bin/dolphin", "-b -e")
    game = GameData("Mario", "/roms/mario.iso")
    with mock.patch("emulauncher.launcher.subprocess.Popen") as popen:
        popen.return_value.pid = 4242
        pid = launch_game(emu, game)
    assert pid == 4242
    command = popen.call_args.args[0]
    assert command == ["/bin/dolphin", "-b", "-e", "/roms/mario.iso"]


def test_launch_emulator_spawns_path_only():
    emu = Emulator("Dolphin", "/bin/dolphin", "-b -e")
    with mock.patch("emulauncher.launcher.subprocess.Popen") as popen:
        popen.return_value.pid = 7
        assert launch_emulator(emu) == 7
    assert popen.call_args.args[0] == ["/bin/dolphin"]


def test_launch_failure_raises():
    emu = Emulator("Missing", "/no/such/binary")
    with mock.patch(
        "emulauncher.launcher.subprocess.Popen", side_effect=FileNotFoundError
    ):
        with pytest.raises(OSError):
            launch_emulator(emu)


def test_add_rom_titles_from_file_name():
    emu = Emulator("Dolphin", "/bin/dolphin")
    game = add_rom(emu, "/roms/mario.iso")
    assert game.title == "mario"
    assert game.rom_path == "/roms/mario.iso".replace("/", os.sep)
    assert emu.games == [game]


def test_add_rom_strips_only_last_suffix():
    emu = Emulator("E")
    assert add_rom(emu, "/roms/archive.tar.gz").title == "archive.tar"


def test_add_rom_empty_path_rejected():
    emu = Emulator("E")
    with pytest.raises(ValueError):
        add_rom(emu, "")
    assert emu.game_count() == 0