[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emulauncher"
version = "0.1.0"
description = "Keep a list of emulators and their games in a plain text file and launch them."
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "launcher", "roms", "games", "frontend"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
emulauncher = "emulauncher.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["emulauncher"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
