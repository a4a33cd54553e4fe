"""Keep a list of emulators and their games in a text file, and launch them."""

__version__ = "0.1.0"