"""A top-down wave survival arcade game: game logic, event files, networking and pygame screens."""

__version__ = "0.1.0"