"""
Lands of the Abyss package root.

Procedural dungeon generation lives in :mod:`abyss.dungeon`; the engine, text
renderer and optional Arcade window are thin layers on top of it.
"""

__version__ = "0.1.0"
