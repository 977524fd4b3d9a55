class AbyssError(Exception):
    """Base exception for the Lands of the Abyss project."""


class ConfigError(AbyssError, ValueError):
    """Raised when map configuration values or files are invalid."""


class NoRoomsError(AbyssError):
    """Raised when a map has no rooms to take a spawn point from."""


class MapSealedError(AbyssError):
    """Raised when a finished map is modified."""
