from __future__ import annotations

"""Caller-input errors raised by the palette engine.

Both errors are detected before any color arithmetic starts; once the
seed and mode are validated the engine cannot fail.
"""


class PaletteError(ValueError):
    """Base class for rejected engine inputs."""

    def __init__(self, message: str, value: object) -> None:
        super().__init__(message)
        self.value = value


class InvalidColorFormat(PaletteError):
    """A color string did not match ``#RRGGBB`` / ``RRGGBB``."""

    def __init__(self, value: object) -> None:
        super().__init__(f"invalid color {value!r}: expected 6 hex digits like '#EC4899'", value)


class UnknownHarmonyMode(PaletteError):
    """A harmony mode outside the closed enumeration was requested."""

    def __init__(self, value: object, choices: tuple[str, ...] = ()) -> None:
        hint = f" (expected one of: {', '.join(choices)})" if choices else ""
        super().__init__(f"unknown harmony mode {value!r}{hint}", value)


__all__ = ["PaletteError", "InvalidColorFormat", "UnknownHarmonyMode"]
