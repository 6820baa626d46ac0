"""Exceptions raised by room generation."""


class GenerationError(Exception):
    """Base class for every error raised while generating a map."""


class ConfigurationError(GenerationError, ValueError):
    """The generation parameters cannot produce a valid map."""


class CompositionError(GenerationError):
    """
    An algorithmic invariant broke while composing rooms or tiles.

    These never depend on the random draws being "unlucky": they mean the
    precedence or intersection tables were handed a combination outside
    their domain.
    """


class TileReplacementError(CompositionError):
    """An entity tile was asked to replace a terrain tile."""

    def __init__(self, new, old):
        super().__init__(f"{new.name} cannot replace non-entity tile {old.name}")
        self.new = new
        self.old = old


class PrecedenceConflictError(CompositionError):
    """Both axes fully overlap, but each axis names a different superset."""

    def __init__(self, x_precedence, y_precedence):
        super().__init__(
            f"x-axis says {x_precedence.name} but y-axis says {y_precedence.name}"
        )
        self.x_precedence = x_precedence
        self.y_precedence = y_precedence


class UnknownTileError(GenerationError, KeyError):
    """A texture was requested for a tile kind the catalog does not know."""

    def __str__(self) -> str:
        return f"No textures registered for tile {self.args[0]}"
