from dataclasses import dataclass, fields
from typing import Any, Mapping

from .errors import ConfigurationError

# A room needs a wall ring plus at least one interior cell.
MIN_ROOM_SIZE = 3


@dataclass
class GenerationConfig:
    """Tunable parameters for one generation run."""

    room_count: int = 50
    map_width: int = 100
    map_height: int = 40
    mean_room_width: int = 7
    mean_room_height: int = 6
    width_variance: int = 3
    height_variance: int = 2
    max_enemies_per_room: int = 2

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GenerationConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**{key: int(value) for key, value in data.items()})

    @property
    def min_room_width(self) -> int:
        return self.mean_room_width - self.width_variance

    @property
    def max_room_width(self) -> int:
        return self.mean_room_width + self.width_variance

    @property
    def min_room_height(self) -> int:
        return self.mean_room_height - self.height_variance

    @property
    def max_room_height(self) -> int:
        return self.mean_room_height + self.height_variance

    def validate(self) -> None:
        """
        Check that generation can run with these parameters.

        Raises:
            ConfigurationError: Describing the first problem found.
        """
        if self.room_count < 1:
            raise ConfigurationError(f"room_count must be at least 1, got {self.room_count}")
        if self.map_width < 1 or self.map_height < 1:
            raise ConfigurationError(
                f"map must be at least 1x1, got {self.map_width}x{self.map_height}"
            )
        if self.width_variance < 0 or self.height_variance < 0:
            raise ConfigurationError("room size variance cannot be negative")
        if self.min_room_width < MIN_ROOM_SIZE or self.min_room_height < MIN_ROOM_SIZE:
            raise ConfigurationError(
                f"rooms can be as small as {self.min_room_width}x{self.min_room_height}, "
                f"but every room needs at least {MIN_ROOM_SIZE}x{MIN_ROOM_SIZE} tiles"
            )
        if self.max_room_width >= self.map_width:
            raise ConfigurationError(
                f"rooms can be {self.max_room_width} tiles wide, "
                f"which does not fit a map {self.map_width} tiles wide"
            )
        if self.max_room_height >= self.map_height:
            raise ConfigurationError(
                f"rooms can be {self.max_room_height} tiles tall, "
                f"which does not fit a map {self.map_height} tiles tall"
            )
        if self.max_enemies_per_room < 1:
            raise ConfigurationError(
                f"max_enemies_per_room must be at least 1, got {self.max_enemies_per_room}"
            )


__all__ = ["GenerationConfig", "MIN_ROOM_SIZE"]
