"""Frame-tagged values: Position, Orientation, Direction."""

from .direction import Direction
from .orientation import Orientation, RotationConvention
from .position import Position

__all__ = [
    "Position",
    "Orientation",
    "RotationConvention",
    "Direction",
]
