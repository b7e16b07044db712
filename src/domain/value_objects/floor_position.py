"""Floor plan position value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FloorPosition:
    """Non-negative x/y coordinates of a table on the floor plan"""

    x: int
    y: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError("Floor coordinates cannot be negative")

    def moved_by(self, dx: int, dy: int) -> "FloorPosition":
        """Apply a drag displacement, clamping each axis at zero"""
        return FloorPosition(x=max(0, self.x + dx), y=max(0, self.y + dy))
