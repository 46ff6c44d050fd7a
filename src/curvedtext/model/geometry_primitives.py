"""
Geometric Primitives for curved text layout.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


class Side(StrEnum):
    """Half of the ring a label is placed on."""
    LEFT = "left"    # elapsed time
    RIGHT = "right"  # remaining time


class SweepDirection(IntEnum):
    """
    Direction an arc is drawn in.

    The value doubles as the arc path sweep flag, so the members are falsy
    (counter-clockwise) and truthy (clockwise) like a plain boolean.
    """
    COUNTER_CLOCKWISE = 0
    CLOCKWISE = 1


@dataclass(frozen=True)
class Point:
    """A point on the canvas (origin top-left, y pointing down)."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class ArcSegment:
    """Angular window (degrees) of the ring a label follows."""
    start_angle: float
    end_angle: float
    label_offset: float


def _format_number(value: float) -> str:
    # Shortest round-trip representation, e.g. 150.0 or 6.123233995736766e-15
    return repr(float(value))


@dataclass(frozen=True)
class ArcPath:
    """
    A move-to followed by a single circular arc.

    Serializes to (and parses from) the path mini-language
    ``M sx sy A r r 0 large sweep ex ey``.
    """
    start: Point
    end: Point
    radius: float
    large_arc: bool
    sweep: SweepDirection

    def to_descriptor(self) -> str:
        tokens = [
            "M", _format_number(self.start.x), _format_number(self.start.y),
            "A", _format_number(self.radius), _format_number(self.radius),
            "0", str(int(self.large_arc)), str(int(self.sweep)),
            _format_number(self.end.x), _format_number(self.end.y),
        ]
        return " ".join(tokens)

    def __str__(self) -> str:
        return self.to_descriptor()

    @classmethod
    def parse(cls, descriptor: str) -> ArcPath:
        """
        Read a descriptor produced by `to_descriptor` back into its parts.

        Raises:
            ValueError: If the descriptor is not a single move-to plus arc
                with equal radii and zero axis rotation.
        """
        tokens = descriptor.split()
        if len(tokens) != 11 or tokens[0] != "M" or tokens[3] != "A":
            raise ValueError(f"Not an arc path descriptor: '{descriptor}'")

        sx, sy, rx, ry, rotation, large, sweep, ex, ey = tokens[1:3] + tokens[4:]
        if float(rx) != float(ry):
            raise ValueError(f"Arc radii differ ({rx} vs {ry}), expected a circular arc.")
        if float(rotation) != 0.0:
            raise ValueError(f"Unexpected axis rotation {rotation}.")
        if large not in ("0", "1") or sweep not in ("0", "1"):
            raise ValueError(f"Arc flags must be 0 or 1, got '{large}' and '{sweep}'.")

        return cls(
            start=Point(float(sx), float(sy)),
            end=Point(float(ex), float(ey)),
            radius=float(rx),
            large_arc=large == "1",
            sweep=SweepDirection(int(sweep)),
        )
