# domain/geometry/point.py
from typing import Any
from pydantic import Field, field_validator
import math
from domain.geometry.constants import EPSILON
from utils.base_model import ImmutableModel


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Points double as 2-vectors: subtraction, dot product and norm are the
    primitives the line predicates are built from. Equality is approximate,
    two points are equal when they are closer than EPSILON. The test is
    absolute, not relative to the magnitude of the coordinates, and it is not
    transitive.
    """
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    # Tolerant equality has no consistent hash
    __hash__ = None  # type: ignore[assignment]

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    def __sub__(self, other: "Point") -> "Point":
        """Vector subtraction of two points."""
        if not isinstance(other, Point):
            return NotImplemented
        # Differences of finite coordinates can overflow to inf
        return Point.model_construct(x=self.x - other.x, y=self.y - other.y)

    def dot(self, other: "Point") -> float:
        """Dot product of the two position vectors."""
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        """Euclidean distance from the origin."""
        return math.sqrt(self.dot(self))

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return (other - self).norm()

    def is_close_to(self, other: "Point") -> bool:
        """Check if the two points are within EPSILON of each other."""
        return (other - self).norm() < EPSILON

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.is_close_to(other)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return not self.is_close_to(other)

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        """String representation of the point."""
        return self.format_as_tuple()
