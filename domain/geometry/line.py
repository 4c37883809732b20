# domain/geometry/line.py
from typing import Any
from pydantic import Field, model_validator
import logging
from domain.geometry.point import Point
from domain.geometry.constants import EPSILON, UNBOUNDED_INTERCEPT
from domain.geometry.exceptions import ContractViolation
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Line(ImmutableModel):
    """
    Represents an infinite line through two distinct points.

    The defining points are stored as given. Two lines are equal when each
    one passes through both defining points of the other, so a line is
    identified by the set of points it covers and not by the points it was
    built from.
    """
    a: Point = Field(description="First defining point")
    b: Point = Field(description="Second defining point, distinct from the first")

    # Tolerant equality has no consistent hash
    __hash__ = None  # type: ignore[assignment]

    @model_validator(mode="after")
    def validate_distinct_points(self):
        """Refuse to build a line from two coincident points."""
        if self.a == self.b:
            logger.error(f"Line requested through coincident points {self.a} and {self.b}")
            raise ContractViolation(
                f"Line needs two distinct points, got {self.a} and {self.b}"
            )
        return self

    @classmethod
    def through(cls, a: Point, b: Point) -> "Line":
        """Build the line through two distinct points."""
        return cls(a=a, b=b)

    @property
    def is_vertical(self) -> bool:
        """True when the defining points share an x coordinate within EPSILON."""
        return abs(self.a.x - self.b.x) < EPSILON

    @property
    def is_horizontal(self) -> bool:
        """True when the defining points share a y coordinate within EPSILON."""
        return abs(self.a.y - self.b.y) < EPSILON

    def sine(self) -> float:
        """
        Sine of the counterclockwise angle from the positive x axis to the line.

        The defining point with the greater x is taken as the forward
        direction, so the result does not depend on the order of the points.
        Vertical lines are always oriented upwards and give exactly 1.0.

        Returns:
            A value in [-1, 1]
        """
        if self.is_vertical:
            logger.debug(f"{self} is vertical, sine fixed at 1.0")
            return 1.0

        length = (self.b - self.a).norm()
        if self.b.x > self.a.x:
            return (self.b.y - self.a.y) / length
        return (self.a.y - self.b.y) / length

    def x_intercept(self) -> float:
        """
        X coordinate where the line crosses y = 0.

        Horizontal lines either never cross the x axis or lie on it; both
        cases return UNBOUNDED_INTERCEPT.
        """
        if self.is_horizontal:
            logger.debug(f"{self} is horizontal, x intercept is unbounded")
            return UNBOUNDED_INTERCEPT

        inverse_slope = (self.b.x - self.a.x) / (self.b.y - self.a.y)
        return self.a.x - inverse_slope * self.a.y

    def y_intercept(self) -> float:
        """
        Y coordinate where the line crosses x = 0.

        Vertical lines return UNBOUNDED_INTERCEPT.
        """
        if self.is_vertical:
            logger.debug(f"{self} is vertical, y intercept is unbounded")
            return UNBOUNDED_INTERCEPT

        slope = (self.b.y - self.a.y) / (self.b.x - self.a.x)
        return self.a.y - slope * self.a.x

    def crosses(self, point: Point) -> bool:
        """
        Check if a point lies on the line.

        Args:
            point: The point to check

        Returns:
            True if the point is one of the defining points, or if the
            segments from a to b and from b to the point are collinear
            within a tolerance scaled by their lengths
        """
        if point == self.a or point == self.b:
            return True

        direction = self.b - self.a
        ab = direction.norm()
        to_point = point - self.b
        bc = to_point.norm()

        # |cos t| must be 1 for the angle t between AB and BC
        return abs(abs(direction.dot(to_point)) - ab * bc) < EPSILON * ab * bc

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return self.crosses(other.a) and self.crosses(other.b)

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return not self == other

    def __str__(self) -> str:
        """String representation of the line."""
        return f"Line({self.a} -> {self.b})"
