"""Area and perimeter formulas for the supported figures.

Ten pure functions plus the table that binds each (shape, operation) pair to
its formula and the dimensions it needs, in prompt order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from geocalc.config import (
    APOTHEM_PROMPT,
    BASE_PROMPT,
    HEIGHT_PROMPT,
    PI,
    RADIUS_PROMPT,
    SIDE_1_PROMPT,
    SIDE_2_PROMPT,
    SIDE_3_PROMPT,
    SIDE_PROMPT,
)
from geocalc.models import Dimension, Operation, Shape


def circle_area(radius: float) -> float:
    return PI * radius * radius


def circle_perimeter(radius: float) -> float:
    return 2 * PI * radius


def square_area(side: float) -> float:
    return side * side


def square_perimeter(side: float) -> float:
    return 4 * side


def triangle_area(base: float, height: float) -> float:
    return 0.5 * base * height


def triangle_perimeter(side1: float, side2: float, side3: float) -> float:
    return side1 + side2 + side3


def rectangle_area(base: float, height: float) -> float:
    return base * height


def rectangle_perimeter(base: float, height: float) -> float:
    return 2 * (base + height)


def pentagon_area(side: float, apothem: float) -> float:
    """Regular pentagon area from side length and apothem.

    Equivalent to perimeter × apothem / 2.
    """
    return (5 * side * apothem) / 2


def pentagon_perimeter(side: float) -> float:
    return 5 * side


@dataclass(frozen=True)
class Formula:
    """A formula routine and the dimensions it consumes, in call order."""

    func: Callable[..., float]
    dimensions: tuple[Dimension, ...]

    def __call__(self, *values: float) -> float:
        return float(self.func(*values))


RADIUS = Dimension("radius", RADIUS_PROMPT)
SIDE = Dimension("side", SIDE_PROMPT)
BASE = Dimension("base", BASE_PROMPT)
HEIGHT = Dimension("height", HEIGHT_PROMPT)
APOTHEM = Dimension("apothem", APOTHEM_PROMPT)
SIDE_1 = Dimension("side1", SIDE_1_PROMPT)
SIDE_2 = Dimension("side2", SIDE_2_PROMPT)
SIDE_3 = Dimension("side3", SIDE_3_PROMPT)

FORMULAS: dict[tuple[Shape, Operation], Formula] = {
    (Shape.CIRCLE, Operation.AREA): Formula(circle_area, (RADIUS,)),
    (Shape.CIRCLE, Operation.PERIMETER): Formula(circle_perimeter, (RADIUS,)),
    (Shape.SQUARE, Operation.AREA): Formula(square_area, (SIDE,)),
    (Shape.SQUARE, Operation.PERIMETER): Formula(square_perimeter, (SIDE,)),
    (Shape.TRIANGLE, Operation.AREA): Formula(triangle_area, (BASE, HEIGHT)),
    (Shape.TRIANGLE, Operation.PERIMETER): Formula(triangle_perimeter, (SIDE_1, SIDE_2, SIDE_3)),
    (Shape.RECTANGLE, Operation.AREA): Formula(rectangle_area, (BASE, HEIGHT)),
    (Shape.RECTANGLE, Operation.PERIMETER): Formula(rectangle_perimeter, (BASE, HEIGHT)),
    (Shape.PENTAGON, Operation.AREA): Formula(pentagon_area, (SIDE, APOTHEM)),
    (Shape.PENTAGON, Operation.PERIMETER): Formula(pentagon_perimeter, (SIDE,)),
}


def lookup_formula(shape: Shape, operation: Operation) -> Optional[Formula]:
    """Return the formula for a shape/operation pair.

    Returns:
        The Formula, or None for Shape.UNKNOWN.
    """
    return FORMULAS.get((shape, operation))
