"""Data models for geocalc.

Shape and Operation enums, Dimension and Calculation: the typed structures
that flow through formulas → session → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Shape(str, Enum):
    """Supported figures, keyed by their Spanish input keyword."""

    CIRCLE = "circulo"
    SQUARE = "cuadrado"
    TRIANGLE = "triangulo"
    RECTANGLE = "rectangulo"
    PENTAGON = "pentagono"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, keyword: str) -> Shape:
        """Map a normalized keyword to a Shape.

        Anything that is not one of the five figure keywords is UNKNOWN,
        including the literal text "unknown".
        """
        for shape in KNOWN_SHAPES:
            if keyword == shape.value:
                return shape
        return cls.UNKNOWN


KNOWN_SHAPES = [Shape.CIRCLE, Shape.SQUARE, Shape.TRIANGLE, Shape.RECTANGLE, Shape.PENTAGON]


class Operation(str, Enum):
    """What to compute for a shape."""

    AREA = "area"
    PERIMETER = "perimetro"

    @classmethod
    def parse(cls, keyword: str) -> Operation:
        """Exact "area" selects AREA; every other keyword is PERIMETER."""
        if keyword == cls.AREA.value:
            return cls.AREA
        return cls.PERIMETER


@dataclass(frozen=True)
class Dimension:
    """A single measurement a formula needs, with the prompt that asks for it."""

    name: str
    prompt: str


@dataclass
class Calculation:
    """Complete record of one calculator run."""

    shape: Shape
    operation: Operation
    values: dict[str, float] = field(default_factory=dict)
    result: float = 0.0

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "shape": self.shape.value,
            "operation": self.operation.value,
            "values": dict(self.values),
            "result": self.result,
        }
