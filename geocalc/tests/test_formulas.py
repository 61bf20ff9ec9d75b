"""Formula table tests.

Every (shape, operation) pair against hand-computed values with PI = 3.1416.
"""

import pytest

from geocalc import formulas
from geocalc.config import PI
from geocalc.formulas import FORMULAS, lookup_formula
from geocalc.models import KNOWN_SHAPES, Operation, Shape


def test_pi_is_fixed():
    assert PI == 3.1416


# --- Circle ---

def test_circle_area():
    assert formulas.circle_area(2) == pytest.approx(12.5664)


def test_circle_perimeter():
    assert formulas.circle_perimeter(1) == pytest.approx(6.2832)


# --- Square ---

def test_square_area():
    assert formulas.square_area(3) == 9


def test_square_perimeter():
    assert formulas.square_perimeter(5) == 20


# --- Triangle ---

def test_triangle_area():
    assert formulas.triangle_area(4, 3) == pytest.approx(6.0)


def test_triangle_perimeter():
    assert formulas.triangle_perimeter(3, 4, 5) == pytest.approx(12.0)


# --- Rectangle ---

def test_rectangle_area():
    assert formulas.rectangle_area(3, 4) == pytest.approx(12.0)


def test_rectangle_perimeter():
    assert formulas.rectangle_perimeter(3, 4) == pytest.approx(14.0)


# --- Pentagon ---

def test_pentagon_area():
    assert formulas.pentagon_area(6, 4.13) == pytest.approx(61.95)


def test_pentagon_perimeter():
    assert formulas.pentagon_perimeter(2.5) == pytest.approx(12.5)


# --- Table ---

def test_table_covers_every_known_pair():
    expected = {(s, o) for s in KNOWN_SHAPES for o in Operation}
    assert set(FORMULAS) == expected


def test_unknown_shape_has_no_formula():
    assert lookup_formula(Shape.UNKNOWN, Operation.AREA) is None
    assert lookup_formula(Shape.UNKNOWN, Operation.PERIMETER) is None


@pytest.mark.parametrize(
    "shape, operation, prompts",
    [
        (Shape.CIRCLE, Operation.AREA, ["Radio:"]),
        (Shape.SQUARE, Operation.PERIMETER, ["Lado:"]),
        (Shape.TRIANGLE, Operation.AREA, ["Base:", "Altura:"]),
        (Shape.TRIANGLE, Operation.PERIMETER, ["Lado 1:", "Lado 2:", "Lado 3:"]),
        (Shape.RECTANGLE, Operation.PERIMETER, ["Base:", "Altura:"]),
        (Shape.PENTAGON, Operation.AREA, ["Lado:", "Apotema:"]),
        (Shape.PENTAGON, Operation.PERIMETER, ["Lado:"]),
    ],
)
def test_dimension_prompts(shape, operation, prompts):
    formula = lookup_formula(shape, operation)
    assert [d.prompt for d in formula.dimensions] == prompts


def test_formula_call_returns_float():
    """Integer-looking inputs still come back as floats."""
    result = lookup_formula(Shape.SQUARE, Operation.AREA)(3)
    assert isinstance(result, float)
    assert result == 9.0
