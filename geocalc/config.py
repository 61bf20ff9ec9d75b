"""Process-wide constants for geocalc.

Everything here is fixed at import time and never reassigned. The prompt
strings are matched by scripted input, so they must stay byte-exact.
"""

from __future__ import annotations

# Fixed at four decimals, not math.pi.
PI = 3.1416

# Returned for a shape keyword that matches none of the known figures.
UNKNOWN_SHAPE_RESULT = 0.0

RESULT_PREFIX = "Resultado: "

SHAPE_PROMPT = "Figura (circulo, cuadrado, triangulo, rectangulo, pentagono):"
OPERATION_PROMPT = "Operacion (area, perimetro):"

RADIUS_PROMPT = "Radio:"
SIDE_PROMPT = "Lado:"
BASE_PROMPT = "Base:"
HEIGHT_PROMPT = "Altura:"
APOTHEM_PROMPT = "Apotema:"
SIDE_1_PROMPT = "Lado 1:"
SIDE_2_PROMPT = "Lado 2:"
SIDE_3_PROMPT = "Lado 3:"
