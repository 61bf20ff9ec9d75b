"""Calculator session: read shape and operation, read dimensions, print result.

Data flow per run:
1. Prompt for the shape keyword (one line, trimmed, lowercased)
2. Prompt for the operation keyword (same normalization)
3. Look up the formula for (Shape, Operation); unknown shapes stop here
4. Prompt for each dimension the formula needs, one numeric token each
5. Evaluate the formula and write "Resultado: <value>"

Bad numeric tokens raise ValueError and an exhausted stream raises EOFError;
neither is handled here.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Optional, TextIO

from rich.console import Console

from geocalc.config import OPERATION_PROMPT, RESULT_PREFIX, SHAPE_PROMPT, UNKNOWN_SHAPE_RESULT
from geocalc.formulas import lookup_formula
from geocalc.models import Calculation, Operation, Shape

logger = logging.getLogger(__name__)


def make_output_console(file: Optional[TextIO] = None) -> Console:
    """Build a console that writes prompts and results verbatim.

    Markup, emoji codes, highlighting and wrapping are all off so scripted
    callers see the exact strings.
    """
    return Console(
        file=file,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


class InputReader:
    """Prompting reader over a text stream.

    Keywords are read a line at a time; numbers are read as whitespace
    separated tokens that may share a line or span several. Both kinds of
    read draw from the same buffered line, so a line read after a token read
    returns whatever is left of that line.
    """

    def __init__(self, stream: TextIO, console: Console):
        self._stream = stream
        self._console = console
        self._line: Optional[str] = None
        self._closed = False

    def __enter__(self) -> InputReader:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Release the buffered input. The underlying stream is left open."""
        self._line = None
        self._closed = True

    def _readline(self, prompt: str) -> str:
        if self._closed:
            raise ValueError("reader is closed")
        line = self._stream.readline()
        if line == "":
            raise EOFError(f"input ended while waiting for {prompt!r}")
        return line.rstrip("\r\n")

    def _next_token(self, prompt: str) -> str:
        while True:
            if self._line is None:
                self._line = self._readline(prompt)
            parts = self._line.split(None, 1)
            if parts:
                self._line = parts[1] if len(parts) > 1 else ""
                return parts[0]
            self._line = None

    def read_keyword(self, prompt: str) -> str:
        """Prompt, then read one line trimmed and lowercased."""
        self._console.print(prompt)
        if self._line is not None:
            line, self._line = self._line, None
        else:
            line = self._readline(prompt)
        keyword = line.strip().lower()
        logger.debug(f"Read keyword {keyword!r} for {prompt!r}")
        return keyword

    def read_number(self, prompt: str) -> float:
        """Prompt, then parse the next token as a float.

        Raises:
            ValueError: The token is not a number.
            EOFError: The stream ended before a token was found.
        """
        self._console.print(prompt)
        token = self._next_token(prompt)
        try:
            value = float(token)
        except ValueError:
            raise ValueError(f"expected a number for {prompt!r}, got {token!r}") from None
        logger.debug(f"Read {value} for {prompt!r}")
        return value


def calculate(shape_keyword: str, operation_keyword: str, reader: InputReader) -> Calculation:
    """Dispatch a normalized shape/operation pair to its formula.

    Reads the formula's dimensions through the reader in order. An unknown
    shape reads nothing and yields the zero sentinel.
    """
    shape = Shape.parse(shape_keyword)
    operation = Operation.parse(operation_keyword)
    formula = lookup_formula(shape, operation)
    if formula is None:
        logger.debug(f"Unknown shape {shape_keyword!r}, returning {UNKNOWN_SHAPE_RESULT}")
        return Calculation(shape=shape, operation=operation, result=UNKNOWN_SHAPE_RESULT)

    logger.debug(f"Dispatching {shape.name} {operation.name} to {formula.func.__name__}")
    values: dict[str, float] = {}
    for dimension in formula.dimensions:
        values[dimension.name] = reader.read_number(dimension.prompt)

    return Calculation(
        shape=shape,
        operation=operation,
        values=values,
        result=formula(*values.values()),
    )


def format_result(value: float) -> str:
    """Render a float the way the original calculator printed doubles.

    Plain decimal with at least one fractional digit for 1e-3 <= |v| < 1e7
    (and zero), otherwise d.dddE<exp>. Non-finite values print as NaN,
    Infinity or -Infinity.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    magnitude = abs(value)
    if value == 0 or 1e-3 <= magnitude < 1e7:
        return repr(value)

    sign = "-" if value < 0 else ""
    # repr gives the shortest digit string that round-trips
    exact = Decimal(repr(magnitude)).normalize().as_tuple()
    digits = "".join(str(d) for d in exact.digits)
    exponent = exact.exponent + len(digits) - 1
    return f"{sign}{digits[0]}.{digits[1:] or '0'}E{exponent}"


def write_result(console: Console, value: float) -> None:
    """Write the final "Resultado: <value>" line."""
    console.print(f"{RESULT_PREFIX}{format_result(value)}")


def run_session(reader: InputReader, console: Console) -> Calculation:
    """Run one full calculator session and return what was computed."""
    shape_keyword = reader.read_keyword(SHAPE_PROMPT)
    operation_keyword = reader.read_keyword(OPERATION_PROMPT)
    calculation = calculate(shape_keyword, operation_keyword, reader)
    write_result(console, calculation.result)
    logger.info(f"Computed {calculation.to_dict()}")
    return calculation
