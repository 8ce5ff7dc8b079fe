"""Validated console input for the interactive solver.

The ``parse_*`` functions turn one line of user text into a value or raise
``ValueError`` with a message meant for the user; the ``read_*`` functions
keep prompting until a line parses.
"""

import logging
import math

from sympy.parsing.sympy_parser import (
    parse_expr, standard_transformations, convert_xor,
)

logger = logging.getLogger(__name__)

TRANSFORMATIONS = standard_transformations + (convert_xor,)

MAX_MAGNITUDE = 1e12


def parse_int_in_range(text: str, min_value: int, max_value: int) -> int:
    """Parse an integer in ``[min_value, max_value]``."""
    text = text.strip()
    if not text:
        raise ValueError(
            f"Input cannot be empty. Please enter a number between "
            f"{min_value} and {max_value}.")
    try:
        value = int(text)
    except ValueError:
        raise ValueError(
            f"Invalid input '{text}'. Please enter a valid integer between "
            f"{min_value} and {max_value}.")
    if value < min_value:
        raise ValueError(
            f"Value too small. Please enter a number greater than or equal to "
            f"{min_value}.")
    if value > max_value:
        raise ValueError(
            f"Value too large. Please enter a number less than or equal to "
            f"{max_value}.")
    return value


def parse_number(text: str, max_magnitude: float = MAX_MAGNITUDE) -> float:
    """Parse a real number such as ``2.5``, ``-3``, ``2,5`` or ``3/4``.

    Fractions and simple arithmetic are evaluated with SymPy and converted
    to a float.  Complex, non-finite and oversized values are rejected.
    """
    text = text.strip()
    if not text:
        raise ValueError("Input cannot be empty. Please enter a number.")

    # Comma as decimal separator
    normalized = text.replace(',', '.')
    try:
        expr = parse_expr(normalized, transformations=TRANSFORMATIONS)
    except Exception:
        raise ValueError(
            f"Invalid input '{text}'. Please enter a valid number "
            f"(e.g., 2.5, -3, 0.75, 3/4).")

    if not getattr(expr, "is_number", False):
        raise ValueError(
            f"Invalid input '{text}'. Please enter a valid number "
            f"(e.g., 2.5, -3, 0.75, 3/4).")
    if expr.is_finite is False:
        raise ValueError("Invalid number. Please enter a finite number.")
    if expr.is_real is False:
        raise ValueError("Complex numbers are not supported. Please enter a real number.")

    try:
        value = float(expr)
    except (TypeError, ValueError):
        raise ValueError("Invalid number. Please enter a finite number.")

    if math.isinf(value) or math.isnan(value):
        raise ValueError("Invalid number. Please enter a finite number.")
    if abs(value) > max_magnitude:
        raise ValueError(
            f"Number too large. Please enter a smaller number "
            f"(absolute value < {max_magnitude:g}).")
    return value


def read_int_in_range(prompt: str, min_value: int, max_value: int,
                      input_func=input, output_func=print) -> int:
    while True:
        raw = input_func(prompt)
        try:
            value = parse_int_in_range(raw, min_value, max_value)
        except ValueError as e:
            logger.debug("Rejected integer input %r: %s", raw, e)
            output_func(str(e))
            continue
        return value


def read_number(prompt: str, max_magnitude: float = MAX_MAGNITUDE,
                input_func=input, output_func=print) -> float:
    while True:
        raw = input_func(prompt)
        try:
            value = parse_number(raw, max_magnitude)
        except ValueError as e:
            logger.debug("Rejected number input %r: %s", raw, e)
            output_func(str(e))
            continue
        return value
