"""
PURPOSE: Digit extraction and parity helpers for tick data.
Derives the terminal digit the prediction models consume from a raw quote.
"""

import math

import numpy as np


def is_even_digit(digit: int) -> bool:
    """Return True when the digit is even."""
    return digit % 2 == 0


def last_digit_of_quote(quote: float) -> int:
    """
    PURPOSE: Extract the terminal digit of a price quote.

    Renders the quote as its shortest positional decimal string, never in
    exponent form, so 0.00005123 -> 3 and 1.5e16 -> 0. Trailing zeros dropped
    by the float representation are not counted (123.40 -> 4), and whole
    numbers have no fractional part (42.0 -> 2).

    Args:
        quote: Price quote.

    Returns:
        int: Last digit of the quote's decimal string form.

    Raises:
        ValueError: If the quote is not a finite number.
    """
    value = float(quote)
    if not math.isfinite(value):
        raise ValueError(f"Cannot extract terminal digit from quote {quote!r}")

    text = np.format_float_positional(value, trim="-")
    return int(text[-1])
