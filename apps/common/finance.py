"""
Money helpers for bill and expense totals.

All arithmetic goes through ``Decimal`` and is rounded to 2 decimal places,
half away from zero, before the result leaves this module. Inputs come
straight from form fields and stored rows, so anything that is not a finite
number is treated as zero instead of raising.

Example:
    Computing a bill line and its tax::

        from apps.common.finance import multiply, gst, add

        amount = multiply('6250.50', '10.125')   # Decimal('63286.31')
        tax = gst(amount)                        # Decimal('1898.59')
        grand_total = add(amount, tax)           # Decimal('65184.90')
"""

from dataclasses import dataclass
from decimal import Context, Decimal, DecimalException, ROUND_HALF_UP
from functools import reduce
import operator
from typing import Any, Iterable

from babel.numbers import format_currency as babel_format_currency

CENT = Decimal('0.01')
ZERO = Decimal('0.00')

# Flat GST on bullion and jewellery
GST_RATE = Decimal('0.03')

CURRENCY = 'INR'
CURRENCY_LOCALE = 'en_IN'


@dataclass(frozen=True)
class BillTotals:
    """Named money figures of a record, independent of how it stores ``total``."""

    taxable: Decimal
    tax: Decimal
    grand_total: Decimal


def to_decimal(value: Any) -> Decimal:
    """
    Parse a numeric value, returning zero for anything unusable.

    Floats are converted through their shortest repr, so ``1.005`` becomes
    ``Decimal('1.005')`` rather than its binary approximation.

    Examples:
        >>> to_decimal('12.50')
        Decimal('12.50')
        >>> to_decimal(None)
        Decimal('0')
        >>> to_decimal('abc')
        Decimal('0')
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return Decimal('0')
        try:
            result = Decimal(text)
        except DecimalException:
            return Decimal('0')
    else:
        return Decimal('0')

    if not result.is_finite():
        return Decimal('0')
    return result


def round2(value: Any) -> Decimal:
    """Round to 2 decimal places, half away from zero."""
    number = to_decimal(value)
    try:
        # Large magnitudes need more than the default 28 digits to keep 2 places
        context = Context(prec=max(28, number.adjusted() + 4))
        rounded = number.quantize(CENT, rounding=ROUND_HALF_UP, context=context)
    except (DecimalException, ValueError):
        # Too large to carry 2 decimal places
        return ZERO
    if rounded.is_zero():
        return ZERO
    return rounded


def _combine(operation, a: Any, b: Any) -> Decimal:
    try:
        result = operation(to_decimal(a), to_decimal(b))
    except DecimalException:
        return ZERO
    return round2(result)


def add(a: Any, b: Any) -> Decimal:
    return _combine(operator.add, a, b)


def subtract(a: Any, b: Any) -> Decimal:
    return _combine(operator.sub, a, b)


def multiply(a: Any, b: Any) -> Decimal:
    """Multiply and round, e.g. rate per gram times weight in grams."""
    return _combine(operator.mul, a, b)


def gst(amount: Any) -> Decimal:
    """GST due on a taxable amount at the fixed 3% rate."""
    return multiply(amount, GST_RATE)


def sum_amounts(values: Iterable[Any]) -> Decimal:
    """Fold ``add`` over values, so every partial sum stays rounded."""
    return reduce(add, values, ZERO)


def format_currency(amount: Any) -> str:
    """
    Format an amount as rupees with Indian digit grouping.

    Examples:
        >>> format_currency(120500.5)
        '₹1,20,500.50'
        >>> format_currency(None)
        '₹0.00'
    """
    return babel_format_currency(round2(amount), CURRENCY, locale=CURRENCY_LOCALE)
