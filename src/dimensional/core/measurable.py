"""Physical quantities and their arithmetic.

A `~measurable.Quantity` pairs a real-valued amount with a `~metric.Unit`.
Arithmetic on quantities reconciles units through the unit algebra in
`~metric`: operands in different but compatible units (e.g., meters and
centimeters) are first expressed in their base units.

Bare real numbers act as dimensionless quantities wherever this module
expects a quantity. The conversion happens explicitly, in `quantify`, at the
boundary of each function and operator.
"""

import logging
import math
import typing

import numpy

from dimensional.core import algebraic
from dimensional.core import iterables
from dimensional.core import metric


logger = logging.getLogger(__name__)


class IncompatibleUnits(Exception):
    """The units of two quantities have different base forms."""

    def __init__(self, lhs: metric.Unit, rhs: metric.Unit) -> None:
        self.lhs = metric.display_name(lhs)
        """The display name of the left operand's unit."""
        self.rhs = metric.display_name(rhs)
        """The display name of the right operand's unit."""

    def __str__(self) -> str:
        return f"{self.lhs!r} and {self.rhs!r} are not compatible"


class Quantity(algebraic.Base, iterables.ReprStrMixin):
    """An amount measured in a unit.

    Instances are immutable. Every operation returns a new quantity, except
    that sums and differences of exactly zero return the shared
    `~measurable.NULL` quantity.

    Notes on arithmetic:
        - binary `+`, `-`, and ordering comparisons require units with the
          same base form, and raise `~measurable.IncompatibleUnits` otherwise
        - binary `*` and `/` accept any two units
        - the other operand of any binary operator may be a real number,
          which this class treats as a dimensionless quantity
        - division by a quantity with zero amount produces an infinite (or
          not-a-number) amount, following floating-point semantics
    """

    __slots__ = ('_amount', '_unit')

    def __init__(self, amount: algebraic.Real, unit: metric.Unit) -> None:
        if not algebraic.isreal(amount):
            raise TypeError(
                f"Amount must be a real number, not {type(amount)}"
            ) from None
        if not isinstance(unit, metric.Unit):
            raise TypeError(
                f"Expected a unit, not {type(unit)}"
            ) from None
        self._amount = amount
        self._unit = unit

    @property
    def amount(self):
        """The numerical value of this quantity."""
        return self._amount

    @property
    def unit(self) -> metric.Unit:
        """The unit of this quantity."""
        return self._unit

    def compare(self, other) -> int:
        """Compare self to other in the three-way sense.

        Quantities with a not-a-number amount are unordered, so `==` is
        false and ordering comparisons raise `TypeError`.
        """
        if not _coercible(other):
            return NotImplemented
        lhs, rhs = _ordered_amounts(self, quantify(other))
        if math.isnan(lhs) or math.isnan(rhs):
            return NotImplemented
        return _sign(lhs, rhs)

    def __abs__(self):
        """Called for abs(self)."""
        return Quantity(abs(self._amount), self._unit)

    def __neg__(self):
        """Called for -self."""
        return negate(self)

    def __pos__(self):
        """Called for +self."""
        return self

    def __add__(self, other):
        """Called for self + other."""
        if not _coercible(other):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        """Called for other + self."""
        if not _coercible(other):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        """Called for self - other."""
        if not _coercible(other):
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        """Called for other - self."""
        if not _coercible(other):
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        """Called for self * other."""
        if not _coercible(other):
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        """Called for other * self."""
        if not _coercible(other):
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other):
        """Called for self / other."""
        if not _coercible(other):
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        """Called for other / self."""
        if not _coercible(other):
            return NotImplemented
        return divide(other, self)

    def __float__(self) -> float:
        """Called for float(self).

        Only dimensionless quantities have a meaningful value without a unit.
        """
        if self._unit is not metric.IDENTITY:
            raise TypeError(
                f"Can't convert quantity in {self._unit.name!r} to float"
            ) from None
        return float(self._amount)

    def _display(self) -> str:
        return display(self)


NULL = Quantity(0, metric.IDENTITY)
"""The shared quantity for sums and differences that are exactly zero."""


QuantityLike = typing.Union[Quantity, algebraic.Real]


def _coercible(this) -> bool:
    """True if `quantify` will accept `this`."""
    return isinstance(this, Quantity) or algebraic.isreal(this)


def quantify(this: QuantityLike) -> Quantity:
    """Convert the argument into a quantity, if necessary.

    Parameters
    ----------
    this : `~measurable.Quantity` or real number
        A quantity, which this function returns unchanged, or a real number,
        which this function converts into a dimensionless quantity.

    Returns
    -------
    `~measurable.Quantity`

    Raises
    ------
    TypeError
        The argument is neither a quantity nor a real number.
    """
    if isinstance(this, Quantity):
        return this
    if algebraic.isreal(this):
        return Quantity(this, metric.IDENTITY)
    raise TypeError(f"Can't convert {type(this)} to a quantity") from None


def amount_of(this: QuantityLike):
    """The amount of a quantity, or the value of a real number."""
    return quantify(this).amount


def unit_of(this: QuantityLike) -> metric.Unit:
    """The unit of a quantity, or `~metric.IDENTITY` for a real number."""
    return quantify(this).unit


def _reduce(a: Quantity, b: Quantity):
    """Express both quantities in the base forms of their units."""
    logger.debug(
        "Converting %r and %r to base units",
        a.unit.name,
        b.unit.name,
    )
    lhs = a.unit.convert(a.amount)
    rhs = b.unit.convert(b.amount)
    return lhs, rhs


def add(a: QuantityLike, b: QuantityLike) -> Quantity:
    """Compute the sum of two quantities.

    Quantities in the same unit add directly. Otherwise, this function
    expresses both in base units and adds the results.

    Raises
    ------
    `~measurable.IncompatibleUnits`
        The base forms of the units are different.
    """
    a, b = quantify(a), quantify(b)
    if a.unit is b.unit:
        amount, unit = a.amount + b.amount, a.unit
    else:
        lhs, rhs = _reduce(a, b)
        if lhs.unit is not rhs.unit:
            raise IncompatibleUnits(a.unit, b.unit)
        amount, unit = lhs.amount + rhs.amount, lhs.unit
    if amount == 0:
        return NULL
    return Quantity(amount, unit)


def negate(a: QuantityLike) -> Quantity:
    """Compute the additive inverse of a quantity."""
    a = quantify(a)
    return Quantity(-a.amount, a.unit)


def subtract(a: QuantityLike, b: QuantityLike) -> Quantity:
    """Compute the difference of two quantities."""
    return add(a, negate(b))


def multiply(a: QuantityLike, b: QuantityLike) -> Quantity:
    """Compute the product of two quantities.

    If the quantities have the same unit, or if either is dimensionless, this
    function combines the units as they are. Otherwise, it first expresses
    both quantities in base units.
    """
    a, b = quantify(a), quantify(b)
    if a.unit is b.unit or metric.IDENTITY in {a.unit, b.unit}:
        unit = metric.multiply(a.unit, b.unit)
        return Quantity(a.amount * b.amount, unit)
    lhs, rhs = _reduce(a, b)
    unit = metric.multiply(lhs.unit, rhs.unit)
    return Quantity(lhs.amount * rhs.amount, unit)


def reciprocal(a: QuantityLike) -> Quantity:
    """Compute the multiplicative inverse of a quantity.

    The reciprocal of a quantity with zero amount has an infinite amount, as
    in floating-point division.
    """
    a = quantify(a)
    with numpy.errstate(divide='ignore'):
        amount = float(numpy.true_divide(1.0, a.amount))
    return Quantity(amount, metric.reciprocal(a.unit))


def divide(a: QuantityLike, b: QuantityLike) -> Quantity:
    """Compute the ratio of two quantities."""
    return multiply(a, reciprocal(b))


def _ordered_amounts(a: Quantity, b: Quantity):
    """The amounts of two quantities, expressed in a common unit."""
    if a.unit is b.unit:
        return a.amount, b.amount
    lhs, rhs = _reduce(a, b)
    if lhs.unit is not rhs.unit:
        raise IncompatibleUnits(a.unit, b.unit)
    return lhs.amount, rhs.amount


def _sign(lhs, rhs) -> int:
    return int(lhs > rhs) - int(lhs < rhs)


def compare(a: QuantityLike, b: QuantityLike) -> int:
    """Compare two quantities.

    Returns
    -------
    int
        -1, 0, or +1 if `a` is less than, equal to, or greater than `b`.

    Raises
    ------
    `~measurable.IncompatibleUnits`
        The base forms of the units are different.

    ValueError
        Either amount is not a number.
    """
    a, b = quantify(a), quantify(b)
    lhs, rhs = _ordered_amounts(a, b)
    if math.isnan(lhs) or math.isnan(rhs):
        raise ValueError(
            f"Can't order {display(a)!r} and {display(b)!r}:"
            " amount is not a number"
        ) from None
    return _sign(lhs, rhs)


def display(a: QuantityLike) -> str:
    """The display string of a quantity: its amount, then its unit."""
    a = quantify(a)
    return f"{a.amount} {a.unit.name}"
