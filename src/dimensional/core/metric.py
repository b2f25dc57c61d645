"""The algebra of units of measurement.

This module defines five kinds of unit:

- `~metric.BaseUnit`: an atomic, independent dimension (e.g., meter)
- `~metric.ProportionalUnit`: a unit that is a fixed multiple of another unit
  (e.g., centimeter)
- `~metric.IdentityUnit`: the dimensionless unit, available as
  `~metric.IDENTITY`
- `~metric.ProductUnit`: an ordered product of two or more units
- `~metric.QuotientUnit`: the ratio of two units

Units are equal only when they are the same object. Two separately created
``BaseUnit('m')`` instances are different units, as are two products built
from the same factors. Calling code should create each unit once and reuse it.
None of these classes defines `__eq__` or `__hash__`, and they should stay that
way: quantity arithmetic and quotient cancellation rely on identity.

The set of unit kinds is closed. Every function in this module handles every
pairing of the five kinds, and attempting to subclass `~metric.Unit` outside
this module raises `TypeError`.
"""

import abc
import numbers
import typing

from dimensional.core import algebraic
from dimensional.core import iterables


class Reduction(typing.NamedTuple):
    """An amount expressed in the base form of a unit.

    This stands in for a `~measurable.Quantity` in the base form of a unit,
    so that this module does not depend on `~measurable`. The two fields are
    the amount and the unit that a quantity would carry, and
    `~measurable.Quantity` arithmetic reads them directly.
    """

    amount: numbers.Real
    unit: 'Unit'


class Unit(iterables.ReprStrMixin, abc.ABC):
    """Abstract base class for units of measurement."""

    __slots__ = ()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Can't define {cls.__qualname__!r}:"
                " the set of unit types is closed"
            ) from None

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The display name of this unit."""
        pass

    @property
    @abc.abstractmethod
    def base_form(self) -> 'Unit':
        """This unit expressed only in terms of base units."""
        pass

    @abc.abstractmethod
    def convert(self, amount: algebraic.Real) -> Reduction:
        """Express `amount` of this unit in this unit's base form."""
        pass

    def __mul__(self, other):
        """Called for self * other."""
        if not isinstance(other, Unit):
            return NotImplemented
        return multiply(self, other)

    def __truediv__(self, other):
        """Called for self / other."""
        if not isinstance(other, Unit):
            return NotImplemented
        return divide(self, other)

    def _display(self) -> str:
        return self.name


class BaseUnit(Unit):
    """An atomic, independent unit of measurement."""

    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        if not isinstance(name, str):
            raise TypeError(
                f"Unit name must be a string, not {type(name)}"
            ) from None
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def base_form(self):
        """A base unit is its own base form."""
        return self

    def convert(self, amount):
        return Reduction(amount, self)


class ProportionalUnit(Unit):
    """A unit that is a fixed multiple of another unit.

    An amount in this unit, multiplied by `factor`, gives the equivalent
    amount in `base`. For example, a centimeter is a proportional unit with
    factor ``0.01`` and base unit meter.
    """

    __slots__ = ('_name', '_factor', '_base')

    def __init__(
        self,
        name: str,
        factor: algebraic.Real,
        base: Unit,
    ) -> None:
        if not isinstance(name, str):
            raise TypeError(
                f"Unit name must be a string, not {type(name)}"
            ) from None
        if not algebraic.isreal(factor):
            raise TypeError(
                f"Unit factor must be a real number, not {type(factor)}"
            ) from None
        if not isinstance(base, Unit):
            raise TypeError(
                f"Can't derive a unit from {type(base)}"
            ) from None
        self._name = name
        self._factor = factor
        self._base = base

    @property
    def name(self) -> str:
        return self._name

    @property
    def factor(self):
        """The amount of `base` in one of this unit."""
        return self._factor

    @property
    def base(self) -> Unit:
        """The unit from which this unit derives."""
        return self._base

    @property
    def base_form(self):
        """The base form of the unit from which this unit derives.

        The scale factor applies to amounts, not to the type of unit, so it
        does not appear in the result.
        """
        return self._base.base_form

    def convert(self, amount):
        """Express `amount` of this unit in the unit it derives from.

        Notes
        -----
        This method converts exactly one level. If `base` is itself a
        proportional unit, the result is in that unit rather than in its
        ultimate base unit.
        """
        return Reduction(amount * self._factor, self._base)


class IdentityUnit(iterables.Singleton, Unit):
    """The dimensionless unit.

    This class has exactly one instance, available as `~metric.IDENTITY`. It
    is the identity element of unit multiplication and division.
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        return ''

    @property
    def base_form(self):
        return self

    def convert(self, amount):
        return Reduction(amount, self)


IDENTITY = IdentityUnit()
"""The unique dimensionless unit."""


class ProductUnit(Unit):
    """The product of two or more units, in order.

    The order of factors determines the display name. It does not affect the
    physical meaning of the unit, but this class does not sort or otherwise
    normalize its factors.
    """

    __slots__ = ('_factors',)

    def __init__(self, factors: typing.Iterable[Unit]) -> None:
        factors = tuple(factors)
        if len(factors) < 2:
            raise ValueError(
                f"A product requires at least two factors, not {len(factors)}"
            ) from None
        _require_units(*factors)
        self._factors = factors

    @property
    def factors(self) -> typing.Tuple[Unit, ...]:
        """The units in this product."""
        return self._factors

    @property
    def name(self) -> str:
        return ' * '.join(f.name for f in self._factors)

    @property
    def base_form(self):
        return ProductUnit(f.base_form for f in self._factors)

    def convert(self, amount):
        """Express `amount` of this unit in this unit's base form.

        Each factor converts the running amount in turn, in factor order.
        """
        for factor in self._factors:
            amount = factor.convert(amount).amount
        return Reduction(amount, self.base_form)


Instance = typing.TypeVar('Instance', bound='QuotientUnit')


class QuotientUnit(Unit):
    """The ratio of two units.

    Creating a quotient of a unit with itself produces `~metric.IDENTITY`
    instead of an instance of this class.
    """

    __slots__ = ('_numerator', '_denominator')

    def __new__(
        cls: typing.Type[Instance],
        numerator: Unit,
        denominator: Unit,
    ):
        """Create a new quotient or cancel identical units."""
        _require_units(numerator, denominator)
        if numerator is denominator:
            return IDENTITY
        return super().__new__(cls)

    def __init__(self, numerator: Unit, denominator: Unit) -> None:
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> Unit:
        """The unit above the line."""
        return self._numerator

    @property
    def denominator(self) -> Unit:
        """The unit below the line."""
        return self._denominator

    @property
    def name(self) -> str:
        """The display name of this unit.

        The denominator is in parentheses if it is a product. The numerator
        never is.
        """
        lhs = self._numerator.name
        rhs = self._denominator.name
        if isinstance(self._denominator, ProductUnit):
            return f"{lhs} / ({rhs})"
        return f"{lhs} / {rhs}"

    @property
    def base_form(self):
        return QuotientUnit(
            self._numerator.base_form,
            self._denominator.base_form,
        )

    def convert(self, amount):
        """Express `amount` of this unit in this unit's base form.

        The numerator converts `amount` and the denominator contributes the
        amount that corresponds to one of its own units.
        """
        numerator = self._numerator.convert(amount).amount
        denominator = self._denominator.convert(1).amount
        return Reduction(numerator / denominator, self.base_form)


UnitLike = typing.Union[
    BaseUnit,
    ProportionalUnit,
    IdentityUnit,
    ProductUnit,
    QuotientUnit,
]


def _require_units(*args) -> None:
    """Raise an exception if any argument is not a unit."""
    for arg in args:
        if not isinstance(arg, Unit):
            raise TypeError(f"Expected a unit, not {type(arg)}") from None


def _factors_of(unit: Unit) -> typing.Tuple[Unit, ...]:
    """The factors to contribute to a product."""
    if isinstance(unit, ProductUnit):
        return unit.factors
    return (unit,)


def multiply(u: Unit, v: Unit) -> Unit:
    """Compute the product of two units.

    Parameters
    ----------
    u, v : `~metric.Unit`
        The left and right factors.

    Returns
    -------
    `~metric.Unit`
        - `v` (or `u`) itself if the other factor is `~metric.IDENTITY`
        - a quotient if either factor is a quotient, with the other factor
          multiplied into the numerator
        - otherwise, a product of the factors, in which any existing product
          contributes its factors rather than itself
    """
    _require_units(u, v)
    if u is IDENTITY:
        return v
    if v is IDENTITY:
        return u
    if isinstance(u, QuotientUnit):
        if isinstance(v, QuotientUnit):
            return QuotientUnit(
                multiply(u.numerator, v.numerator),
                multiply(u.denominator, v.denominator),
            )
        return QuotientUnit(multiply(u.numerator, v), u.denominator)
    if isinstance(v, QuotientUnit):
        return QuotientUnit(multiply(u, v.numerator), v.denominator)
    return ProductUnit(_factors_of(u) + _factors_of(v))


def divide(u: Unit, v: Unit) -> Unit:
    """Compute the ratio of two units.

    Parameters
    ----------
    u : `~metric.Unit`
        The dividend.

    v : `~metric.Unit`
        The divisor.

    Returns
    -------
    `~metric.Unit`
        - `u` itself if `v` is `~metric.IDENTITY`
        - the reciprocal of `v` if `u` is `~metric.IDENTITY`
        - ``(u * q) / p`` if `v` is ``p / q``
        - ``n / (d * v)`` if `u` is ``n / d``
        - otherwise, the quotient ``u / v``, which cancels to
          `~metric.IDENTITY` if `u` and `v` are the same unit
    """
    _require_units(u, v)
    if v is IDENTITY:
        return u
    if u is IDENTITY:
        return reciprocal(v)
    if isinstance(v, QuotientUnit):
        if isinstance(u, QuotientUnit):
            return QuotientUnit(
                multiply(u.numerator, v.denominator),
                multiply(u.denominator, v.numerator),
            )
        return QuotientUnit(multiply(u, v.denominator), v.numerator)
    if isinstance(u, QuotientUnit):
        return QuotientUnit(u.numerator, multiply(u.denominator, v))
    return QuotientUnit(u, v)


def reciprocal(u: Unit) -> Unit:
    """Compute the reciprocal of a unit."""
    _require_units(u)
    if u is IDENTITY:
        return IDENTITY
    if isinstance(u, QuotientUnit):
        return QuotientUnit(u.denominator, u.numerator)
    return QuotientUnit(IDENTITY, u)


def base_form(u: Unit) -> Unit:
    """Reduce every unit in `u` to its ultimate base unit."""
    _require_units(u)
    return u.base_form


def convert_to_base(u: Unit, amount: algebraic.Real) -> Reduction:
    """Express `amount` of `u` in the base form of `u`."""
    _require_units(u)
    return u.convert(amount)


def display_name(u: Unit) -> str:
    """The canonical display string of `u`."""
    _require_units(u)
    return u.name
