import abc
import numbers
import typing

import numpy


Real = typing.Union[numbers.Real, numpy.floating, numpy.integer]


def isreal(this) -> bool:
    """True if `this` is a single real number.

    Python booleans are numbers in the strict sense but they are not amounts,
    so this function excludes them.
    """
    if isinstance(this, (bool, numpy.bool_)):
        return False
    return isinstance(this, numbers.Real)


class Ordered(abc.ABC):
    """Abstract base class for all objects that support relative ordering.

    Concrete implementations of this class must define the three-way
    comparator `compare`, which returns a negative integer, zero, or a positive
    integer when ``self`` is less than, equal to, or greater than ``other``. It
    may also return `NotImplemented` for unsupported operands.

    This class then defines the six binary comparison operators (a.k.a "rich
    comparison" operators) in terms of that single method:

    - `__lt__`: compared value is negative
    - `__le__`: compared value is not positive
    - `__gt__`: compared value is positive
    - `__ge__`: compared value is not negative
    - `__eq__`: compared value is zero
    - `__ne__`: compared value is not zero
    """

    __slots__ = ()

    __hash__ = None

    @abc.abstractmethod
    def compare(self, other) -> int:
        """Compare self to other in the three-way sense."""
        pass

    def __lt__(self, other) -> bool:
        """True if self < other."""
        result = self.compare(other)
        return result if result is NotImplemented else result < 0

    def __le__(self, other) -> bool:
        """True if self <= other."""
        result = self.compare(other)
        return result if result is NotImplemented else result <= 0

    def __gt__(self, other) -> bool:
        """True if self > other."""
        result = self.compare(other)
        return result if result is NotImplemented else result > 0

    def __ge__(self, other) -> bool:
        """True if self >= other."""
        result = self.compare(other)
        return result if result is NotImplemented else result >= 0

    def __eq__(self, other) -> bool:
        """True if self == other."""
        result = self.compare(other)
        return result if result is NotImplemented else result == 0

    def __ne__(self, other) -> bool:
        """True if self != other."""
        result = self.compare(other)
        return result if result is NotImplemented else result != 0


Self = typing.TypeVar('Self', bound='Additive')


class Additive(abc.ABC):
    """Abstract base class for additive objects.

    Concrete subclasses must implement forward and reflected addition and
    subtraction, and negation.
    """

    __slots__ = ()

    @abc.abstractmethod
    def __add__(self: Self, other) -> Self:
        pass

    @abc.abstractmethod
    def __radd__(self: Self, other) -> Self:
        pass

    @abc.abstractmethod
    def __neg__(self: Self) -> Self:
        pass

    @abc.abstractmethod
    def __sub__(self: Self, other) -> Self:
        pass

    @abc.abstractmethod
    def __rsub__(self: Self, other) -> Self:
        pass


Self = typing.TypeVar('Self', bound='Multiplicative')


class Multiplicative(abc.ABC):
    """Abstract base class for multiplicative objects."""

    __slots__ = ()

    @abc.abstractmethod
    def __mul__(self: Self, other) -> Self:
        pass

    @abc.abstractmethod
    def __rmul__(self: Self, other) -> Self:
        pass

    @abc.abstractmethod
    def __truediv__(self: Self, other) -> Self:
        pass

    @abc.abstractmethod
    def __rtruediv__(self: Self, other) -> Self:
        pass


class Base(Ordered, Additive, Multiplicative):
    """Base class for algebraic quantities.

    Concrete subclasses of this class must implement the three-way comparator
    `compare`, the unary arithmetic operators

        - `__abs__` (absolute value; called for `abs(self)`)
        - `__neg__` (negative value; called for `-self`)
        - `__pos__` (positive value; called for `+self`)

    and the forward and reflected versions of `+`, `-`, `*`, and `/`.
    Comparison comes from `~algebraic.Ordered`. Any required method may
    return `NotImplemented`.
    """

    __slots__ = ()

    @abc.abstractmethod
    def __abs__(self):
        """Implements abs(self)."""
        pass

    @abc.abstractmethod
    def __pos__(self):
        """Called for +self."""
        pass
