class Singleton:
    """A simple base class for creating singletons.

    Each concrete subclass has at most one instance. Calling the class again
    returns that instance without re-running `__init__` on a new object.
    """

    __slots__ = ()

    _exists = False
    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._exists:
            return cls._instance
        new = super(Singleton, cls).__new__(cls)
        cls._exists = True
        cls._instance = new
        return new


class ReprStrMixin:
    """A mixin class that provides support for `__repr__` and `__str__`.

    Concrete subclasses define `_display`, which returns the simplified string
    form of an instance. This mixin uses that string for `__str__` and embeds
    it in the more explicit `__repr__`.
    """

    __slots__ = ()

    def _display(self) -> str:
        """The simplified string form of this object."""
        return ''

    def __str__(self) -> str:
        """A simplified representation of this object."""
        return self._display()

    def __repr__(self) -> str:
        """An unambiguous representation of this object."""
        module = f"{self.__module__.replace('dimensional.', '')}."
        name = self.__class__.__qualname__
        return f"{module}{name}({self})"
