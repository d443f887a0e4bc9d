import typing

from dimensional.core import algebraic
from dimensional.core import kernels
from dimensional.core import metric
from dimensional.core.kernels import N


Instance = typing.TypeVar('Instance', bound='Dimension')


class Dimension(algebraic.Quantity[N]):
    """A magnitude in one unit of a physical dimension.

    Concrete subclasses bind `Unit` to a `~metric.Unit` enumeration, which
    fixes the closed set of units that instances may carry. Instances are
    immutable.

    Parameters
    ----------
    magnitude : number or string
        The magnitude of this quantity in `unit`.

    unit : `~metric.Unit`
        A member of this class's `Unit` enumeration.

    kernel : `~kernels.Kernel`, optional
        The kernel in which to represent `magnitude`. By default, this class
        uses the kernel that matches the type of `magnitude`, or the default
        kernel for built-in numbers and strings.
    """

    Unit: typing.ClassVar[typing.Type[metric.Unit]]

    __slots__ = ('_magnitude', '_unit', '_kernel')

    def __init__(
        self,
        magnitude: typing.Union[N, int, float, str],
        unit: metric.Unit,
        kernel: typing.Optional[kernels.Kernel[N]]=None,
    ) -> None:
        if not isinstance(unit, self.Unit):
            raise TypeError(
                f"{self.__class__.__qualname__} can't have unit {unit!r}"
            ) from None
        self._kernel = kernels.infer(magnitude) if kernel is None else kernel
        self._magnitude = self._kernel.cast(magnitude)
        self._unit = unit

    @property
    def magnitude(self) -> N:
        """The magnitude of this quantity in its unit."""
        return self._magnitude

    @property
    def unit(self) -> metric.Unit:
        """The unit of this quantity."""
        return self._unit

    @property
    def kernel(self) -> kernels.Kernel[N]:
        return self._kernel

    def to_base_unit(self) -> N:
        if self._unit.isbase:
            return self._magnitude
        scale = self._unit.scale(self._kernel)
        return self._kernel.multiply(self._magnitude, scale)

    @classmethod
    def from_base_unit(cls: typing.Type[Instance], value: N) -> Instance:
        return cls(value, cls.Unit.base())

    def to(self: Instance, unit: metric.Unit) -> Instance:
        """Express this quantity in another unit of the same dimension."""
        if not isinstance(unit, self.Unit):
            raise TypeError(
                f"Can't express {self.__class__.__qualname__} in {unit!r}"
            ) from None
        if unit is self._unit:
            return self
        scale = unit.scale(self._kernel)
        magnitude = self._kernel.divide(self.to_base_unit(), scale)
        return type(self)(magnitude, unit, kernel=self._kernel)

    def in_base_unit(self: Instance) -> Instance:
        """Express this quantity in the base unit of its dimension."""
        return self.to(self.Unit.base())

    def __str__(self) -> str:
        return f"{self._magnitude} [{self._unit.symbol}]"

    def __repr__(self) -> str:
        name = self.__class__.__qualname__
        return f"{name}({self._magnitude}, unit={self._unit.symbol!r})"


class Force(Dimension[N]):
    """A force. The base unit is the newton."""

    Unit = metric.ForceUnit

    __slots__ = ()

    @classmethod
    def newton(cls, magnitude, kernel=None) -> 'Force':
        """Create a force in newtons."""
        return cls(magnitude, cls.Unit.NEWTON, kernel=kernel)

    @classmethod
    def kilopound(cls, magnitude, kernel=None) -> 'Force':
        """Create a force in kilopounds (kip)."""
        return cls(magnitude, cls.Unit.KILOPOUND, kernel=kernel)

    @classmethod
    def pound_force(cls, magnitude, kernel=None) -> 'Force':
        """Create a force in pounds-force."""
        return cls(magnitude, cls.Unit.POUND_FORCE, kernel=kernel)

    @classmethod
    def dyne(cls, magnitude, kernel=None) -> 'Force':
        return cls(magnitude, cls.Unit.DYNE, kernel=kernel)


class Temperature(Dimension[N]):
    """An absolute temperature. The base unit is the kelvin."""

    Unit = metric.TemperatureUnit

    __slots__ = ()

    @classmethod
    def kelvin(cls, magnitude, kernel=None) -> 'Temperature':
        """Create a temperature in kelvin."""
        return cls(magnitude, cls.Unit.KELVIN, kernel=kernel)

    @classmethod
    def rankine(cls, magnitude, kernel=None) -> 'Temperature':
        """Create a temperature in degrees Rankine."""
        return cls(magnitude, cls.Unit.RANKINE, kernel=kernel)


class Time(Dimension[N]):
    """A duration. The base unit is the second."""

    Unit = metric.TimeUnit

    __slots__ = ()

    @classmethod
    def second(cls, magnitude, kernel=None) -> 'Time':
        return cls(magnitude, cls.Unit.SECOND, kernel=kernel)

    @classmethod
    def minute(cls, magnitude, kernel=None) -> 'Time':
        return cls(magnitude, cls.Unit.MINUTE, kernel=kernel)

    @classmethod
    def hour(cls, magnitude, kernel=None) -> 'Time':
        return cls(magnitude, cls.Unit.HOUR, kernel=kernel)

    @classmethod
    def day(cls, magnitude, kernel=None) -> 'Time':
        return cls(magnitude, cls.Unit.DAY, kernel=kernel)


class Mass(Dimension[N]):
    """A mass. The base unit is the kilogram."""

    Unit = metric.MassUnit

    __slots__ = ()

    @classmethod
    def kilogram(cls, magnitude, kernel=None) -> 'Mass':
        """Create a mass in kilograms."""
        return cls(magnitude, cls.Unit.KILOGRAM, kernel=kernel)

    @classmethod
    def gram(cls, magnitude, kernel=None) -> 'Mass':
        """Create a mass in grams."""
        return cls(magnitude, cls.Unit.GRAM, kernel=kernel)

    @classmethod
    def tonne(cls, magnitude, kernel=None) -> 'Mass':
        """Create a mass in metric tons."""
        return cls(magnitude, cls.Unit.TONNE, kernel=kernel)

    @classmethod
    def pound(cls, magnitude, kernel=None) -> 'Mass':
        """Create a mass in avoirdupois pounds."""
        return cls(magnitude, cls.Unit.POUND, kernel=kernel)
