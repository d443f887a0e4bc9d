"""
Closed sets of units for each physical dimension.

Each set names one base unit, whose conversion factor is exactly 1, and any
number of other units. The factor of a unit is the magnitude, in the base
unit, of one of that unit. All conversions are linear: a unit with an offset
(e.g., degrees Celsius) can't belong to any of these sets.
"""
import enum
import fractions
import typing

from dimensional.core import kernels
from dimensional.core.kernels import N


class UnitDefinitionError(Exception):
    """A set of units is malformed."""


class Unit(enum.Enum):
    """Base class for the units of a single dimension.

    The value of each member is a two-tuple containing the unit's symbol and
    its conversion factor into the base unit. The factor is a string that
    `fractions.Fraction` can parse (e.g., '4448.221615255' or '5/9') so that
    every kernel receives it at the best precision it can hold.
    """

    def __init__(self, symbol: str, factor: str) -> None:
        self.symbol = symbol
        self.factor = factor

    def scale(self, kernel: kernels.Kernel[N]) -> N:
        """This unit's conversion factor, as a value in `kernel`.

        Kernels that parse the factor string directly receive it unchanged.
        Other forms (e.g., '5/9') go through `fractions.Fraction` first.
        """
        try:
            return kernel.cast(self.factor)
        except (TypeError, ValueError, ArithmeticError):
            return kernel.cast(fractions.Fraction(self.factor))

    @property
    def isbase(self) -> bool:
        """True if this is the base unit of its set."""
        return fractions.Fraction(self.factor) == 1

    @classmethod
    def base(cls):
        """The base unit of this set."""
        for member in cls:
            if member.isbase:
                return member
        raise UnitDefinitionError(f"{cls.__qualname__} has no base unit")


U = typing.TypeVar('U', bound=typing.Type[Unit])


def verify(units: U) -> U:
    """Ensure that `units` is a well-formed set of units.

    A well-formed set has exactly one base unit, a positive factor for every
    unit, and no repeated symbols.
    """
    members = list(units)
    bases = [member for member in members if member.isbase]
    if len(bases) != 1:
        raise UnitDefinitionError(
            f"{units.__qualname__} must have exactly one base unit"
            f"; found {len(bases)}"
        )
    for member in members:
        if fractions.Fraction(member.factor) <= 0:
            raise UnitDefinitionError(
                f"The factor of {member!r} must be positive"
            )
    symbols = [member.symbol for member in members]
    if len(set(symbols)) != len(symbols):
        raise UnitDefinitionError(
            f"{units.__qualname__} repeats a symbol: {symbols}"
        )
    return units


@verify
class ForceUnit(Unit):
    """Units of force. The base unit is the newton."""

    NEWTON = ('N', '1')
    KILOPOUND = ('kip', '4448.221615255')
    POUND_FORCE = ('lbf', '4.4482216152605')
    DYNE = ('dyn', '1e-5')


@verify
class TemperatureUnit(Unit):
    """Units of absolute temperature. The base unit is the kelvin."""

    KELVIN = ('K', '1')
    RANKINE = ('°R', '5/9')


@verify
class TimeUnit(Unit):
    """Units of time. The base unit is the second."""

    SECOND = ('s', '1')
    MINUTE = ('min', '60')
    HOUR = ('h', '3600')
    DAY = ('d', '86400')


@verify
class MassUnit(Unit):
    """Units of mass. The base unit is the kilogram."""

    KILOGRAM = ('kg', '1')
    GRAM = ('g', '0.001')
    TONNE = ('t', '1000')
    POUND = ('lb', '0.45359237')
