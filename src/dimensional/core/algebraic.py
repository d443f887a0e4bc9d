import abc
import operator as standard
import typing

import numpy

from dimensional.core import factor
from dimensional.core import kernels
from dimensional.core.kernels import N


Self = typing.TypeVar('Self', bound='Quantity')


class Quantity(abc.ABC, typing.Generic[N]):
    """ABC for physical quantities in one dimension.

    Concrete subclasses must define `to_base_unit`, which expresses an
    instance in the canonical unit of its dimension, and the class method
    `from_base_unit`, which builds an instance from a magnitude in that unit.
    In exchange, this class implements the following operators once, for
    every dimension:

        - unary `-` and `+` on an instance
        - binary `+` and `-` between two instances of the same type
        - symmetric binary `*` between an instance and a `~factor.Factor`
        - binary `/` of an instance by a `~factor.Factor`
        - binary `/` between two instances of the same type, which produces
          their dimensionless ratio as a `~factor.Factor`
        - the six comparison operators between two instances of the same type

    Every operand must share the same `~kernels.Kernel`. Operations on any
    other combination of operands return `NotImplemented`, which causes Python
    to raise `TypeError`, and the operator signatures declare the same
    restrictions for static type checkers.

    Notes
    -----
    The result of an arithmetic operation is always in the base unit, even if
    neither operand was (e.g., the sum of two forces in kilopounds is a force
    in newtons), because each operator builds its result via `from_base_unit`.
    """

    __slots__ = ()

    @abc.abstractmethod
    def to_base_unit(self) -> N:
        """The magnitude of this quantity in its dimension's base unit."""
        pass

    @classmethod
    @abc.abstractmethod
    def from_base_unit(cls: typing.Type[Self], value: N) -> Self:
        """Create a quantity in the base unit from a base-unit magnitude."""
        pass

    @property
    def kernel(self) -> kernels.Kernel[N]:
        """The kernel that represents this quantity's magnitude."""
        return kernels.infer(self.to_base_unit())

    def isclose(
        self: Self,
        other: Self,
        rtol: float=1e-05,
        atol: float=1e-08,
    ) -> bool:
        """True if `other` is equal to this quantity within a tolerance.

        The comparison uses base-unit magnitudes and follows the semantics of
        `numpy.isclose`.
        """
        if not self.compatible(other):
            raise TypeError(
                f"Can't compare {type(self).__qualname__}"
                f" to {type(other).__qualname__}"
            ) from None
        a, b = float(self.to_base_unit()), float(other.to_base_unit())
        return bool(numpy.isclose(a, b, rtol=rtol, atol=atol))

    def compatible(self, other) -> bool:
        """True if `other` may combine with this quantity."""
        return type(other) is type(self) and other.kernel is self.kernel

    def __bool__(self) -> bool:
        """Always true for a valid instance."""
        return True

    def __pos__(self: Self) -> Self:
        """Called for +self."""
        return self

    def __neg__(self: Self) -> Self:
        """Called for -self."""
        return self.implement('negate', 'arithmetic')

    def __add__(self: Self, other: Self) -> Self:
        """Called for self + other."""
        return self.implement('add', 'forward', other)

    def __sub__(self: Self, other: Self) -> Self:
        """Called for self - other."""
        return self.implement('subtract', 'forward', other)

    def __mul__(self: Self, other: 'factor.Factor[N]') -> Self:
        """Called for self * other."""
        return self.implement('multiply', 'scale', other)

    def __rmul__(self: Self, other: 'factor.Factor[N]') -> Self:
        """Called for other * self."""
        return self.implement('multiply', 'scale', other)

    @typing.overload
    def __truediv__(self: Self, other: 'factor.Factor[N]') -> Self: ...

    @typing.overload
    def __truediv__(self: Self, other: Self) -> 'factor.Factor[N]': ...

    def __truediv__(self, other):
        """Called for self / other."""
        if isinstance(other, factor.Factor):
            return self.implement('divide', 'scale', other)
        return self.implement('divide', 'ratio', other)

    def __eq__(self, other) -> bool:
        """Called for self == other."""
        return self.implement('eq', 'comparison', other)

    def __ne__(self, other) -> bool:
        """Called for self != other."""
        return self.implement('ne', 'comparison', other)

    def __lt__(self: Self, other: Self) -> bool:
        """Called for self < other."""
        return self.implement('lt', 'comparison', other)

    def __le__(self: Self, other: Self) -> bool:
        """Called for self <= other."""
        return self.implement('le', 'comparison', other)

    def __gt__(self: Self, other: Self) -> bool:
        """Called for self > other."""
        return self.implement('gt', 'comparison', other)

    def __ge__(self: Self, other: Self) -> bool:
        """Called for self >= other."""
        return self.implement('ge', 'comparison', other)

    def __hash__(self) -> int:
        return hash((type(self), self.to_base_unit()))

    def implement(self, name: str, mode: str, *others):
        """Implement a standard operation in base units.

        Parameters
        ----------
        name : string
            The name of the `~kernels.Kernel` or `~factor.Factor` method that
            computes the new base-unit magnitude, or the name of a comparison
            operator (e.g., 'lt').

        mode : {'arithmetic', 'forward', 'scale', 'ratio', 'comparison'}
            The kind of operation.

        *others
            The other operand, if any.
        """
        if mode == 'arithmetic':
            method = getattr(self.kernel, name)
            return self.from_base_unit(method(self.to_base_unit()))
        other = others[0]
        if mode == 'scale':
            if not isinstance(other, factor.Factor):
                return NotImplemented
            if other.kernel is not self.kernel:
                return NotImplemented
            method = getattr(other, name)
            return self.from_base_unit(method(self.to_base_unit()))
        if not self.compatible(other):
            return NotImplemented
        args = self.to_base_unit(), other.to_base_unit()
        if mode == 'forward':
            method = getattr(self.kernel, name)
            return self.from_base_unit(method(*args))
        if mode == 'ratio':
            method = getattr(self.kernel, name)
            return factor.Factor(method(*args), kernel=self.kernel)
        if mode == 'comparison':
            return bool(getattr(standard, name)(*args))
        raise ValueError(f"Unknown operator mode {mode!r}")
