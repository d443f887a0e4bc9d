import typing

from dimensional.core import kernels
from dimensional.core.kernels import N


class Factor(typing.Generic[N]):
    """A unitless multiplier for physical quantities.

    A factor wraps a single scalar value in a specific kernel. It exists so
    that scaling a quantity is always explicit: ``Factor(2.5) * force`` is
    valid while ``2.5 * force`` and ``force + Factor(2.5)`` are not. A factor
    only scales quantities whose kernel is the same as its own.

    Parameters
    ----------
    value : number or string
        The value of this factor. Strings must be acceptable to the kernel's
        scalar type (e.g., ``'4448.221615255'``).

    kernel : `~kernels.Kernel`, optional
        The kernel in which to represent `value`. By default, this class uses
        the kernel that matches the type of `value`, or the default kernel for
        built-in numbers and strings.
    """

    __slots__ = ('_value', '_kernel')

    def __init__(
        self,
        value: typing.Union[N, int, float, str],
        kernel: typing.Optional[kernels.Kernel[N]]=None,
    ) -> None:
        self._kernel = kernels.infer(value) if kernel is None else kernel
        self._value = self._kernel.cast(value)

    @property
    def value(self) -> N:
        """The scalar value of this factor."""
        return self._value

    @property
    def kernel(self) -> kernels.Kernel[N]:
        """The kernel that represents this factor's value."""
        return self._kernel

    def multiply(self, base: N) -> N:
        """Scale the base-unit magnitude `base` up by this factor."""
        return self._kernel.multiply(base, self._value)

    def divide(self, base: N) -> N:
        """Scale the base-unit magnitude `base` down by this factor."""
        return self._kernel.divide(base, self._value)

    def __mul__(self, other: 'Factor[N]') -> 'Factor[N]':
        """Called for self * other."""
        if not self._accepts(other):
            return NotImplemented
        value = self._kernel.multiply(self._value, other._value)
        return Factor(value, kernel=self._kernel)

    def __truediv__(self, other: 'Factor[N]') -> 'Factor[N]':
        """Called for self / other."""
        if not self._accepts(other):
            return NotImplemented
        value = self._kernel.divide(self._value, other._value)
        return Factor(value, kernel=self._kernel)

    def _accepts(self, other) -> bool:
        """True if `other` is a factor in the same kernel."""
        return isinstance(other, Factor) and other._kernel is self._kernel

    def __float__(self) -> float:
        """Called for float(self)."""
        return float(self._value)

    def __eq__(self, other) -> bool:
        """Called for self == other."""
        if not self._accepts(other):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((self._kernel.name, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self._value})"
