"""
Scalar representations that carry the arithmetic of physical quantities.
"""
import abc
import fractions
import functools
import logging
import numbers
import operator as standard
import typing

import numpy

import dimensional


_log = logging.getLogger(__name__)


@typing.runtime_checkable
class Numeric(typing.Protocol):
    """Protocol for scalars that support group and field operations.

    Instance checks against this protocol will return `True` iff the instance
    implements the following methods: `__add__`, `__sub__`, `__neg__`,
    `__mul__`, and `__truediv__`. Built-in numbers, `numpy` scalars, and
    `fractions.Fraction` all qualify.
    """

    __slots__ = ()

    @abc.abstractmethod
    def __add__(self, other):
        pass

    @abc.abstractmethod
    def __sub__(self, other):
        pass

    @abc.abstractmethod
    def __neg__(self):
        pass

    @abc.abstractmethod
    def __mul__(self, other):
        pass

    @abc.abstractmethod
    def __truediv__(self, other):
        pass


N = typing.TypeVar('N', bound=Numeric)


class KernelError(KeyError):
    """No kernel matches the request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class Kernel(typing.Generic[N]):
    """Arithmetic over one concrete scalar type.

    Every operation first casts its operands to `type`, so results are always
    instances of `type` regardless of whether the caller passed built-in
    numbers. Kernels built on a `numpy.floating` type follow IEEE 754 for
    exceptional cases: division by zero produces an infinity or NaN and
    overflow produces an infinity, without raising and without warnings. Other
    kernels keep whatever their type does (e.g., `fractions.Fraction` raises
    `ZeroDivisionError`).
    """

    def __init__(self, name: str, __type: typing.Type[N]) -> None:
        self.name = name
        """The name under which to register this kernel."""
        self.type = __type
        """The scalar type of all values that this kernel produces."""
        self._ieee = issubclass(__type, numpy.floating)

    def cast(self, value) -> N:
        """Convert `value` to this kernel's scalar type.

        `value` may be a number of any type or a string that the scalar type
        can parse. Real numbers that the scalar type does not accept directly
        pass through `float` first.
        """
        if isinstance(value, self.type):
            return value
        try:
            return self.type(value)
        except (TypeError, ValueError):
            if isinstance(value, numbers.Real):
                return self.type(float(value))
            raise

    def add(self, a, b) -> N:
        """Compute a + b."""
        return self._evaluate(standard.add, a, b)

    def subtract(self, a, b) -> N:
        """Compute a - b."""
        return self._evaluate(standard.sub, a, b)

    def negate(self, a) -> N:
        """Compute -a."""
        return self._evaluate(standard.neg, a)

    def multiply(self, a, b) -> N:
        """Compute a * b."""
        return self._evaluate(standard.mul, a, b)

    def divide(self, a, b) -> N:
        """Compute a / b."""
        return self._evaluate(standard.truediv, a, b)

    def _evaluate(self, func: typing.Callable[..., N], *args) -> N:
        """Apply `func` to the cast operands."""
        values = [self.cast(arg) for arg in args]
        if self._ieee:
            with numpy.errstate(all='ignore'):
                return func(*values)
        return func(*values)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.name!r})"


FLOAT64: Kernel[numpy.float64] = Kernel('float64', numpy.float64)
FLOAT32: Kernel[numpy.float32] = Kernel('float32', numpy.float32)
EXACT: Kernel[fractions.Fraction] = Kernel('exact', fractions.Fraction)


KERNELS: typing.Dict[str, Kernel] = {}
"""All known kernels, by name."""


def register(new: Kernel) -> Kernel:
    """Make `new` available by name and by scalar type.

    Registering the same kernel twice has no effect. Each name and each scalar
    type may belong to only one kernel.
    """
    for existing in KERNELS.values():
        if existing is new:
            return new
        if existing.name == new.name:
            raise KernelError(
                f"A different kernel named {new.name!r} already exists"
            )
        if existing.type is new.type:
            raise KernelError(
                f"Kernel {existing.name!r} already handles {new.type!r}"
            )
    KERNELS[new.name] = new
    _log.debug("Registered kernel %r for %r", new.name, new.type)
    return new


for _kernel in (FLOAT64, FLOAT32, EXACT):
    register(_kernel)


def get(name: str) -> Kernel:
    """Look up a registered kernel by name."""
    if name in KERNELS:
        return KERNELS[name]
    raise KernelError(
        f"Unknown kernel {name!r}; available kernels are {sorted(KERNELS)}"
    )


@functools.lru_cache(maxsize=None)
def default() -> Kernel:
    """The kernel selected by the `kernel` setting.

    The result is cached; call ``default.cache_clear()`` after changing the
    settings in the same process.
    """
    settings = dimensional.Environment()
    name = settings.get('kernel', FLOAT64.name).strip()
    found = get(name)
    _log.debug("Using default kernel %r (settings: %s)", name, settings.path)
    return found


def infer(value) -> Kernel:
    """Find the kernel that produces values of the same type as `value`.

    Built-in Python numbers, integers of any type, and strings map to the
    default kernel. Any other type must belong to a registered kernel.

    Raises
    ------
    KernelError
        No registered kernel handles the type of `value`.
    """
    for kernel in KERNELS.values():
        if type(value) is kernel.type:
            return kernel
    for kernel in KERNELS.values():
        if isinstance(value, kernel.type):
            return kernel
    if isinstance(value, (numbers.Integral, float, str)):
        return default()
    raise KernelError(
        f"No registered kernel handles {type(value)!r}"
        "; register one with kernels.register"
    )
