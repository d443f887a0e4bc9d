import decimal
import fractions

import numpy
import pytest

from dimensional.core import kernels
from dimensional.core import metric


UNIT_SETS = {
    metric.ForceUnit: metric.ForceUnit.NEWTON,
    metric.TemperatureUnit: metric.TemperatureUnit.KELVIN,
    metric.TimeUnit: metric.TimeUnit.SECOND,
    metric.MassUnit: metric.MassUnit.KILOGRAM,
}


@pytest.mark.dimension
def test_base_units():
    """Each set of units has exactly one base unit."""
    for units, base in UNIT_SETS.items():
        assert units.base() is base
        assert base.isbase
        assert base.factor == '1'
        assert [unit for unit in units if unit.isbase] == [base]


@pytest.mark.dimension
def test_unit_attributes():
    """Units carry a symbol and a conversion factor."""
    kip = metric.ForceUnit.KILOPOUND
    assert kip.symbol == 'kip'
    assert kip.factor == '4448.221615255'
    assert kip.scale(kernels.FLOAT64) == 4448.221615255
    assert isinstance(kip.scale(kernels.FLOAT32), numpy.float32)
    exact = kip.scale(kernels.EXACT)
    assert exact == fractions.Fraction(4448221615255, 10**9)


@pytest.mark.dimension
def test_exact_factors():
    """Factors keep full precision in the exact kernel."""
    rankine = metric.TemperatureUnit.RANKINE
    assert rankine.scale(kernels.EXACT) == fractions.Fraction(5, 9)
    assert rankine.scale(kernels.FLOAT64) == pytest.approx(5 / 9)
    dyne = metric.ForceUnit.DYNE
    assert dyne.scale(kernels.EXACT) == fractions.Fraction(1, 100000)


@pytest.mark.dimension
def test_decimal_factors():
    """Kernels that parse decimal strings receive the factor unchanged."""
    decimals = kernels.Kernel('decimal', decimal.Decimal)
    kip = metric.ForceUnit.KILOPOUND
    assert kip.scale(decimals) == decimal.Decimal('4448.221615255')
    assert metric.ForceUnit.DYNE.scale(decimals) == decimal.Decimal('1e-5')
    rankine = metric.TemperatureUnit.RANKINE.scale(decimals)
    assert isinstance(rankine, decimal.Decimal)
    assert float(rankine) == pytest.approx(5 / 9)


@pytest.mark.dimension
def test_verify_rejects_missing_base():
    class NoBase(metric.Unit):
        A = ('a', '2')
        B = ('b', '3')

    with pytest.raises(metric.UnitDefinitionError):
        metric.verify(NoBase)
    with pytest.raises(metric.UnitDefinitionError):
        NoBase.base()


@pytest.mark.dimension
def test_verify_rejects_malformed_sets():
    """Sets must have one base, positive factors, and distinct symbols."""

    class TwoBases(metric.Unit):
        A = ('a', '1')
        B = ('b', '1.0')

    class Negative(metric.Unit):
        A = ('a', '1')
        B = ('b', '-2')

    class Repeated(metric.Unit):
        A = ('a', '1')
        B = ('a', '2')

    for units in (TwoBases, Negative, Repeated):
        with pytest.raises(metric.UnitDefinitionError):
            metric.verify(units)


@pytest.mark.dimension
def test_verify_accepts_well_formed_sets():
    class Length(metric.Unit):
        METER = ('m', '1')
        FOOT = ('ft', '0.3048')

    assert metric.verify(Length) is Length
    assert Length.base() is Length.METER
