import typing

import pytest

from dimensional.core import metric


@pytest.fixture
def units() -> typing.Dict[str, metric.Unit]:
    """A set of units for testing the unit algebra.

    Each test receives freshly created units. Keys are display names.
    """
    kg = metric.BaseUnit('kg')
    m = metric.BaseUnit('m')
    s = metric.BaseUnit('s')
    A = metric.BaseUnit('A')
    km = metric.ProportionalUnit('km', 1000, m)
    cm = metric.ProportionalUnit('cm', 0.01, m)
    h = metric.ProportionalUnit('h', 3600, s)
    return {
        'kg': kg,
        'm': m,
        's': s,
        'A': A,
        'km': km,
        'cm': cm,
        'h': h,
        'm / s': metric.QuotientUnit(m, s),
        'A / kg': metric.QuotientUnit(A, kg),
        'kg * s': metric.ProductUnit([kg, s]),
        'A * m': metric.ProductUnit([A, m]),
        'km / h': metric.QuotientUnit(km, h),
    }
