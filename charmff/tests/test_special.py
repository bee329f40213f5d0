"""
Tests of the special functions: dilogarithms, incomplete gamma and Kallen function.
"""

import numpy as np
import pytest
from mpmath import fp

from charmff.qcdlib.special import re_li2, gamma_inc0, kallen


def test_re_li2_known_values():
    """Re Li2 at 1, -1 and 2."""
    assert re_li2(0.0) == pytest.approx(0.0, abs=1e-14)
    assert re_li2(1.0) == pytest.approx(np.pi**2 / 6.0, rel=1e-12)
    assert re_li2(-1.0) == pytest.approx(-np.pi**2 / 12.0, rel=1e-12)
    #--Li2(2) = pi^2/4 - i pi ln(2)
    assert re_li2(2.0) == pytest.approx(np.pi**2 / 4.0, rel=1e-10)
    print("✅ re_li2 reproduces Li2(1), Li2(-1) and Re Li2(2)")


def test_re_li2_matches_complex_dilog():
    for x in (-0.5, 0.1, 0.3, 0.5):
        assert re_li2(x) == pytest.approx(complex(fp.polylog(2, x)).real, rel=1e-10)
    print("✅ re_li2 agrees with the complex dilogarithm below the branch point")


def test_gamma_inc0():
    assert gamma_inc0(1.0) == pytest.approx(0.21938393439552029, rel=1e-12)
    assert gamma_inc0(2.0) < gamma_inc0(1.0)


def test_kallen():
    assert kallen(1.0, 0.0, 0.0) == 1.0
    #--lambda(m^2, m^2, 0) = 0
    assert kallen(3.5, 3.5, 0.0) == pytest.approx(0.0, abs=1e-12)
    #--lambda(a, b, c) = (a - b - c)^2 - 4 b c
    a, b, c = 3.5, 0.02, 0.7
    assert kallen(a, b, c) == pytest.approx((a - b - c)**2 - 4.0 * b * c, rel=1e-12)
