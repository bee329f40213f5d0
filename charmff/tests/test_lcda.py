"""
Tests of the pion light-cone distribution amplitudes.
"""

import pytest
from scipy.integrate import quad

from charmff.qcdlib.lcda import PION_LCDA
from charmff.qcdlib.model import SM
from charmff.qcdlib.parameters import Parameters


def _lcda(mu=1.4):
    p = Parameters.defaults()
    return PION_LCDA(p, SM(p)), p


def _d1(f, u, h=1e-5):
    return (f(u + h) - f(u - h)) / (2.0 * h)


def test_normalization():
    provider, _ = _lcda()
    lcda = provider.at(1.4)

    assert quad(lcda.phi, 0.0, 1.0)[0] == pytest.approx(1.0, rel=1e-10)
    assert quad(lcda.phi3p, 0.0, 1.0)[0] == pytest.approx(1.0, rel=1e-10)
    assert quad(lcda.phi3s, 0.0, 1.0)[0] == pytest.approx(1.0, rel=1e-10)
    print("✅ twist-2 and twist-3 two-particle LCDAs are normalized")


def test_symmetry():
    lcda = _lcda()[0].at(1.4)
    for u in (0.1, 0.3, 0.45):
        assert lcda.phi(u) == pytest.approx(lcda.phi(1.0 - u), rel=1e-12)
        assert lcda.phi4(u) == pytest.approx(lcda.phi4(1.0 - u), rel=1e-10)


def test_derivatives():
    lcda = _lcda()[0].at(1.4)
    for u in (0.2, 0.35, 0.7):
        assert lcda.phi3s_d1(u) == pytest.approx(_d1(lcda.phi3s, u), rel=1e-6, abs=1e-8)
        assert lcda.phi4_d1(u) == pytest.approx(_d1(lcda.phi4, u), rel=1e-6, abs=1e-8)
        assert lcda.phi4_d2(u) == pytest.approx(_d1(lcda.phi4_d1, u), rel=1e-6, abs=1e-8)
        assert lcda.psi4_i(u) == pytest.approx(quad(lcda.psi4, 0.0, u)[0], rel=1e-10, abs=1e-12)


def test_running():
    provider, p = _lcda()

    #--no running at the reference scale
    assert provider.evolve("a2", 1.0) == pytest.approx(p["pi::a2@1GeV"](), rel=1e-12)
    #--positive anomalous dimensions: moments decrease with the scale
    assert 0.0 < provider.evolve("a2", 2.0) < p["pi::a2@1GeV"]()
    assert provider.mupi(2.0) > provider.mupi(1.0) > 0.0

    lcda = provider.at(2.0)
    assert lcda.mu == 2.0
    assert lcda.a2pi == pytest.approx(provider.evolve("a2", 2.0))
    assert lcda.mupi == pytest.approx(provider.mupi(2.0))
    assert "pi::omega4@1GeV" in provider.used_parameter_names
