"""
Tests of the hard-scattering kernels and the LO auxiliary functions.
"""

import numpy as np
import pytest

from charmff.model import kernels as K

mc2 = 1.6
mu2 = 1.96
a2pi, a4pi = 0.15, 0.05
lmu = np.log(mc2 / mu2)


def _d1(f, u, h=1e-5):
    return (f(u + h) - f(u - h)) / (2.0 * h)


def test_small_r1_series():
    for r1 in (1e-3, -1e-3, 1e-4):
        assert K._log1mr1_over_r1_series(r1) == pytest.approx(np.log(1.0 - r1) / r1, rel=1e-10)
    assert K._log1mr1_over_r1_series(0.0) == -1.0


def test_endpoint_kernels_continuous_at_zero_q2():
    """The series branch below SQRT_EPS joins the exact expressions."""
    for r2 in (1.5, 3.0):
        at_zero = K.tw2T_delta(0.0, r2, mc2, mu2, a2pi, a4pi)
        assert np.isfinite(at_zero)
        assert K.tw2T_delta(1e-6, r2, mc2, mu2, a2pi, a4pi) == pytest.approx(at_zero, rel=1e-4, abs=1e-6)

        at_zero = K.tw3pT_delta_rhom1(0.0, r2, lmu)
        assert np.isfinite(at_zero)
        assert K.tw3pT_delta_rhom1(1e-6, r2, lmu) == pytest.approx(at_zero, rel=1e-4, abs=1e-6)

        at_zero = K.tw3sigmaT_delta_rhom1(0.0, r2, lmu)
        assert np.isfinite(at_zero)
        assert K.tw3sigmaT_delta_rhom1(1e-6, r2, lmu) == pytest.approx(at_zero, rel=1e-4, abs=1e-6)
    print("✅ f_T endpoint kernels are continuous at q2 = 0")


def test_kernels_finite():
    r1 = 0.3
    for r2 in (1.2, 2.0, 4.0):
        values = [
            K.tw2_theta_1mrho(r1, r2, mc2, mu2, a2pi, a4pi),
            K.tw2_theta_rhom1(r1, r2, mc2, mu2, a2pi, a4pi),
            K.tw2_delta(r1, r2, mc2, mu2, a2pi, a4pi),
            K.tw3p_theta_1mrho(r1, r2, lmu),
            K.tw3p_theta_rhom1(r1, r2, lmu),
            K.tw3p_delta_rhom1(r1, r2, lmu),
            K.tw3sigma_theta_1mrho(r1, r2, lmu),
            K.tw3sigma_theta_rhom1(r1, r2, lmu),
            K.tw3sigma_delta_rhom1(r1, r2, lmu),
            K.tw2til_theta_1mrho(r1, r2, a2pi, a4pi),
            K.tw2til_theta_rhom1(r1, r2, a2pi, a4pi),
            K.tw2til_delta(r1, r2, a2pi, a4pi),
            K.tw2T_theta_1mrho(r1, r2, mc2, mu2, a2pi, a4pi),
            K.tw2T_theta_rhom1(r1, r2, mc2, mu2, a2pi, a4pi),
            K.tw2T_delta(r1, r2, mc2, mu2, a2pi, a4pi),
        ]
        assert all(np.isfinite(v) for v in values)


def test_auxiliary_derivatives():
    omega3pi = -1.5
    for u in (0.25, 0.5, 0.8):
        assert K.I3_d1(u, omega3pi) == pytest.approx(_d1(lambda x: K.I3(x, omega3pi), u), rel=1e-6, abs=1e-9)
        assert K.I3bar_d1(u, omega3pi) == pytest.approx(_d1(lambda x: K.I3bar(x, omega3pi), u), rel=1e-6, abs=1e-9)


def test_auxiliary_endpoints():
    omega3pi = -1.5
    assert K.I3(0.0, omega3pi) == 0.0
    assert K.I3(1.0, omega3pi) == 0.0
    assert K.I3til(1.0, omega3pi) == 0.0
    assert K.I4(1.0, 0.0195, 0.15, 0.18) == 0.0
