"""
Tests of the BSZ2015 z-expansion for P -> P and P -> V transitions.
"""

import numpy as np
import pytest

from charmff.model.bsz2015 import BSZ2015PToP, BSZ2015PToV
from charmff.model.processes import P_TO_P, P_TO_V
from charmff.qcdlib.parameters import Parameters


def test_p_to_p_at_zero():
    p = Parameters.defaults()
    ff = BSZ2015PToP(P_TO_P["D->pi"], p)

    assert ff.f_p(0.0) == pytest.approx(p["D->pi::alpha^f+_0@BSZ2015"](), rel=1e-12)
    assert ff.f_t(0.0) == pytest.approx(p["D->pi::alpha^fT_0@BSZ2015"](), rel=1e-12)
    #--f_0(0) = f_+(0)
    assert ff.f_0(0.0) == pytest.approx(ff.f_p(0.0), rel=1e-12)
    assert ff.f_plus_T(0.0) == 0.0
    print("✅ D->pi BSZ2015 form factors at q2 = 0 equal their leading coefficients")


def test_coefficients_are_read_at_call_time():
    p = Parameters.defaults()
    ff = BSZ2015PToP(P_TO_P["D->K"], p)
    p["D->K::alpha^f+_0@BSZ2015"] = 0.8
    assert ff.f_p(0.0) == pytest.approx(0.8, rel=1e-12)
    assert "D->K::alpha^f0_2@BSZ2015" in ff.used_parameter_names


def test_real_and_complex_arguments():
    p = Parameters.defaults()
    ff = BSZ2015PToP(P_TO_P["D_s->K"], p)

    value = ff.f_p(1.0)
    assert isinstance(value, float)
    assert isinstance(ff.f_p(1.0 + 0.0j), complex)
    assert ff.f_p(1.0 + 0.0j).real == pytest.approx(value, rel=1e-12)
    assert isinstance(ff.z(0.5), float)


def test_conformal_variable():
    ff = BSZ2015PToP(P_TO_P["D->pi"], Parameters.defaults())
    #--z vanishes at tau_0 and lies in the unit disk below the pair threshold
    assert ff.z(ff.tau_0) == pytest.approx(0.0, abs=1e-14)
    for s in (-2.0, 0.0, 1.0, 2.5):
        assert abs(ff.z(s)) < 1.0
    assert ff.z(1.0) < ff.z(0.0)


def test_pole():
    p = Parameters.defaults()
    process = P_TO_P["D->pi"]
    ff = BSZ2015PToP(process, p)
    #--the pole factor grows towards the D^* mass
    assert abs(ff.f_p(0.95 * process.m2_Br1m)) > abs(ff.f_p(0.5 * process.m2_Br1m))


def test_p_to_v_constraints():
    p = Parameters.defaults()
    ff = BSZ2015PToV(P_TO_V["D->rho"], p)

    assert ff.a_12(0.0) == pytest.approx(ff.kin_factor * p["D->rho::alpha^A0_0@BSZ2015"](), rel=1e-12)
    assert ff.t_2(0.0) == pytest.approx(ff.t_1(0.0), rel=1e-12)
    assert ff.v(0.0) == pytest.approx(p["D->rho::alpha^V_0@BSZ2015"](), rel=1e-12)
    print("✅ A_12(0) and T_2(0) constraints hold")


def test_p_to_v_derived():
    p = Parameters.defaults()
    ff = BSZ2015PToV(P_TO_V["D->K^*"], p)
    s = 0.4
    for name in ("a_2", "t_3", "f_perp", "f_para", "f_long", "f_perp_T", "f_para_T", "f_long_T",
                 "f_long_T_Normalized"):
        assert np.isfinite(getattr(ff, name)(s))

    #--f_long_T vanishes at s = 0, its normalized variant does not
    assert ff.f_long_T(0.0) == pytest.approx(0.0, abs=1e-14)
    assert ff.f_long_T_Normalized(0.0) != 0.0


def test_p_to_v_derived_argument_types():
    p = Parameters.defaults()
    ff = BSZ2015PToV(P_TO_V["D->rho"], p)
    for name in ("a_2", "t_3"):
        f = getattr(ff, name)
        value = f(0.4)
        assert isinstance(value, float)
        assert isinstance(f(0.4 + 0.0j), complex)
        assert f(0.4 + 0.0j).real == pytest.approx(value, rel=1e-12)
