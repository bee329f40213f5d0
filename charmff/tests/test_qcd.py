"""
Tests of the strong coupling, the running quark masses and the SM/WET inputs.
"""

import pytest

from charmff.qcdlib.alphaS import ALPHAS
from charmff.qcdlib.masses import MASSES
from charmff.qcdlib.model import SM, WET, make_model
from charmff.qcdlib.options import ConfigurationError
from charmff.qcdlib.parameters import Parameters, ParameterUser


def test_alphaS_boundary_and_running():
    p = Parameters.defaults()
    user = ParameterUser()
    aS = ALPHAS(p, user)
    mZ2 = p["mass::Z"]() ** 2

    assert aS.get_alphaS(mZ2) == pytest.approx(p["QCD::alpha_s(MZ)"](), rel=1e-12)
    assert aS.get_alphaS(1.5**2) > aS.get_alphaS(3.0**2) > aS.get_alphaS(mZ2)
    assert "QCD::alpha_s(MZ)" in user.used_parameter_names

    #--NNLO running from alpha_s(MZ) = 0.1184: alpha_s(m_b) ~ 0.225, alpha_s(1.5 GeV) ~ 0.35
    mb = p["mass::b(MSbar)"]()
    assert aS.get_alphaS(mb**2) == pytest.approx(0.225, abs=0.01)
    assert 0.30 < aS.get_alphaS(1.5**2) < 0.40
    print("✅ alpha_s(MZ) = %0.5f, alpha_s(1.5 GeV) = %0.5f" % (aS.get_alphaS(mZ2), aS.get_alphaS(1.5**2)))


def test_alphaS_sees_parameter_changes():
    p = Parameters.defaults()
    aS = ALPHAS(p)
    before = aS.get_alphaS(2.0)
    p["QCD::alpha_s(MZ)"] = 0.120
    assert aS.get_alphaS(2.0) > before


def test_number_of_flavours():
    p = Parameters.defaults()
    aS = ALPHAS(p)
    mc2 = p["mass::c(MSbar)"]() ** 2
    mb2 = p["mass::b(MSbar)"]() ** 2
    assert aS.get_Nf(0.5 * mc2) == 3
    assert aS.get_Nf(0.5 * (mc2 + mb2)) == 4
    assert aS.get_Nf(2.0 * mb2) == 5


def test_mass_running():
    p = Parameters.defaults()
    masses = MASSES(ALPHAS(p))
    m0 = 0.093

    assert masses.run(m0, 2.0, 2.0) == m0
    #--masses decrease with the scale
    assert masses.run(m0, 2.0, 3.0) < m0 < masses.run(m0, 2.0, 1.0)
    #--running there and back, across the charm threshold
    assert masses.run(masses.run(m0, 2.0, 1.0), 1.0, 2.0) == pytest.approx(m0, rel=1e-10)


def test_sm_inputs():
    p = Parameters.defaults()
    sm = SM(p)
    mc = p["mass::c(MSbar)"]()

    assert sm.m_c_msbar(mc) == pytest.approx(mc, rel=1e-12)
    assert sm.m_u_msbar(2.0) == pytest.approx(p["mass::u(2GeV)"](), rel=1e-12)
    assert sm.ckm_cd() == complex(p["CKM::abs(V_cd)"](), 0.0)
    assert sm.wet_clnu("d", "mu").cvl == 1.0
    with pytest.raises(ValueError):
        sm.m_q_msbar("t", 2.0)


def test_wet_coefficients():
    p = Parameters.defaults()
    p["dcmunumu::Re{cSL}"] = 0.1
    p["dcmunumu::Im{cSL}"] = 0.2

    wet = make_model("WET", p)
    assert isinstance(wet, WET)
    wc = wet.wet_clnu("d", "mu")
    assert wc.cvl == 1.0
    assert wc.csl == complex(0.1, 0.2)
    assert wet.wet_clnu("d", "mu", cp_conjugate=True).csl == complex(0.1, -0.2)
    assert "dcmunumu::Re{cSL}" in wet.used_parameter_names

    with pytest.raises(ConfigurationError):
        make_model("MSSM", p)


def test_charm_mass_below_its_own_scale():
    p = Parameters.defaults()
    sm = SM(p)
    mc = p["mass::c(MSbar)"]()

    #--m_c(1.4 GeV) sits slightly below m_c(m_c)
    mc_14 = sm.m_c_msbar(1.4)
    assert 0.9 * mc < mc_14 < mc
    assert sm.m_c_msbar(1.0) > mc
    print("✅ m_c(1.4 GeV) = %0.5f" % mc_14)
