"""
Tests of the D -> pi light-cone sum rules.

The heavier checks evaluate the full sum rules with the Borel rescaling switched
off, at the default D -> pi inputs and at the B -> pi inputs of [DKKMO:2008A].
"""

import numpy as np
import pytest

from charmff.model import kernels
from charmff.model.lcsr_dpi import AnalyticFormFactorDToPiKKMO2009, KKMO2009Snapshot, duality_u0, U_MIN
from charmff.qcdlib.integrate import IntegrationError
from charmff.qcdlib.options import ConfigurationError
from charmff.qcdlib.parameters import Parameters


def _ff(rescale="1", card=None):
    p = Parameters.from_card(card) if card else Parameters.defaults()
    return AnalyticFormFactorDToPiKKMO2009(p, {"rescale-borel": rescale}), p


def _b_to_pi_setup():
    """
    B -> pi inputs of [DKKMO:2008A] (heavy quark mass 4.164 GeV, mu = 3 GeV, M^2 = 18 GeV^2,
    s0 = 35.75 GeV^2) with the Borel rescaling switched off.
    """
    p = Parameters.defaults()
    p.update({
        "decay-constant::pi": 0.1307,
        "mass::D_d": 5.279,
        "mass::pi^+": 0.13957,
        "mass::c(MSbar)": 4.164,
        "mass::d(2GeV)": 0.006,
        "mass::u(2GeV)": 0.003,
        "pi::a2@1GeV": 0.161995,
        "pi::a4@1GeV": 0.038004,
        "pi::f3@1GeV": 0.0045,
        "pi::omega3@1GeV": -1.5,
        "pi::omega4@1GeV": 0.2,
        "pi::delta^2@1GeV": 0.18,
        "D->pi::M^2@KKMO2009": 18.0,
        "D->pi::Mp^2@KKMO2009": 5.0,
        "D->pi::mu@KKMO2009": 3.0,
        "D->pi::s_0^+(0)@KKMO2009": 35.75,
        "D->pi::s_0^+'(0)@KKMO2009": 0.0,
        "D->pi::s_0^0(0)@KKMO2009": 35.75,
        "D->pi::s_0^0'(0)@KKMO2009": 0.0,
        "D->pi::s_0^T(0)@KKMO2009": 35.75,
        "D->pi::s_0^T'(0)@KKMO2009": 0.0,
        "D->pi::sp_0^B@KKMO2009": 35.6,
        "QCD::m_0^2": 0.8,
        "QCD::cond_GG": 0.012,
        "QCD::r_vac": 1.0,
        "QCD::alpha_s(MZ)": 0.1176,
    })
    return AnalyticFormFactorDToPiKKMO2009(p, {"rescale-borel": "0"}), p


def test_rho_1_reference_values():
    """NLO spectral density of the two-point correlator at b-quark kinematics."""
    rho_1 = AnalyticFormFactorDToPiKKMO2009.rho_1
    assert rho_1(19.60, 4.16, 4.16) == pytest.approx(-5.05150, abs=1e-5)
    assert rho_1(22.05, 4.16, 4.16) == pytest.approx(-4.62757, abs=1e-5)
    assert rho_1(25.20, 4.16, 4.16) == pytest.approx(+0.67764, abs=1e-5)
    print("✅ rho_1 reproduces the reference values")


def test_duality_u0():
    assert duality_u0(1.6, 0.0, 6.4) == pytest.approx(0.25)
    assert duality_u0(1.6, 1.0, 7.0) == pytest.approx(0.6 / 6.0)
    #--above the charm mass the bound is clamped
    assert duality_u0(1.6, 2.0, 7.0) == U_MIN


def test_invalid_option():
    with pytest.raises(ConfigurationError):
        _ff(rescale="2")


def test_used_parameters():
    ff, _ = _ff()
    names = ff.used_parameter_names
    for name in ("D->pi::M^2@KKMO2009", "D->pi::s_0^T''(0)@KKMO2009", "pi::a2@1GeV",
                 "mass::c(MSbar)", "QCD::r_vac", "decay-constant::pi"):
        assert name in names


def test_snapshot_reads_store_at_call_time():
    ff, p = _ff()
    p["D->pi::s_0^+'(0)@KKMO2009"] = 0.5
    p["D->pi::s_0^+''(0)@KKMO2009"] = 0.2
    snap = ff.snapshot()
    assert isinstance(snap, KKMO2009Snapshot)
    assert snap.s0D(0.0) == p["D->pi::s_0^+(0)@KKMO2009"]()
    assert snap.s0D(2.0) == pytest.approx(7.0 + 0.5 * 2.0 + 0.2 * 0.5 * 4.0)

    p["D->pi::mu@KKMO2009"] = 2.0
    snap = ff.snapshot()
    assert snap.mu == 2.0
    assert snap.mc == pytest.approx(ff.model.m_c_msbar(2.0))
    assert snap.lcda.mu == 2.0


def test_no_rescaling():
    ff, _ = _ff(rescale="0")
    for q2 in (0.0, 0.7, 1.5):
        assert ff.rescale_factor_p(q2) == 1.0
        assert ff.rescale_factor_0(q2) == 1.0
        assert ff.rescale_factor_T(q2) == 1.0


def test_rescaling_is_trivial_at_zero_q2():
    ff, _ = _ff()
    assert ff.rescale_factor_p(0.0) == pytest.approx(1.0, abs=1e-10)
    assert ff.rescale_factor_0(0.0) == pytest.approx(1.0, abs=1e-10)
    assert ff.rescale_factor_T(0.0) == pytest.approx(1.0, abs=1e-10)


def test_mass_from_ratio():
    assert AnalyticFormFactorDToPiKKMO2009._mass_from_ratio(-0.3) == 0.0
    assert AnalyticFormFactorDToPiKKMO2009._mass_from_ratio(4.0) == 2.0


def test_decay_constant():
    ff, p = _ff()
    fD = ff.decay_constant()
    assert np.isfinite(fD) and fD > 0.0
    print("✅ f_D = %0.5f" % fD)

    #--r_vac only scales the four-quark condensate
    p["QCD::r_vac"] = 0.0
    assert ff.decay_constant() != fD


def test_form_factors_at_zero_q2():
    ff, _ = _ff(rescale="0")
    fp = ff.f_p(0.0)
    assert np.isfinite(fp) and fp > 0.0

    #--f_0(0) = f_+(0)
    assert ff.f_0(0.0) == fp
    assert ff.f_0(1e-7) == ff.f_p(1e-7)

    fT = ff.f_t(0.0)
    assert np.isfinite(fT)
    assert ff.f_plus_T(0.0) == 0.0
    print("✅ f_+(0) = %0.5f, f_T(0) = %0.5f" % (fp, fT))


def test_nnlo_estimate():
    ff, p = _ff(rescale="0")
    fp = ff.f_p(0.5)
    p["D->pi::zeta(NNLO)@KKMO2009"] = 1.0
    fp_nnlo = ff.f_p(0.5)
    assert fp_nnlo != fp
    assert fp_nnlo == pytest.approx(fp, rel=0.5)


def test_individual_contributions():
    ff, _ = _ff(rescale="0")
    q2 = 0.5
    for term in (ff.F_lo_tw2, ff.F_lo_tw3, ff.F_lo_tw4, ff.F_nlo_tw2, ff.F_nlo_tw3,
                 ff.FT_lo_tw2, ff.FT_lo_tw3, ff.FT_nlo_tw2):
        assert np.isfinite(term(q2))
    assert ff.F_lo_tw2(q2) > 0.0


def test_reference_card():
    ff, p = _ff(rescale="0", card="kkmo2009_reference.yaml")
    assert ff.snapshot().M2 == 4.5
    assert np.isfinite(ff.decay_constant())


def test_diagnostics_labels(monkeypatch):
    ff, _ = _ff()
    monkeypatch.setattr(ff, "decay_constant", lambda: 0.2)
    for name in ("rescale_factor_p", "rescale_factor_0", "rescale_factor_T", "MDp_lcsr", "MD0_lcsr", "MDT_lcsr"):
        monkeypatch.setattr(ff, name, lambda q2: 1.0)

    diagnostics = ff.diagnostics()
    labels = [label for label, _ in diagnostics]

    assert len(diagnostics) == 16
    assert len(set(labels)) == 16
    assert labels[3] == "f_D, [KKMO:2009A]"
    assert "M_D(f_0, q2 = 10.0), [KKMO:2009A]" in labels
    assert diagnostics[0][1] == pytest.approx(AnalyticFormFactorDToPiKKMO2009.rho_1(6.5, 1.27, 1.4))


def test_f0_joins_fp_at_small_q2():
    ff, _ = _ff(rescale="0")
    #--below 1e-6 f_0 is f_+, at 1e-6 the blended sum rule takes over
    assert ff.f_0(1e-6) == pytest.approx(ff.f_p(1e-6), rel=1e-4)


def test_b_to_pi_form_factors():
    """f_+, f_0 and f_T against the [DKKMO:2008A] B -> pi numbers."""
    ff, _ = _b_to_pi_setup()
    assert ff.f_p(0.0) == pytest.approx(0.2644, abs=2e-3)
    assert ff.f_p(10.0) == pytest.approx(0.4964, abs=2e-3)
    assert ff.f_0(10.0) == pytest.approx(0.3725, abs=2e-3)
    assert ff.f_t(0.0) == pytest.approx(0.2606, abs=2e-3)
    assert ff.f_t(10.0) == pytest.approx(0.4990, abs=2e-3)
    print("✅ f_+(0) = %0.5f, f_0(10) = %0.5f, f_T(0) = %0.5f" % (ff.f_p(0.0), ff.f_0(10.0), ff.f_t(0.0)))


def test_duality_masses():
    ff, p = _b_to_pi_setup()
    MD = p["mass::D_d"]()

    masses = {
        "MDp_lcsr(0)": ff.MDp_lcsr(0.0),
        "MD0_lcsr(10)": ff.MD0_lcsr(10.0),
        "MDT_lcsr(0)": ff.MDT_lcsr(0.0),
        "MD_svz": ff.MD_svz(),
    }
    for name, value in masses.items():
        assert np.isfinite(value), name
        assert value == pytest.approx(MD, abs=0.3), name
        print("✅ %s = %0.5f" % (name, value))


def test_ftil_nlo_tw3_failure_reports_upper_bound(monkeypatch):
    ff, _ = _b_to_pi_setup()
    q2 = 5.0
    snap = ff.snapshot()
    r2_max = snap.s0tilD(q2) / snap.mc2

    def broken(r1, r2, lmu):
        raise ZeroDivisionError("division by zero")

    monkeypatch.setattr(kernels, "tw3ptil_theta_rhom1", broken)

    with pytest.raises(IntegrationError) as excinfo:
        ff.Ftil_nlo_tw3(q2)

    e = excinfo.value
    assert f"r2 = {r2_max}" in str(e)
    assert "Ftil_nlo_tw3" in str(e)
    assert e.context["q2"] == q2
    assert isinstance(e.__cause__, IntegrationError)
    print(f"✅ Got expected IntegrationError: {e}")
