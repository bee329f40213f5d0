"""
Tests of the D -> P l nu observables with BSZ2015 form factors.
"""

import numpy as np
import pytest
from scipy.integrate import quad

from charmff.model.d_to_psd_l_nu import DToPseudoscalarLeptonNeutrino
from charmff.qcdlib.options import ConfigurationError
from charmff.qcdlib.parameters import Parameters

D_TO_PI_MU_NU = {"Q": "d", "q": "d", "I": "1", "l": "mu"}


def _decay(**options):
    p = Parameters.defaults()
    o = dict(D_TO_PI_MU_NU)
    o.update(options)
    return DToPseudoscalarLeptonNeutrino(p, o), p


def test_default_options_are_unsupported():
    with pytest.raises(ConfigurationError) as excinfo:
        DToPseudoscalarLeptonNeutrino(Parameters.defaults())
    assert "Q=s, q=d, I=1" in str(excinfo.value)
    print(f"✅ Got expected ConfigurationError: {excinfo.value}")


def test_invalid_options():
    with pytest.raises(ConfigurationError):
        _decay(l="nu")
    with pytest.raises(ConfigurationError):
        _decay(model="MSSM")
    with pytest.raises(ConfigurationError):
        _decay(**{"form-factors": "KKMO2010"})


def test_channels():
    decay, _ = _decay()
    assert decay.channel.p_meson == "pi^0"
    decay, _ = _decay(q="u")
    assert decay.isospin_factor == pytest.approx(2.0**-0.5)
    decay, _ = _decay(q="s", I="1/2")
    assert decay.channel.form_factors == "D_s->K"
    assert "mass::K_u" in decay.used_parameter_names


def test_amplitudes_outside_phase_space():
    decay, p = _decay()
    s_max = (p["mass::D_d"]() - p["mass::pi^0"]())**2
    m_mu = p["mass::mu"]()

    for s in (0.5 * m_mu**2, 1.01 * s_max):
        a = decay.amplitudes(s)
        assert a.h_0 == 0.0 and a.h_t == 0.0 and a.h_tS == 0.0
        assert a.v == 0.99
        assert decay.normalized_differential_decay_width(s) == 0.0


def test_differential_width():
    decay, _ = _decay()
    s = 0.8
    width = decay.normalized_differential_decay_width(s)
    assert width > 0.0

    #--SM: the partial widths add up, no tensor contribution
    assert decay.normalized_differential_decay_width_p(s) + decay.normalized_differential_decay_width_0(s) \
        == pytest.approx(width, rel=1e-12)

    #--integrating the double-differential width over cos(theta_l)
    integral = quad(lambda c: decay.normalized_two_differential_decay_width(s, c), -1.0, 1.0)[0]
    assert integral == pytest.approx(width, rel=1e-10)
    print("✅ d^2Gamma/(ds dcos) integrates to dGamma/ds")


def test_wet_with_sm_coefficients():
    sm, _ = _decay(model="SM")
    wet, _ = _decay(model="WET")
    for s in (0.2, 1.0, 2.0):
        assert wet.normalized_differential_decay_width(s) == pytest.approx(sm.normalized_differential_decay_width(s), rel=1e-12)


def test_scalar_coupling_changes_rate():
    decay, p = _decay(model="WET")
    s = 1.0
    before = decay.normalized_differential_decay_width(s)
    p["dcmunumu::Re{cSL}"] = 0.2
    assert decay.normalized_differential_decay_width(s) != before


def test_branching_ratio():
    decay, p = _decay(l="e")
    s_min = p["mass::e"]()**2
    s_max = (p["mass::D_d"]() - p["mass::pi^0"]())**2

    br = decay.integrated_branching_ratio(s_min, s_max)
    assert 1e-4 < br < 5e-2
    assert decay.normalized_integrated_branching_ratio(s_min, s_max) * abs(p["CKM::abs(V_cd)"]())**2 \
        == pytest.approx(br, rel=1e-3)
    print("✅ B(D -> pi e nu) = %0.5f" % br)


def test_pdfs():
    decay, p = _decay()
    s_min = p["mass::mu"]()**2
    s_max = (p["mass::D_d"]() - p["mass::pi^0"]())**2

    #--the pdf integrates to one over the full phase space
    assert decay.integrated_pdf_q2(s_min, s_max) * (s_max - s_min) == pytest.approx(1.0, rel=1e-12)
    assert decay.differential_pdf_q2(1.0) > 0.0
    assert np.isfinite(decay.differential_pdf_w(1.2))


def test_angular_observables():
    decay, _ = _decay()
    s = 1.0
    #--the flat term and A_FB vanish for massless leptons; for muons they are small
    assert abs(decay.differential_a_fb_leptonic(s)) < 0.1
    assert 0.0 <= decay.differential_flat_term(s) < 0.1
    assert -1.0 <= decay.differential_lepton_polarization(s) <= 1.0

    s_min, s_max = 0.1, 1.5
    assert np.isfinite(decay.integrated_a_fb_leptonic(s_min, s_max))
    assert np.isfinite(decay.integrated_flat_term(s_min, s_max))
    assert np.isfinite(decay.integrated_lepton_polarization(s_min, s_max))
    assert decay.normalized_integrated_decay_width_p(s_min, s_max) \
        + decay.normalized_integrated_decay_width_0(s_min, s_max) \
        == pytest.approx(decay.normalized_integrated_decay_width(s_min, s_max), rel=1e-4)
