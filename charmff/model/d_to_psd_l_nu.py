"""
Observables of the semileptonic decays D -> P l nu.

The decay D = (c qbar) -> P = (Q qbar) l nu is described by the helicity
amplitudes of [DDS2014] including scalar and tensor operators of the weak
effective theory. The transition is selected by the options

    Q  : "d" or "s",        flavour of the quark produced in the c decay
    q  : "u", "d" or "s",   spectator quark flavour
    I  : "1", "0" or "1/2", isospin of the final-state meson
    l  : "e", "mu" or "tau"
    model        : "SM" or "WET"
    form-factors : parametrisation, default "BSZ2015"
    cp-conjugate : "true" or "false"

Only the combinations listed in processes.D_TO_P_L_NU are supported; the
defaults Q = s, q = d, I = 1 are not among them, so Q, q and I have to be
given explicitly.

Widths labelled "normalized" are computed for |V_cQ| = 1.
"""

import logging
from collections import namedtuple

import numpy as np

from charmff.model.factory import create_form_factors
from charmff.model.processes import D_TO_P_L_NU
from charmff.qcdlib import config_loader as cfg
from charmff.qcdlib.integrate import QAGS
from charmff.qcdlib.model import make_model, MODELS
from charmff.qcdlib.options import ConfigurationError, OptionSpecification, validate, as_bool
from charmff.qcdlib.parameters import ParameterUser
from charmff.qcdlib.special import kallen

logger = logging.getLogger(__name__)

Amplitudes = namedtuple("Amplitudes", ["h_0", "h_t", "h_S", "h_T", "h_tS", "v", "p", "NF"])

#--outside the phase space; v = 0.99 keeps sqrt(1 - v) finite
_ZERO_AMPLITUDES = Amplitudes(0j, 0j, 0j, 0j, 0j, 0.99, 0.0, 0.0)


class DToPseudoscalarLeptonNeutrino(ParameterUser):
    """
    D -> P l nu decay rates and angular observables.

    inputs: parameters = parameter store; type = Parameters
            options    = see module docstring; type = dict
    """

    options = (
        OptionSpecification("model", tuple(MODELS.keys()), "SM"),
        OptionSpecification("form-factors", (), "BSZ2015"),
        OptionSpecification("l", ("e", "mu", "tau"), "mu"),
        OptionSpecification("Q", ("s", "d"), "s"),
        OptionSpecification("q", ("u", "d", "s"), "d"),
        OptionSpecification("I", ("1", "0", "1/2"), "1"),
        OptionSpecification("cp-conjugate", ("true", "false"), "false"),
    )

    def __init__(self, parameters, options=None):
        super().__init__()
        options = dict(options or {})
        self.opts = validate(options, self.options)
        Q, q, I = self.opts["Q"], self.opts["q"], self.opts["I"]

        key = (Q, q, I)
        if key not in D_TO_P_L_NU:
            raise ConfigurationError(f"Unsupported combination of Q={Q}, q={q}, I={I}")
        self.channel = D_TO_P_L_NU[key]

        self.model = make_model(self.opts["model"], parameters)
        self.lepton = self.opts["l"]
        self.cp_conjugate = as_bool(self.opts["cp-conjugate"])

        self.m_D = self.use(parameters, "mass::" + self.channel.d_meson)
        self.tau_D = self.use(parameters, "life_time::D_" + q)
        self.m_P = self.use(parameters, "mass::" + self.channel.p_meson)
        self.m_l = self.use(parameters, "mass::" + self.lepton)
        self.g_fermi = self.use(parameters, "WET::G_Fermi")
        self.hbar = self.use(parameters, "QM::hbar")
        self.mu = self.use(parameters, f"{Q}c{self.lepton}nu{self.lepton}::mu")
        self.isospin_factor = self.channel.isospin_factor

        name = self.channel.form_factors + "::" + self.opts["form-factors"]
        self.form_factors = create_form_factors(name, parameters, options)

        if Q == "d":
            self.m_Q_msbar = self.model.m_d_msbar
            self.v_cQ = self.model.ckm_cd
        else:
            self.m_Q_msbar = self.model.m_s_msbar
            self.v_cQ = self.model.ckm_cs

        self.qags = QAGS(epsrel=cfg.integration['epsrel_decay'])

        self.uses(self.form_factors)
        self.uses(self.model)

        logger.debug("D->P l nu for %s with %s form factors", key, name)

    def _integrate(self, f, s_min, s_max, channel):
        return self.qags.integrate(f, s_min, s_max, channel=channel)

    ### amplitudes

    def amplitudes(self, s):
        """
        Helicity amplitudes at dilepton mass squared s [DDS2014] eqs. (13-14).
        """
        m_D = self.m_D()
        m_P = self.m_P()
        m_l = self.m_l()

        if not (m_l * m_l <= s <= (m_D - m_P)**2):
            return _ZERO_AMPLITUDES

        wc = self.model.wet_clnu(self.opts["Q"], self.lepton, self.cp_conjugate)
        #--in the SM cvl = 1, so gV holds only new-physics contributions
        gV = wc.cvr + (wc.cvl - 1.0)
        gS = wc.csr + wc.csl
        gT = wc.ct

        fp = self.form_factors.f_p(s)
        f0 = self.form_factors.f_0(s)
        fT = self.form_factors.f_t(s)

        mu = self.mu()
        mc_at_mu = self.model.m_c_msbar(mu)
        mQ_at_mu = self.m_Q_msbar(mu)

        m_D2 = m_D * m_D
        m_P2 = m_P * m_P
        p = np.sqrt(kallen(m_D2, m_P2, s)) / (2.0 * m_D)

        #--lepton velocity in the dilepton rest frame
        v = 1.0 - m_l * m_l / s
        ml_hat = np.sqrt(1.0 - v)
        NF = v * v * s * self.g_fermi()**2 / (256.0 * np.pi**3 * m_D2)

        iso = self.isospin_factor
        h_0 = iso * 2.0 * m_D * p * fp * (1.0 + gV) / np.sqrt(s)
        h_t = iso * (1.0 + gV) * (m_D2 - m_P2) * f0 / np.sqrt(s)
        h_S = -iso * gS * (m_D2 - m_P2) * f0 / (mc_at_mu - mQ_at_mu)
        h_T = -iso * 2.0 * m_D * p * fT * gT / (m_D + m_P)
        h_tS = h_t - h_S / ml_hat

        return Amplitudes(h_0, h_t, h_S, h_T, h_tS, v, p, NF)

    ### differential observables

    def normalized_two_differential_decay_width(self, s, c_theta_l):
        """
        d^2 Gamma/(ds dcos(theta_l)) for |V_cQ| = 1 [DDS2014] eq. (13).
        """
        c_thl_2 = c_theta_l * c_theta_l
        s_thl_2 = 1.0 - c_thl_2
        c_2_thl = 2.0 * c_thl_2 - 1.0

        a = self.amplitudes(s)

        return 2.0 * a.NF * a.p * (
                abs(a.h_0)**2 * s_thl_2
                + (1.0 - a.v) * abs(a.h_0 * c_theta_l - a.h_tS)**2
                + 8.0 * (((2.0 - a.v) + a.v * c_2_thl) * abs(a.h_T)**2
                         - np.sqrt(1.0 - a.v) * (a.h_T * (np.conj(a.h_0) - np.conj(a.h_tS) * c_theta_l)).real)
            )

    def normalized_differential_decay_width(self, s):
        a = self.amplitudes(s)

        return 4.0 / 3.0 * a.NF * a.p * (
                abs(a.h_0)**2 * (3.0 - a.v)
                + 3.0 * abs(a.h_tS)**2 * (1.0 - a.v)
                + 16.0 * abs(a.h_T)**2 * (3.0 - 2.0 * a.v)
                - 24.0 * np.sqrt(1.0 - a.v) * (a.h_T * np.conj(a.h_0)).real
            )

    def normalized_differential_decay_width_p(self, s):
        a = self.amplitudes(s)
        return 4.0 / 3.0 * a.NF * a.p * abs(a.h_0)**2 * (3.0 - a.v)

    def normalized_differential_decay_width_0(self, s):
        a = self.amplitudes(s)
        return 4.0 / 3.0 * a.NF * a.p * 3.0 * abs(a.h_t)**2 * (1.0 - a.v)

    def numerator_differential_a_fb_leptonic(self, s):
        """
        Forward minus backward rate; |H_0 cos(theta) - H_tS|^2 is taken as the modulus squared.
        """
        a = self.amplitudes(s)

        return -4.0 * a.NF * a.p * (
                (a.h_0 * np.conj(a.h_tS)).real * (1.0 - a.v)
                - 4.0 * np.sqrt(1.0 - a.v) * (a.h_T * np.conj(a.h_tS)).real
            )

    def numerator_differential_flat_term(self, s):
        a = self.amplitudes(s)

        return a.NF * a.p * (
                (abs(a.h_0)**2 + abs(a.h_tS)**2) * (1.0 - a.v)
                + 16.0 * abs(a.h_T)**2
                - 8.0 * np.sqrt(1.0 - a.v) * (a.h_T * np.conj(a.h_0)).real
            )

    def numerator_differential_lepton_polarization(self, s):
        """
        Rate of positive minus negative lepton helicity [STTW2013] eqs. (49a-49b).
        """
        a = self.amplitudes(s)
        sq = np.sqrt(1.0 - a.v)

        dGplus = ((abs(a.h_0)**2 + 3.0 * abs(a.h_t)**2) * (1.0 - a.v) / 2.0
                  + 3.0 / 2.0 * abs(a.h_S)**2
                  + 8.0 * abs(a.h_T)**2
                  - sq * (3.0 * a.h_t * np.conj(a.h_S) + 4.0 * a.h_0 * np.conj(a.h_T)).real)
        dGminus = (abs(a.h_0)**2
                   + 16.0 * abs(a.h_T)**2 * (1.0 - a.v)
                   - 8.0 * sq * (a.h_0 * np.conj(a.h_T)).real)

        return 8.0 / 3.0 * a.NF * a.p * (dGplus - dGminus)

    def differential_decay_width(self, s):
        return self.normalized_differential_decay_width(s) * abs(self.v_cQ())**2

    def differential_branching_ratio(self, s):
        return self.differential_decay_width(s) * self.tau_D() / self.hbar()

    def normalized_differential_branching_ratio(self, s):
        return self.normalized_differential_decay_width(s) * self.tau_D() / self.hbar()

    def differential_a_fb_leptonic(self, s):
        return self.numerator_differential_a_fb_leptonic(s) / self.normalized_differential_decay_width(s)

    def differential_flat_term(self, s):
        return self.numerator_differential_flat_term(s) / self.normalized_differential_decay_width(s)

    def differential_lepton_polarization(self, s):
        return self.numerator_differential_lepton_polarization(s) / self.normalized_differential_decay_width(s)

    ### probability densities

    def _q2_range(self):
        return self.m_l()**2, (self.m_D() - self.m_P())**2

    def differential_pdf_q2(self, q2):
        q2_min, q2_max = self._q2_range()
        num = self.normalized_differential_branching_ratio(q2)
        denom = self._integrate(self.normalized_differential_branching_ratio, q2_min, q2_max, "pdf_q2")
        return num / denom

    def differential_pdf_w(self, w):
        """
        PDF in the recoil w, with w = 1 at zero recoil.
        """
        m_D, m_P = self.m_D(), self.m_P()
        q2 = m_D * m_D + m_P * m_P - 2.0 * m_D * m_P * w
        return 2.0 * m_D * m_P * self.differential_pdf_q2(q2)

    def integrated_pdf_q2(self, q2_min, q2_max):
        q2_abs_min, q2_abs_max = self._q2_range()
        f = self.normalized_differential_branching_ratio
        num = self._integrate(f, q2_min, q2_max, "integrated_pdf_q2")
        denom = self._integrate(f, q2_abs_min, q2_abs_max, "integrated_pdf_q2")
        return num / denom / (q2_max - q2_min)

    def integrated_pdf_w(self, w_min, w_max):
        m_D, m_P = self.m_D(), self.m_P()
        q2_max = m_D * m_D + m_P * m_P - 2.0 * m_D * m_P * w_min
        q2_min = m_D * m_D + m_P * m_P - 2.0 * m_D * m_P * w_max
        return self.integrated_pdf_q2(q2_min, q2_max) * (q2_max - q2_min) / (w_max - w_min)

    ### integrated observables

    def integrated_branching_ratio(self, s_min, s_max):
        return self._integrate(self.differential_branching_ratio, s_min, s_max, "integrated_branching_ratio")

    def normalized_integrated_branching_ratio(self, s_min, s_max):
        return self._integrate(self.normalized_differential_branching_ratio, s_min, s_max,
                               "normalized_integrated_branching_ratio")

    def normalized_integrated_decay_width_p(self, s_min, s_max):
        return self._integrate(self.normalized_differential_decay_width_p, s_min, s_max, "decay_width_p")

    def normalized_integrated_decay_width_0(self, s_min, s_max):
        return self._integrate(self.normalized_differential_decay_width_0, s_min, s_max, "decay_width_0")

    def normalized_integrated_decay_width(self, s_min, s_max):
        return self._integrate(self.normalized_differential_decay_width, s_min, s_max, "decay_width")

    def _integrated_ratio(self, numerator, s_min, s_max, channel):
        num = self._integrate(numerator, s_min, s_max, channel)
        denom = self._integrate(self.normalized_differential_decay_width, s_min, s_max, channel)
        return num / denom

    def integrated_a_fb_leptonic(self, s_min, s_max):
        return self._integrated_ratio(self.numerator_differential_a_fb_leptonic, s_min, s_max, "a_fb_leptonic")

    def integrated_flat_term(self, s_min, s_max):
        return self._integrated_ratio(self.numerator_differential_flat_term, s_min, s_max, "flat_term")

    def integrated_lepton_polarization(self, s_min, s_max):
        return self._integrated_ratio(self.numerator_differential_lepton_polarization, s_min, s_max,
                                      "lepton_polarization")
