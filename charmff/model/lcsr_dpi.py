"""
Light-cone sum rules for the D -> pi form factors f_+, f_0 and f_T [KKMO2009].

The correlation function of the c -> d currents with an on-shell pion is
expanded near the light cone. Its leading-order twist-2, twist-3 and twist-4
contributions are integrals over the momentum fraction u of the pion LCDAs,
    int_{u0}^{1} du  exp(-(mc2 - q2 ubar + mpi2 u ubar) / (u M2)) * (...),
and its NLO twist-2 and twist-3 contributions are dispersion integrals over
r2 = s/mc2 of the imaginary parts in kernels.py,
    int_{1}^{s0(q2)/mc2} dr2  exp(-mc2 r2 / M2) * Im T(r1, r2).
The effective thresholds s0(q2) are quadratic polynomials in q2, one per
form factor. Every integral has a variant with select_weight = 1 that inserts
the exponent's argument as a weight, which gives the derivative with respect to
-1/M2 used by the duality-mass checks MDp_lcsr, MD0_lcsr and MDT_lcsr.

With the option rescale-borel = 1 the Borel parameter is rescaled at every q2,
M2(q2) = M2 * rho(q2), such that the mean momentum fraction of the LO twist-2
plus twist-3 integrand at q2 matches its value at q2 = 0.

The form factors are normalized to the decay constant f_D obtained from the
two-point sum rule in decay_constant().

Parameters are read once at the start of every public call into a
KKMO2009Snapshot that is passed down explicitly. Nothing is cached between
calls, so changes to the parameter store are always seen.
"""

import logging

import numpy as np

from charmff.model import kernels as K
from charmff.qcdlib import config_loader as cfg
from charmff.qcdlib.integrate import QAGS, IntegrationError
from charmff.qcdlib.lcda import PION_LCDA
from charmff.qcdlib.model import SM
from charmff.qcdlib.options import OptionSpecification, validate
from charmff.qcdlib.parameters import ParameterUser
from charmff.qcdlib.special import re_li2, gamma_inc0

logger = logging.getLogger(__name__)

pi2 = np.pi**2

#--lower bound of the u integrals and offsets from the integrable endpoints
U_MIN = 1.0e-10
R2_EPS = 1.0e-12
S_EPS = 1.0e-10


def duality_u0(mc2, q2, s0):
    """
    Lower bound of the LO u integrals, u0 = (mc2 - q2)/(s0 - q2), clamped to at least 1e-10.

    inputs: mc2 = charm mass squared; type = float
            q2  = momentum transfer;  type = float
            s0  = duality threshold at q2; type = float
    """
    return max(U_MIN, (mc2 - q2) / (s0 - q2))


class KKMO2009Snapshot:
    """
    Values of all inputs of the D -> pi sum rules at the time of one public call.
    """

    def __init__(self, sr):
        self.MD = sr.MD()
        self.mpi = sr.mpi()
        self.fpi = sr.fpi()
        self.M2 = sr.M2()
        self.Mprime2 = sr.Mprime2()
        self._s0 = {
            "+": (sr._s0_plus(), sr._s0_plus_p(), sr._s0_plus_pp()),
            "0": (sr._s0_zero(), sr._s0_zero_p(), sr._s0_zero_pp()),
            "T": (sr._s0_T(), sr._s0_T_p(), sr._s0_T_pp()),
        }
        self.sprime0B = sr.sprime0B()
        self.mu = sr.mu()
        self.zeta_nnlo = sr.zeta_nnlo()
        self.m02 = sr.m02()
        self.cond_GG = sr.cond_GG()
        self.r_vac = sr.r_vac()

        self.mc = sr.model.m_c_msbar(self.mu)
        self.mc2 = self.mc * self.mc
        self.mpi2 = self.mpi * self.mpi
        self.alpha_s = sr.model.alpha_s(self.mu)
        self.alpha_s_1 = sr.model.alpha_s(1.0)
        self.lcda = sr.lcda.at(self.mu)
        self.mupi = self.lcda.mupi
        self.mupi_1 = sr.lcda.mupi(1.0)

    def _threshold(self, channel, q2):
        s0, s0p, s0pp = self._s0[channel]
        return s0 + s0p * q2 + s0pp * 0.5 * q2 * q2

    def s0D(self, q2):
        return self._threshold("+", q2)

    def s0tilD(self, q2):
        return self._threshold("0", q2)

    def s0TD(self, q2):
        return self._threshold("T", q2)


class AnalyticFormFactorDToPiKKMO2009(ParameterUser):
    """
    D -> pi form factors from light-cone sum rules.

    inputs: parameters = parameter store;                   type = Parameters
            options    = {"rescale-borel": "1" or "0"};     type = dict
    """

    options = (
        OptionSpecification("rescale-borel", ("1", "0"), "1"),
    )

    def __init__(self, parameters, options=None):
        super().__init__()
        self.opts = validate(options, self.options)

        self.model = SM(parameters)
        self.lcda = PION_LCDA(parameters, self.model)

        use = lambda name: self.use(parameters, name)

        #--hadronic parameters
        self.MD = use("mass::D_d")
        self.mpi = use("mass::pi^+")
        self.fpi = use("decay-constant::pi")

        #--Borel parameters, thresholds and renormalization scale
        self.M2 = use("D->pi::M^2@KKMO2009")
        self.Mprime2 = use("D->pi::Mp^2@KKMO2009")
        self._s0_plus = use("D->pi::s_0^+(0)@KKMO2009")
        self._s0_plus_p = use("D->pi::s_0^+'(0)@KKMO2009")
        self._s0_plus_pp = use("D->pi::s_0^+''(0)@KKMO2009")
        self._s0_zero = use("D->pi::s_0^0(0)@KKMO2009")
        self._s0_zero_p = use("D->pi::s_0^0'(0)@KKMO2009")
        self._s0_zero_pp = use("D->pi::s_0^0''(0)@KKMO2009")
        self._s0_T = use("D->pi::s_0^T(0)@KKMO2009")
        self._s0_T_p = use("D->pi::s_0^T'(0)@KKMO2009")
        self._s0_T_pp = use("D->pi::s_0^T''(0)@KKMO2009")
        self.sprime0B = use("D->pi::sp_0^B@KKMO2009")
        self.mu = use("D->pi::mu@KKMO2009")

        #--estimate of the NNLO corrections, zeta in [-1, 1]
        self.zeta_nnlo = use("D->pi::zeta(NNLO)@KKMO2009")

        #--QCD vacuum
        self.m02 = use("QCD::m_0^2")
        self.cond_GG = use("QCD::cond_GG")
        self.r_vac = use("QCD::r_vac")

        self.uses(self.model)
        self.uses(self.lcda)

        self.qags = QAGS(epsrel=cfg.integration['epsrel'])

        if self.opts["rescale-borel"] == "1":
            self._rescale_p = self._rescale_factor_p
            self._rescale_0 = self._rescale_factor_0
            self._rescale_T = self._rescale_factor_T
        else:
            self._rescale_p = self._no_rescale_factor
            self._rescale_0 = self._no_rescale_factor
            self._rescale_T = self._no_rescale_factor

        logger.debug("D->pi KKMO2009 sum rules with rescale-borel = %s", self.opts["rescale-borel"])

    def snapshot(self):
        return KKMO2009Snapshot(self)

    def _integrate(self, f, a, b, q2, channel):
        return self.qags.integrate(f, a, b, q2=q2, channel=channel)

    ###########################################################################
    # two-point sum rule for f_D
    ###########################################################################

    @staticmethod
    def rho_1(s, mc, mu):
        """
        NLO spectral density of the two-point correlator [KKMO2009] eq. (C.2).
        """
        mc2 = mc * mc
        x = mc2 / s
        lnx = np.log(x)
        ln1mx = np.log(1.0 - x)
        re_li2_x = re_li2(x)
        lnmumc = np.log(mu / mc)

        return s / 2 * (1.0 - x) * (
                (1.0 - x) * (4.0 * re_li2_x + 2.0 * lnx * ln1mx - (5.0 - 2.0 * x) * ln1mx)
                + (1.0 - 2.0 * x) * (3.0 - x) * lnx + 3.0 * (1.0 - 3.0 * x) * 2.0 * lnmumc
                + (17.0 - 33.0 * x) / 2.0
            )

    @staticmethod
    def delta_1(mc, mu, Mprime2):
        """
        NLO correction to the quark-condensate term.
        """
        mc2 = mc * mc
        mu2 = mu * mu
        gamma = gamma_inc0(mc2 / Mprime2)

        return -3.0 / 2.0 * (gamma * np.exp(mc2 / Mprime2) - 1.0 - (1.0 - mc2 / Mprime2) * (np.log(mu2 / mc2) + 4.0 / 3.0))

    def _condensates(self, p):
        #--<qq> at mu and at 1 GeV from the GMOR relation
        cond_qq_mu = -p.fpi * p.fpi * p.mupi / 2.0
        cond_qq_1 = -p.fpi * p.fpi * p.mupi_1 / 2.0
        return cond_qq_mu, cond_qq_1

    def _svz_integral(self, p, moment):
        mc, mc2, Mp2, alpha_s = p.mc, p.mc2, p.Mprime2, p.alpha_s

        if moment == 0:
            def integrand(s):
                return np.exp(-s / Mp2) * ((s - mc2) * (s - mc2) / s + 4.0 * alpha_s / (3.0 * np.pi) * self.rho_1(s, mc, p.mu))
        else:
            def integrand(s):
                return np.exp(-s / Mp2) * ((s - mc2) * (s - mc2) + 4.0 * s * alpha_s / (3.0 * np.pi) * self.rho_1(s, mc, p.mu))

        return self.qags.integrate(integrand, mc2 + S_EPS, p.sprime0B, channel=f"f_D moment {moment}")

    def _svz_power_corrections(self, p):
        mc, mc2, Mp2 = p.mc, p.mc2, p.Mprime2
        mc4 = mc2 * mc2
        Mp4 = Mp2 * Mp2
        cond_qq_mu, cond_qq_1 = self._condensates(p)

        return (
                - mc * cond_qq_mu * (1.0 + 4.0 * p.alpha_s / (3.0 * np.pi) * self.delta_1(mc, p.mu, Mp2))
                - mc * cond_qq_1 * p.m02 / (2.0 * Mp2) * (1.0 - mc2 / (2 * Mp2))
                + p.cond_GG / 12.0
            ), - 16.0 * np.pi * p.alpha_s_1 * cond_qq_1 * cond_qq_1 / (27.0 * Mp2) * (1.0 - mc2 / (4.0 * Mp2) - mc4 / (12.0 * Mp4))

    def _decay_constant(self, p):
        MD2 = p.MD * p.MD
        mc2 = p.mc2
        power, four_quark = self._svz_power_corrections(p)

        result = np.exp(MD2 / p.Mprime2) / (MD2 * MD2) * (
                3.0 * mc2 / (8.0 * pi2) * self._svz_integral(p, 0)
                + mc2 * np.exp(-mc2 / p.Mprime2) * (power + four_quark * p.r_vac)
            )

        return np.sqrt(result)

    def decay_constant(self):
        """
        Decay constant f_D from the two-point SVZ sum rule with Borel parameter Mp^2
        and threshold sp_0^B.
        """
        return self._decay_constant(self.snapshot())

    def MD_svz(self):
        """
        D-meson mass implied by the two-point sum rule (first over zeroth moment).
        """
        p = self.snapshot()
        mc, mc2, Mp2 = p.mc, p.mc2, p.Mprime2
        mc4 = mc2 * mc2
        Mp4 = Mp2 * Mp2
        cond_qq_mu, cond_qq_1 = self._condensates(p)
        power, four_quark = self._svz_power_corrections(p)

        #--the four-quark terms of the mass ratio enter without r_vac
        numerator = (3.0 * mc2 / (8.0 * pi2) * self._svz_integral(p, 1)
                + mc4 * np.exp(-mc2 / Mp2) * (power + four_quark)
                + mc2 * np.exp(-mc2 / Mp2) * (
                    - mc * cond_qq_mu * 4.0 * p.alpha_s / (3.0 * np.pi) * self.delta_1(mc, p.mu, Mp2)
                    - mc * cond_qq_1 * p.m02 / (2.0 * Mp2) * (mc2 - Mp2)
                    + 16.0 * np.pi * p.alpha_s_1 * cond_qq_1 * cond_qq_1 / (27.0 * 4.0 * Mp4) * (4.0 * Mp4 - 2.0 * Mp2 * mc2 - mc4)
                ))
        denominator = (3.0 * mc2 / (8.0 * pi2) * self._svz_integral(p, 0)
                + mc2 * np.exp(-mc2 / Mp2) * (power + four_quark))

        return np.sqrt(numerator / denominator)

    ###########################################################################
    # LO integrands over u
    ###########################################################################

    #--select_weight:
    #--  0.0 -> regular integral
    #--  1.0 -> integral of derivative w.r.t. -1/M^2

    @staticmethod
    def _borel_u(p, u, q2, M2, select_weight):
        X = (p.mc2 - q2 * (1.0 - u) + p.mpi2 * u * (1.0 - u)) / u
        weight = (1.0 - select_weight) + select_weight * X
        return weight * np.exp(-X / M2)

    def _F_lo_tw2_integrand(self, p, u, q2, M2, select_weight):
        return self._borel_u(p, u, q2, M2, select_weight) / u * p.lcda.phi(u)

    def _F_lo_tw3_integrand(self, p, u, q2, M2, select_weight):
        mc2, mpi2, lcda = p.mc2, p.mpi2, p.lcda
        omega3pi = lcda.omega3pi
        u2 = u * u
        D = mc2 - q2 + u2 * mpi2

        tw3a = lcda.phi3p(u) + (
                lcda.phi3s(u) / u
                - (mc2 + q2 - u2 * mpi2) / (2 * D) * lcda.phi3s_d1(u)
                - (2 * u * mpi2 * mc2) / D**2 * lcda.phi3s(u)
            ) / 3.0
        tw3b = 2.0 / u * (mc2 - q2 - u2 * mpi2) / D * (K.I3_d1(u, omega3pi) - (2.0 * u * mpi2) / D * K.I3(u, omega3pi))
        tw3c = 3.0 * mpi2 / D * (K.I3bar_d1(u, omega3pi) - (2.0 * u * mpi2) / D * K.I3bar(u, omega3pi))

        return self._borel_u(p, u, q2, M2, select_weight) * (
                p.mupi / p.mc * tw3a - lcda.f3pi / (p.mc * p.fpi) * (tw3b + tw3c)
            )

    def _F_lo_tw4_integrand(self, p, u, q2, M2, select_weight):
        mc2, mpi2, lcda = p.mc2, p.mpi2, p.lcda
        mpi4 = mpi2 * mpi2
        a2pi, deltapipi, omega4pi = lcda.a2pi, lcda.deltapipi, lcda.omega4pi
        u2 = u * u
        D = mc2 - q2 + u2 * mpi2

        I4bar = K.I4bar(u, mpi2, a2pi, deltapipi, omega4pi)

        tw4psi = u * lcda.psi4(u) + (mc2 - q2 - u2 * mpi2) / D * lcda.psi4_i(u)
        tw4phi = (
                lcda.phi4_d2(u)
                - 6.0 * u * mpi2 / D * lcda.phi4_d1(u)
                + 12.0 * u * mpi4 / D**2 * lcda.phi4(u)
            ) * mc2 * u / (4 * D)
        tw4I4 = K.I4_d1(u, mpi2, a2pi, deltapipi) - 2.0 * u * mpi2 / D * K.I4(u, mpi2, a2pi, deltapipi)
        tw4I4bar1 = (u * K.I4bar_d1(u, mpi2, a2pi, deltapipi, omega4pi)
                + (mc2 - q2 - 3.0 * u2 * mpi2) / D * I4bar) * 2.0 * u * mpi2 / D
        tw4I4bar2 = (I4bar + 6.0 * u * mpi2 / D * K.I4barI(u, mpi2, a2pi, deltapipi, omega4pi)) \
                * 2.0 * u * mpi2 * (mc2 - q2 - u2 * mpi2) / D

        return self._borel_u(p, u, q2, M2, select_weight) \
                * (tw4psi - tw4phi - tw4I4 - tw4I4bar1 - tw4I4bar2) / D

    def _Ftil_lo_tw3_integrand(self, p, u, q2, M2, select_weight):
        mc2, mpi2, lcda = p.mc2, p.mpi2, p.lcda
        omega3pi = lcda.omega3pi
        u2 = u * u
        D = mc2 - q2 + u2 * mpi2

        tw3a = lcda.phi3p(u) / u + 1 / (6 * u) * lcda.phi3s_d1(u)
        tw3b = mpi2 / D * (K.I3til_d1(u, omega3pi) - (2.0 * u * mpi2) / D * K.I3til(u, omega3pi))

        return self._borel_u(p, u, q2, M2, select_weight) * (
                p.mupi / p.mc * tw3a + lcda.f3pi / (p.mc * p.fpi) * tw3b
            )

    def _Ftil_lo_tw4_integrand(self, p, u, q2, M2, select_weight):
        mc2, mpi2, lcda = p.mc2, p.mpi2, p.lcda
        mpi4 = mpi2 * mpi2
        a2pi, deltapipi, omega4pi = lcda.a2pi, lcda.deltapipi, lcda.omega4pi
        u2 = u * u
        D = mc2 - q2 + u2 * mpi2

        tw4psi = lcda.psi4(u) - (2.0 * u * mpi2) / D * lcda.psi4_i(u)
        tw4I4bar = (
                - K.I4bar_d1(u, mpi2, a2pi, deltapipi, omega4pi)
                + (6.0 * u * mpi2) / D * K.I4bar(u, mpi2, a2pi, deltapipi, omega4pi)
                + (12.0 * u2 * mpi4) / D**2 * K.I4barI(u, mpi2, a2pi, deltapipi, omega4pi)
            ) * 2.0 * u * mpi2 / D

        return self._borel_u(p, u, q2, M2, select_weight) * (tw4psi + tw4I4bar) / D

    def _FT_lo_tw2_integrand(self, p, u, q2, M2, select_weight):
        return self._borel_u(p, u, q2, M2, select_weight) / u * p.lcda.phi(u)

    def _FT_lo_tw3_integrand(self, p, u, q2, M2, select_weight):
        mc2, mpi2, lcda = p.mc2, p.mpi2, p.lcda
        D = mc2 - q2 + u * u * mpi2

        return - p.mc * p.mupi * self._borel_u(p, u, q2, M2, select_weight) \
                * (lcda.phi3s_d1(u) - 2 * u * mpi2 * lcda.phi3s(u) / D) / (3.0 * D)

    def _FT_lo_tw4_integrand(self, p, u, q2, M2, select_weight):
        mc2, mpi2, lcda = p.mc2, p.mpi2, p.lcda
        mpi4 = mpi2 * mpi2
        a2pi, deltapipi, omega4pi = lcda.a2pi, lcda.deltapipi, lcda.omega4pi
        D = mc2 - q2 + u * u * mpi2

        tw4phi1 = (lcda.phi4_d1(u) - 2 * u * mpi2 * lcda.phi4(u) / D) / 4.0
        tw4phi2 = - mc2 * u * (
                lcda.phi4_d2(u)
                - 6.0 * u * mpi2 * lcda.phi4_d1(u) / D
                + 12.0 * u * mpi4 * lcda.phi4(u) / D**2
            ) / (4.0 * D)
        tw4I4T = - (K.I4T_d1(u, mpi2, a2pi, deltapipi, omega4pi)
                - 2.0 * u * mpi2 * K.I4T(u, mpi2, a2pi, deltapipi, omega4pi) / D)

        return self._borel_u(p, u, q2, M2, select_weight) * (tw4phi1 + tw4phi2 + tw4I4T) / D

    ###########################################################################
    # LO integrals
    ###########################################################################

    def _s0_select(self, p, q2, select_corr):
        return p.s0D(q2) * (1.0 - select_corr) + p.s0tilD(q2) * select_corr

    def _F_lo_tw2(self, p, q2, M2, select_weight=0.0, select_corr=0.0):
        u0 = duality_u0(p.mc2, q2, self._s0_select(p, q2, select_corr))
        f = lambda u: self._F_lo_tw2_integrand(p, u, q2, M2, select_weight)
        return p.mc2 * p.fpi * self._integrate(f, u0, 1.0, q2, "F_lo_tw2")

    def _F_lo_tw3(self, p, q2, M2, select_weight=0.0, select_corr=0.0):
        u0 = duality_u0(p.mc2, q2, self._s0_select(p, q2, select_corr))
        f = lambda u: self._F_lo_tw3_integrand(p, u, q2, M2, select_weight)
        return p.mc2 * p.fpi * self._integrate(f, u0, 1.0, q2, "F_lo_tw3")

    def _F_lo_tw4(self, p, q2, M2, select_weight=0.0, select_corr=0.0):
        u0 = duality_u0(p.mc2, q2, self._s0_select(p, q2, select_corr))
        f = lambda u: self._F_lo_tw4_integrand(p, u, q2, M2, select_weight)
        return p.mc2 * p.fpi * self._integrate(f, u0, 1.0 - U_MIN, q2, "F_lo_tw4")

    def _Ftil_lo_tw3(self, p, q2, M2, select_weight=0.0):
        u0 = duality_u0(p.mc2, q2, p.s0tilD(q2))
        f = lambda u: self._Ftil_lo_tw3_integrand(p, u, q2, M2, select_weight)
        return p.mc2 * p.fpi * self._integrate(f, u0, 1.0, q2, "Ftil_lo_tw3")

    def _Ftil_lo_tw4(self, p, q2, M2, select_weight=0.0):
        u0 = duality_u0(p.mc2, q2, p.s0tilD(q2))
        f = lambda u: self._Ftil_lo_tw4_integrand(p, u, q2, M2, select_weight)
        return p.mc2 * p.fpi * self._integrate(f, u0, 1.0 - U_MIN, q2, "Ftil_lo_tw4")

    def _FT_lo_tw2(self, p, q2, M2, select_weight=0.0):
        u0 = duality_u0(p.mc2, q2, p.s0TD(q2))
        f = lambda u: self._FT_lo_tw2_integrand(p, u, q2, M2, select_weight)
        return p.mc * p.fpi * self._integrate(f, u0, 1.0, q2, "FT_lo_tw2")

    def _FT_lo_tw3(self, p, q2, M2, select_weight=0.0):
        u0 = duality_u0(p.mc2, q2, p.s0TD(q2))
        f = lambda u: self._FT_lo_tw3_integrand(p, u, q2, M2, select_weight)
        return p.mc * p.fpi * self._integrate(f, u0, 1.0, q2, "FT_lo_tw3")

    def _FT_lo_tw4(self, p, q2, M2, select_weight=0.0):
        u0 = duality_u0(p.mc2, q2, p.s0TD(q2))
        f = lambda u: self._FT_lo_tw4_integrand(p, u, q2, M2, select_weight)
        return p.mc * p.fpi * self._integrate(f, u0, 1.0 - U_MIN, q2, "FT_lo_tw4")

    ###########################################################################
    # NLO dispersion integrals over r2 = s/mc2
    ###########################################################################

    @staticmethod
    def _borel_r2(p, r2, M2, select_weight):
        weight = (1.0 - select_weight) + select_weight * p.mc2 * r2
        return weight * np.exp(-p.mc2 * r2 / M2)

    @staticmethod
    def _borel_endpoint(p, M2, select_weight):
        weight = (1.0 - select_weight) + select_weight * p.mc2
        return weight * np.exp(-p.mc2 / M2)

    def _F_nlo_tw2(self, p, q2, M2, select_weight=0.0):
        mc2, mu2 = p.mc2, p.mu * p.mu
        a2pi, a4pi = p.lcda.a2pi, p.lcda.a4pi
        r1 = q2 / mc2

        def integrand(r2):
            T = (K.tw2_theta_rhom1(r1, r2, mc2, mu2, a2pi, a4pi)
                 + K.tw2_theta_1mrho(r1, r2, mc2, mu2, a2pi, a4pi)
                 + K.tw2_delta(r1, r2, mc2, mu2, a2pi, a4pi))
            return -2.0 * T * self._borel_r2(p, r2, M2, select_weight)

        return mc2 * p.fpi * self._integrate(integrand, 1.0 + R2_EPS, p.s0D(q2) / mc2, q2, "F_nlo_tw2")

    def _F_nlo_tw3(self, p, q2, M2, select_weight=0.0):
        mc2 = p.mc2
        r1 = q2 / mc2
        lmu = 2.0 * np.log(p.mc / p.mu)

        def integrand(r2):
            Tp = K.tw3p_theta_rhom1(r1, r2, lmu) + K.tw3p_theta_1mrho(r1, r2, lmu) + K.tw3p_delta_rhom1(r1, r2, lmu)
            Ts = (K.tw3sigma_theta_rhom1(r1, r2, lmu) + K.tw3sigma_theta_1mrho(r1, r2, lmu)
                  + K.tw3sigma_delta_rhom1(r1, r2, lmu))
            return (2.0 / (r2 - r1) * Tp + 1.0 / 3.0 * Ts) * self._borel_r2(p, r2, M2, select_weight)

        integral = self._integrate(integrand, 1.0 + R2_EPS, p.s0D(q2) / mc2, q2, "F_nlo_tw3")

        return p.fpi * p.mupi * p.mc * (
                integral
                - (
                    2.0 / (1.0 - r1) * (4.0 - 3.0 * lmu)
                    + 2.0 * (1.0 + r1) / (1.0 - r1)**2 * (4.0 - 3.0 * lmu)
                ) * self._borel_endpoint(p, M2, select_weight)
            )

    def _Ftil_nlo_tw2(self, p, q2, M2, select_weight=0.0):
        mc2 = p.mc2
        a2pi, a4pi = p.lcda.a2pi, p.lcda.a4pi
        r1 = q2 / mc2

        def integrand(r2):
            T = (K.tw2til_theta_1mrho(r1, r2, a2pi, a4pi)
                 + K.tw2til_theta_rhom1(r1, r2, a2pi, a4pi)
                 + K.tw2til_delta(r1, r2, a2pi, a4pi))
            return T * self._borel_r2(p, r2, M2, select_weight)

        return mc2 * p.fpi * self._integrate(integrand, 1.0 + R2_EPS, p.s0tilD(q2) / mc2, q2, "Ftil_nlo_tw2")

    def _Ftil_nlo_tw3(self, p, q2, M2, select_weight=0.0):
        """
        The integrand is ill-conditioned near r2 = r1; failures are reported with
        the upper bound of the dispersion integral.
        """
        mc2 = p.mc2
        r1 = q2 / mc2
        lmu = 2.0 * np.log(p.mc / p.mu)
        r2_max = p.s0tilD(q2) / mc2

        def integrand(r2):
            try:
                Tp = (K.tw3ptil_theta_rhom1(r1, r2, lmu) + K.tw3ptil_theta_1mrho(r1, r2, lmu)
                      + K.tw3ptil_delta_rhom1(r1, r2, lmu))
                Ts = (K.tw3sigmatil_theta_1mrho(r1, r2, lmu) + K.tw3sigmatil_theta_rhom1(r1, r2, lmu)
                      + K.tw3sigmatil_delta_rhom1(r1, r2, lmu))
                return (
                        1.0 / (r2 * (r2 - r1)) * Tp
                        + 1.0 / (3.0 * r2 * (r2 - r1)**2) * Ts
                    ) * self._borel_r2(p, r2, M2, select_weight)
            except (ZeroDivisionError, ValueError, FloatingPointError, OverflowError) as e:
                raise IntegrationError(f"could not evaluate integrand of Ftil_nlo_tw3; r2 = {r2_max}",
                                       1.0 + R2_EPS, r2_max, {"q2": q2, "r2": r2}) from e

        try:
            integral = self._integrate(integrand, 1.0 + R2_EPS, r2_max, q2, "Ftil_nlo_tw3")
        except IntegrationError as e:
            raise IntegrationError(f"could not integrate Ftil_nlo_tw3; r2 = {r2_max}", e.a, e.b, e.context) from e

        return p.fpi * p.mupi * p.mc * integral

    def _FT_nlo_tw2(self, p, q2, M2, select_weight=0.0):
        mc2, mu2 = p.mc2, p.mu * p.mu
        a2pi, a4pi = p.lcda.a2pi, p.lcda.a4pi
        r1 = q2 / mc2

        def integrand(r2):
            T = (K.tw2T_theta_rhom1(r1, r2, mc2, mu2, a2pi, a4pi)
                 + K.tw2T_theta_1mrho(r1, r2, mc2, mu2, a2pi, a4pi)
                 + K.tw2T_delta(r1, r2, mc2, mu2, a2pi, a4pi))
            return 2.0 * T * self._borel_r2(p, r2, M2, select_weight)

        return p.mc * p.fpi * self._integrate(integrand, 1.0 + R2_EPS, p.s0TD(q2) / mc2, q2, "FT_nlo_tw2")

    def _FT_nlo_tw3(self, p, q2, M2, select_weight=0.0):
        mc2 = p.mc2
        r1 = q2 / mc2
        lmu = 2.0 * np.log(p.mc / p.mu)

        def integrand(r2):
            Tp = K.tw3pT_theta_rhom1(r1, r2, lmu) + K.tw3pT_theta_1mrho(r1, r2, lmu) + K.tw3pT_delta_rhom1(r1, r2, lmu)
            Ts = (K.tw3sigmaT_theta_1mrho(r1, r2, lmu) + K.tw3sigmaT_theta_rhom1(r1, r2, lmu)
                  + K.tw3sigmaT_delta_rhom1(r1, r2, lmu))
            return (
                    2.0 / (r2 - r1)**2 * Tp
                    + 2.0 / (3.0 * r2 * (r2 - r1)**3) * Ts
                ) * self._borel_r2(p, r2, M2, select_weight)

        integral = self._integrate(integrand, 1.0 + R2_EPS, p.s0TD(q2) / mc2, q2, "FT_nlo_tw3")

        return p.fpi * p.mupi * (
                integral
                - 4.0 * (4.0 - 3.0 * lmu) * self._borel_endpoint(p, M2, select_weight) / (1.0 - q2 / mc2)**2
            )

    ###########################################################################
    # Borel rescaling
    ###########################################################################

    def _no_rescale_factor(self, p, q2):
        return 1.0

    def _moment_ratio(self, p, q2, s0_q2, integrand_q2, integrand_zero, channel):
        """
        rho(q2) = [I1(0)/I1(q2)] / [I0(0)/I0(q2)], with I1 the u-weighted integral.

        Both u ranges are bounded by the threshold at q2.
        """
        mc2 = p.mc2
        u0_q2 = duality_u0(mc2, q2, s0_q2)
        u0_zero = max(U_MIN, mc2 / s0_q2)

        I1_zero = self._integrate(lambda u: u * integrand_zero(u), u0_zero, 1.0, 0.0, channel)
        I1_q2 = self._integrate(lambda u: u * integrand_q2(u), u0_q2, 1.0, q2, channel)
        I0_zero = self._integrate(integrand_zero, u0_zero, 1.0, 0.0, channel)
        I0_q2 = self._integrate(integrand_q2, u0_q2, 1.0, q2, channel)

        result = I1_zero / I1_q2 / I0_zero * I0_q2
        logger.debug("%s(q2 = %g) = %g", channel, q2, result)
        return result

    def _rescale_factor_p(self, p, q2):
        M2 = p.M2

        def F(u, q2):
            return self._F_lo_tw2_integrand(p, u, q2, M2, 0.0) + self._F_lo_tw3_integrand(p, u, q2, M2, 0.0)

        return self._moment_ratio(p, q2, p.s0D(q2), lambda u: F(u, q2), lambda u: F(u, 0.0), "rescale_factor_p")

    def _rescale_factor_0(self, p, q2):
        M2 = p.M2
        MD2 = p.MD * p.MD

        def F(u, q2):
            return self._F_lo_tw2_integrand(p, u, q2, M2, 0.0) + self._F_lo_tw3_integrand(p, u, q2, M2, 0.0)

        def blend_q2(u):
            Ftil = self._Ftil_lo_tw3_integrand(p, u, q2, M2, 0.0)
            return 2.0 * q2 / (MD2 - p.mpi2) * Ftil + (1.0 - q2 / (MD2 - p.mpi)) * F(u, q2)

        return self._moment_ratio(p, q2, p.s0tilD(q2), blend_q2, lambda u: F(u, 0.0), "rescale_factor_0")

    def _rescale_factor_T(self, p, q2):
        M2 = p.M2

        def FT(u, q2):
            return self._FT_lo_tw2_integrand(p, u, q2, M2, 0.0) + self._FT_lo_tw3_integrand(p, u, q2, M2, 0.0)

        return self._moment_ratio(p, q2, p.s0TD(q2), lambda u: FT(u, q2), lambda u: FT(u, 0.0), "rescale_factor_T")

    def rescale_factor_p(self, q2):
        return self._rescale_p(self.snapshot(), q2)

    def rescale_factor_0(self, q2):
        return self._rescale_0(self.snapshot(), q2)

    def rescale_factor_T(self, q2):
        return self._rescale_T(self.snapshot(), q2)

    ###########################################################################
    # individual contributions at the rescaled Borel parameter
    ###########################################################################

    def _at_rescaled(self, term, rescale, q2):
        p = self.snapshot()
        return term(p, q2, p.M2 * rescale(p, q2))

    def F_lo_tw2(self, q2):
        return self._at_rescaled(self._F_lo_tw2, self._rescale_p, q2)

    def F_lo_tw3(self, q2):
        return self._at_rescaled(self._F_lo_tw3, self._rescale_p, q2)

    def F_lo_tw4(self, q2):
        return self._at_rescaled(self._F_lo_tw4, self._rescale_p, q2)

    def F_nlo_tw2(self, q2):
        return self._at_rescaled(self._F_nlo_tw2, self._rescale_p, q2)

    def F_nlo_tw3(self, q2):
        return self._at_rescaled(self._F_nlo_tw3, self._rescale_p, q2)

    def Ftil_lo_tw3(self, q2):
        return self._at_rescaled(self._Ftil_lo_tw3, self._rescale_0, q2)

    def Ftil_lo_tw4(self, q2):
        return self._at_rescaled(self._Ftil_lo_tw4, self._rescale_0, q2)

    def Ftil_nlo_tw2(self, q2):
        return self._at_rescaled(self._Ftil_nlo_tw2, self._rescale_0, q2)

    def Ftil_nlo_tw3(self, q2):
        return self._at_rescaled(self._Ftil_nlo_tw3, self._rescale_0, q2)

    def FT_lo_tw2(self, q2):
        return self._at_rescaled(self._FT_lo_tw2, self._rescale_T, q2)

    def FT_lo_tw3(self, q2):
        return self._at_rescaled(self._FT_lo_tw3, self._rescale_T, q2)

    def FT_lo_tw4(self, q2):
        return self._at_rescaled(self._FT_lo_tw4, self._rescale_T, q2)

    def FT_nlo_tw2(self, q2):
        return self._at_rescaled(self._FT_nlo_tw2, self._rescale_T, q2)

    def FT_nlo_tw3(self, q2):
        return self._at_rescaled(self._FT_nlo_tw3, self._rescale_T, q2)

    ###########################################################################
    # duality-mass checks
    ###########################################################################

    @staticmethod
    def _mass_from_ratio(MD2):
        #--negative MD^2 signals the region where the sum rule is not valid
        if MD2 < 0.0:
            return 0.0
        return np.sqrt(MD2)

    def MDp_lcsr(self, q2):
        """
        D mass implied by the f_+ sum rule at q2.
        """
        p = self.snapshot()
        M2r = p.M2 * self._rescale_p(p, q2)
        a = p.alpha_s / (3.0 * np.pi)

        F_lo = self._F_lo_tw2(p, q2, M2r, 0.0) + self._F_lo_tw3(p, q2, M2r, 0.0) + self._F_lo_tw4(p, q2, M2r, 0.0)
        F_lo_D1 = self._F_lo_tw2(p, q2, M2r, 1.0) + self._F_lo_tw3(p, q2, M2r, 1.0) + self._F_lo_tw4(p, q2, M2r, 1.0)
        F_nlo = self._F_nlo_tw2(p, q2, M2r, 0.0) + self._F_nlo_tw3(p, q2, M2r, 0.0)
        F_nlo_D1 = self._F_nlo_tw2(p, q2, M2r, 1.0) + self._F_nlo_tw3(p, q2, M2r, 1.0)

        return self._mass_from_ratio((F_lo_D1 + a * F_nlo_D1) / (F_lo + a * F_nlo))

    def MD0_lcsr(self, q2):
        """
        D mass implied by the f_0 sum rule at q2; |q2| below 1e-3 is evaluated at q2 = 1e-3.
        """
        p = self.snapshot()
        MD2 = p.MD * p.MD
        q2 = q2 if abs(q2) > 1e-3 else 1e-3
        M2r = p.M2 * self._rescale_0(p, q2)
        a = p.alpha_s / (3.0 * np.pi)

        F_lo = (self._F_lo_tw2(p, q2, M2r, 0.0, 1.0) + self._F_lo_tw3(p, q2, M2r, 0.0, 1.0)
                + self._F_lo_tw4(p, q2, M2r, 0.0, 1.0))
        F_lo_D1 = (self._F_lo_tw2(p, q2, M2r, 1.0, 1.0) + self._F_lo_tw3(p, q2, M2r, 1.0, 1.0)
                   + self._F_lo_tw4(p, q2, M2r, 1.0, 1.0))
        F_nlo = self._F_nlo_tw2(p, q2, M2r, 0.0) + self._F_nlo_tw3(p, q2, M2r, 0.0)
        F_nlo_D1 = self._F_nlo_tw2(p, q2, M2r, 1.0) + self._F_nlo_tw3(p, q2, M2r, 1.0)
        Ftil_lo = self._Ftil_lo_tw3(p, q2, M2r, 0.0) + self._Ftil_lo_tw4(p, q2, M2r, 0.0)
        Ftil_lo_D1 = self._Ftil_lo_tw3(p, q2, M2r, 1.0) + self._Ftil_lo_tw4(p, q2, M2r, 1.0)
        Ftil_nlo = self._Ftil_nlo_tw2(p, q2, M2r, 0.0) + self._Ftil_nlo_tw3(p, q2, M2r, 0.0)
        Ftil_nlo_D1 = self._Ftil_nlo_tw2(p, q2, M2r, 1.0) + self._Ftil_nlo_tw3(p, q2, M2r, 1.0)

        F = F_lo + a * F_nlo
        F_D1 = F_lo_D1 + a * F_nlo_D1
        Ftil = Ftil_lo + a * Ftil_nlo
        Ftil_D1 = Ftil_lo_D1 + a * Ftil_nlo_D1

        denom = 2.0 * q2 / (MD2 - p.mpi2) * Ftil + (1.0 - q2 / (MD2 - p.mpi)) * F
        num = 2.0 * q2 / (MD2 - p.mpi2) * Ftil_D1 + (1.0 - q2 / (MD2 - p.mpi)) * F_D1

        return self._mass_from_ratio(num / denom)

    def MDT_lcsr(self, q2):
        """
        D mass implied by the f_T sum rule at q2. The Borel parameter is rescaled
        with the f_+ factor.
        """
        p = self.snapshot()
        M2r = p.M2 * self._rescale_p(p, q2)
        a = p.alpha_s / (3.0 * np.pi)

        FT_lo = self._FT_lo_tw2(p, q2, M2r, 0.0) + self._FT_lo_tw3(p, q2, M2r, 0.0) + self._FT_lo_tw4(p, q2, M2r, 0.0)
        FT_lo_D1 = self._FT_lo_tw2(p, q2, M2r, 1.0) + self._FT_lo_tw3(p, q2, M2r, 1.0) + self._FT_lo_tw4(p, q2, M2r, 1.0)
        FT_nlo = self._FT_nlo_tw2(p, q2, M2r, 0.0) + self._FT_nlo_tw3(p, q2, M2r, 0.0)
        FT_nlo_D1 = self._FT_nlo_tw2(p, q2, M2r, 1.0) + self._FT_nlo_tw3(p, q2, M2r, 1.0)

        return self._mass_from_ratio((FT_lo_D1 + a * FT_nlo_D1) / (FT_lo + a * FT_nlo))

    ###########################################################################
    # form factors
    ###########################################################################

    def _f_p(self, p, q2):
        MD2 = p.MD * p.MD
        M2r = p.M2 * self._rescale_p(p, q2)
        fD = self._decay_constant(p)

        F_lo = self._F_lo_tw2(p, q2, M2r) + self._F_lo_tw3(p, q2, M2r) + self._F_lo_tw4(p, q2, M2r)
        F_nlo = self._F_nlo_tw2(p, q2, M2r) + self._F_nlo_tw3(p, q2, M2r)
        #--NNLO estimate |F_nnlo/F_nlo| = |F_nlo/F_lo|, sign and size set by zeta in [-1, 1]
        F_nnlo = F_nlo * F_nlo / F_lo * p.zeta_nnlo

        return np.exp(MD2 / M2r) / (2.0 * MD2 * fD) * (
                F_lo + p.alpha_s / (3.0 * np.pi) * F_nlo + p.alpha_s**2 / (9.0 * pi2) * F_nnlo
            )

    def f_p(self, q2):
        """
        Vector form factor f_+(q2).
        """
        return self._f_p(self.snapshot(), q2)

    def f_0(self, q2):
        """
        Scalar form factor f_0(q2); |q2| < 1e-6 returns f_+(q2).
        """
        p = self.snapshot()
        if abs(q2) < 1e-6:
            return self._f_p(p, q2)

        MD2 = p.MD * p.MD
        M2r = p.M2 * self._rescale_0(p, q2)
        fD = self._decay_constant(p)
        a = p.alpha_s / (3.0 * np.pi)

        F_lo = self._F_lo_tw2(p, q2, M2r) + self._F_lo_tw3(p, q2, M2r) + self._F_lo_tw4(p, q2, M2r)
        F_nlo = self._F_nlo_tw2(p, q2, M2r) + self._F_nlo_tw3(p, q2, M2r)
        Ftil_lo = self._Ftil_lo_tw3(p, q2, M2r) + self._Ftil_lo_tw4(p, q2, M2r)
        Ftil_nlo = self._Ftil_nlo_tw2(p, q2, M2r) + self._Ftil_nlo_tw3(p, q2, M2r)

        #--the second weight uses mpi, not mpi2
        return np.exp(MD2 / M2r) / (2.0 * MD2 * fD) * (
                2.0 * q2 / (MD2 - p.mpi2) * (Ftil_lo + a * Ftil_nlo)
                + (1.0 - q2 / (MD2 - p.mpi)) * (F_lo + a * F_nlo)
            )

    def f_t(self, q2):
        """
        Tensor form factor f_T(q2).
        """
        p = self.snapshot()
        MD2 = p.MD * p.MD
        M2r = p.M2 * self._rescale_T(p, q2)
        fD = self._decay_constant(p)

        FT_lo = self._FT_lo_tw2(p, q2, M2r) + self._FT_lo_tw3(p, q2, M2r) + self._FT_lo_tw4(p, q2, M2r)
        FT_nlo = self._FT_nlo_tw2(p, q2, M2r) + self._FT_nlo_tw3(p, q2, M2r)

        return np.exp(MD2 / M2r) / (2.0 * MD2 * fD) * (p.MD + p.mpi) * (FT_lo + p.alpha_s / (3.0 * np.pi) * FT_nlo)

    def f_plus_T(self, q2):
        return 0.0

    ###########################################################################
    # diagnostics
    ###########################################################################

    def diagnostics(self):
        """
        Ordered list of (label, value) pairs of intermediate results.
        """
        results = []

        for s in (6.5, 7.0, 7.5):
            results.append((f"rho_1(s = {s:.1f}, m_c = 1.27, mu = 1.4), [KKMO:2009A]", self.rho_1(s, 1.27, 1.4)))

        results.append(("f_D, [KKMO:2009A]", self.decay_constant()))

        for name, rescale in (("p", self.rescale_factor_p), ("0", self.rescale_factor_0), ("T", self.rescale_factor_T)):
            for q2 in (0.0, 10.0):
                results.append((f"rescale_factor_{name}(s = {q2:4.1f}), [KKMO:2009A]", rescale(q2)))

        for name, MD in (("f_+", self.MDp_lcsr), ("f_0", self.MD0_lcsr), ("f_T", self.MDT_lcsr)):
            for q2 in (0.0, 10.0):
                results.append((f"M_D({name}, q2 = {q2:4.1f}), [KKMO:2009A]", MD(q2)))

        return results


if __name__ == '__main__':

    from charmff.qcdlib.parameters import Parameters

    ff = AnalyticFormFactorDToPiKKMO2009(Parameters.defaults())

    print('========================')
    print('D->pi LCSR form factors')
    print('========================')
    print('f_D        = %0.5f' % ff.decay_constant())
    for q2 in [0.0, 0.5, 1.0, 1.5]:
        print('q2 = %0.2f  f_+ = %0.5f  f_0 = %0.5f  f_T = %0.5f' % (q2, ff.f_p(q2), ff.f_0(q2), ff.f_t(q2)))
