"""
Pion light-cone distribution amplitudes up to twist four.

PION_LCDA reads the Gegenbauer and higher-twist moments at the reference scale
mu0 = 1 GeV from the parameter store, runs them at LO to the requested scale and
returns a PionLCDAAtScale: a read-only table of the moments at that scale
together with the distribution amplitudes and their derivatives as functions
of the momentum fraction u.

Conventions follow Ball, Braun, Lenz (2006), with xi = 2u - 1, ubar = 1 - u and
    mu_pi = m_pi^2 / (m_u + m_d),   eta3 = f3pi / (fpi * mu_pi),   rho_pi = m_pi^2 / mu_pi^2.
Twist-4 amplitudes are taken in the chiral limit; their pion-mass corrections
enter the sum rules through the auxiliary functions in model/kernels.py.
"""

import numpy as np
import warnings

from charmff.qcdlib import config_loader as cfg
from charmff.qcdlib.parameters import ParameterUser

warnings.filterwarnings("ignore", message="divide by zero encountered in log")
warnings.filterwarnings("ignore", message="invalid value encountered in scalar multiply")

###############################################################################
# Gegenbauer polynomials
###############################################################################

def C2_12(x):
    return (3.0 * x * x - 1.0) / 2.0

def C4_12(x):
    x2 = x * x
    return (35.0 * x2 * x2 - 30.0 * x2 + 3.0) / 8.0

def C2_32(x):
    return 3.0 / 2.0 * (5.0 * x * x - 1.0)

def C4_32(x):
    x2 = x * x
    return 15.0 / 8.0 * (21.0 * x2 * x2 - 14.0 * x2 + 1.0)


###############################################################################
# distribution amplitudes at a fixed scale
###############################################################################

class PionLCDAAtScale:
    """
    Moments and distribution amplitudes of the pion at one renormalization scale.

    inputs: mu     = scale [GeV];                   type = float
            a2, a4 = twist-2 Gegenbauer moments;    type = float
            f3     = twist-3 three-particle normalization; type = float
            omega3 = twist-3 shape parameter;       type = float
            delta2 = twist-4 normalization;         type = float
            omega4 = twist-4 shape parameter;       type = float
            mupi   = chiral parameter mu_pi;        type = float
            mpi    = pion mass;                     type = float
            fpi    = pion decay constant;           type = float
    """

    def __init__(self, mu, a2, a4, f3, omega3, delta2, omega4, mupi, mpi, fpi):
        self.mu = mu
        self.a2pi = a2
        self.a4pi = a4
        self.f3pi = f3
        self.omega3pi = omega3
        self.deltapipi = delta2
        self.omega4pi = omega4
        self.mupi = mupi

        eta3 = f3 / (fpi * mupi)
        rho2 = (mpi * mpi / (mupi * mupi))**2

        #--coefficients of the twist-3 two-particle amplitudes
        self._p2 = 30.0 * eta3 - 5.0 / 2.0 * rho2
        self._p4 = -3.0 * eta3 * omega3 - 27.0 / 20.0 * rho2 - 81.0 / 10.0 * rho2 * a2
        self._s2 = 5.0 * eta3 - 1.0 / 2.0 * eta3 * omega3 - 7.0 / 20.0 * rho2 - 3.0 / 5.0 * rho2 * a2

    ### twist 2

    def phi(self, u):
        xi = 2.0 * u - 1.0
        return 6.0 * u * (1.0 - u) * (1.0 + self.a2pi * C2_32(xi) + self.a4pi * C4_32(xi))

    ### twist 3

    def phi3p(self, u):
        xi = 2.0 * u - 1.0
        return 1.0 + self._p2 * C2_12(xi) + self._p4 * C4_12(xi)

    def phi3s(self, u):
        xi = 2.0 * u - 1.0
        return 6.0 * u * (1.0 - u) * (1.0 + self._s2 * C2_32(xi))

    def phi3s_d1(self, u):
        xi = 2.0 * u - 1.0
        return -6.0 * xi * (1.0 + self._s2 * C2_32(xi)) + 180.0 * self._s2 * u * (1.0 - u) * xi

    ### twist 4

    def psi4(self, u):
        return 20.0 / 3.0 * self.deltapipi * C2_12(2.0 * u - 1.0)

    def psi4_i(self, u):
        """
        Integral of psi4 from 0 to u.
        """
        return 20.0 / 3.0 * self.deltapipi * u * (1.0 - u) * (1.0 - 2.0 * u)

    def phi4(self, u):
        ubar = 1.0 - u
        w = u * ubar
        return self.deltapipi * (
                200.0 / 3.0 * w * w
                + 21.0 * self.omega4pi * (w * (2.0 + 13.0 * w) + _g(u) + _g(ubar))
            )

    def phi4_d1(self, u):
        ubar = 1.0 - u
        w = u * ubar
        return self.deltapipi * (
                400.0 / 3.0 * w * (1.0 - 2.0 * u)
                + 21.0 * self.omega4pi * ((2.0 + 26.0 * w) * (1.0 - 2.0 * u) + _g_d1(u) - _g_d1(ubar))
            )

    def phi4_d2(self, u):
        ubar = 1.0 - u
        w = u * ubar
        return self.deltapipi * (
                400.0 / 3.0 * (1.0 - 6.0 * u + 6.0 * u * u)
                + 21.0 * self.omega4pi * (26.0 * (1.0 - 2.0 * u)**2 - 4.0 - 52.0 * w + _g_d2(u) + _g_d2(ubar))
            )


#--endpoint logarithms of phi4, g(u) = 2 u^3 (10 - 15 u + 6 u^2) ln(u)

def _g(u):
    return (20.0 * u**3 - 30.0 * u**4 + 12.0 * u**5) * np.log(u)

def _g_d1(u):
    return 60.0 * u**2 * (1.0 - u)**2 * np.log(u) + 20.0 * u**2 - 30.0 * u**3 + 12.0 * u**4

def _g_d2(u):
    return 120.0 * u * (1.0 - u) * (1.0 - 2.0 * u) * np.log(u) + 100.0 * u - 210.0 * u**2 + 108.0 * u**3


###############################################################################
# scale dependence
###############################################################################

class PION_LCDA(ParameterUser):
    """
    Provider of pion LCDAs at arbitrary scales.

    inputs: parameters = parameter store;                       type = Parameters
            model      = supplies alpha_s(mu) and m_q_msbar(q, mu); type = SM
    """

    moments = {
        "a2": "pi::a2@1GeV",
        "a4": "pi::a4@1GeV",
        "f3": "pi::f3@1GeV",
        "omega3": "pi::omega3@1GeV",
        "delta2": "pi::delta^2@1GeV",
        "omega4": "pi::omega4@1GeV",
    }

    def __init__(self, parameters, model):
        super().__init__()
        self.model = model
        self._moments = {k: self.use(parameters, name) for k, name in self.moments.items()}
        self.mpi = self.use(parameters, "mass::pi^+")
        self.fpi = self.use(parameters, "decay-constant::pi")
        self.uses(model)

        self.mu0 = cfg.lcda["mu0"]
        nf = cfg.lcda["nf"]
        self.beta0 = 11.0 - 2.0 / 3.0 * nf

    def evolve(self, moment, mu):
        """
        LO running of a moment from mu0 to mu.
        """
        L = self.model.alpha_s(mu) / self.model.alpha_s(self.mu0)
        return self._moments[moment]() * L**(cfg.get_anomalous_dimension(moment) / self.beta0)

    def mupi(self, mu):
        mpi = self.mpi()
        return mpi * mpi / (self.model.m_u_msbar(mu) + self.model.m_d_msbar(mu))

    def at(self, mu):
        """
        Snapshot of all moments and amplitudes at the scale mu.
        """
        values = {k: self.evolve(k, mu) for k in self._moments}
        return PionLCDAAtScale(mu, mupi=self.mupi(mu), mpi=self.mpi(), fpi=self.fpi(), **values)
