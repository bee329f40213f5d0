"""
BSZ2015 z-expansion of heavy-to-light form factors.

Every form factor is expanded to second order in the conformal variable

    z(s) = (sqrt(tau_p - s) - sqrt(tau_p - tau_0)) / (sqrt(tau_p - s) + sqrt(tau_p - tau_0)),

    F(s) = 1 / (1 - s/m_R^2) * sum_k a_k (z(s) - z(0))^k,   k = 0, 1, 2,

with tau_p = (m_B + m_P)^2 and tau_0 = tau_p (1 - sqrt(1 - tau_m/tau_p)). The
coefficients are read from the parameter store as "<process>::alpha^<ff>@BSZ2015"
at every call; masses and pole positions are process traits.

All form factors accept a real or complex s. A real s returns the real part.

Division by the Kallen function in the derived form factors (a_2, t_3, f_perp,
f_long, ...) is singular at the endpoints s = (m_B -+ m_V)^2; those points must
not be evaluated.
"""

import numpy as np

from charmff.qcdlib.parameters import ParameterUser
from charmff.qcdlib.special import kallen


def _real_if(s, value):
    if isinstance(s, complex):
        return value
    return value.real


class BSZ2015Base(ParameterUser):
    """
    Conformal mapping and series shared by P -> P and P -> V transitions.

    inputs: m_in  = mass of the decaying meson;   type = float
            m_out = mass of the final-state meson; type = float
    """

    def __init__(self, m_in, m_out):
        super().__init__()
        self.tau_p = (m_in + m_out)**2
        self.tau_0 = self._calc_tau_0(m_in, m_out)
        self.z_0 = self._calc_z(0.0)

    @staticmethod
    def _calc_tau_0(m_in, m_out):
        tau_p = (m_in + m_out)**2
        tau_m = (m_in - m_out)**2
        return tau_p * (1.0 - np.sqrt(1.0 - tau_m / tau_p))

    def _calc_z(self, s):
        a = np.sqrt(complex(self.tau_p - s))
        b = np.sqrt(complex(self.tau_p - self.tau_0))
        return (a - b) / (a + b)

    def z(self, s):
        """
        Conformal variable z(s).
        """
        return _real_if(s, self._calc_z(s))

    def _calc_ff(self, s, m2_R, a):
        a0, a1, a2 = a
        dz = self._calc_z(s) - self.z_0
        return 1.0 / (1.0 - s / m2_R) * (a0 + a1 * dz + a2 * dz * dz)

    def _coefficients(self, parameters, label, names):
        return [self.use(parameters, f"{label}::alpha^{name}@BSZ2015") for name in names]


class BSZ2015PToP(BSZ2015Base):
    """
    P -> P form factors f_+, f_0, f_T and f_+^T.

    inputs: process    = masses and poles; type = PToPProcess
            parameters = parameter store;  type = Parameters
    """

    def __init__(self, process, parameters, options=None):
        super().__init__(process.m_B, process.m_P)
        self.process = process
        self.mB = process.m_B
        self.mP = process.m_P
        self._a_fp = self._coefficients(parameters, process.label, ["f+_0", "f+_1", "f+_2"])
        self._a_ft = self._coefficients(parameters, process.label, ["fT_0", "fT_1", "fT_2"])
        self._a_fz = self._coefficients(parameters, process.label, ["f0_1", "f0_2"])

    def f_p(self, s):
        a = [c() for c in self._a_fp]
        return _real_if(s, self._calc_ff(s, self.process.m2_Br1m, a))

    def f_t(self, s):
        a = [c() for c in self._a_ft]
        return _real_if(s, self._calc_ff(s, self.process.m2_Br1m, a))

    def f_0(self, s):
        #--equation of motion: f_0(0) = f_+(0)
        a = [self._a_fp[0](), self._a_fz[0](), self._a_fz[1]()]
        return _real_if(s, self._calc_ff(s, self.process.m2_Br0p, a))

    def f_plus_T(self, s):
        a = [c() for c in self._a_ft]
        value = self._calc_ff(s, self.process.m2_Br1m, a) * s / self.mB / (self.mB + self.mP)
        return _real_if(s, value)


class BSZ2015PToV(BSZ2015Base):
    """
    P -> V form factors V, A_0, A_1, A_12, A_2, T_1, T_2, T_23, T_3 and the
    helicity form factors.

    inputs: process    = masses and poles; type = PToVProcess
            parameters = parameter store;  type = Parameters
    """

    def __init__(self, process, parameters, options=None):
        super().__init__(process.mB, process.mV)
        self.process = process
        self.mB = process.mB
        self.mV = process.mV
        self.mB2 = self.mB**2
        self.mV2 = self.mV**2
        self.kin_factor = (self.mB2 - self.mV2) / (8.0 * self.mB * self.mV)

        label = process.label
        self._a_A0 = self._coefficients(parameters, label, ["A0_0", "A0_1", "A0_2"])
        self._a_A1 = self._coefficients(parameters, label, ["A1_0", "A1_1", "A1_2"])
        self._a_V = self._coefficients(parameters, label, ["V_0", "V_1", "V_2"])
        self._a_T1 = self._coefficients(parameters, label, ["T1_0", "T1_1", "T1_2"])
        self._a_T23 = self._coefficients(parameters, label, ["T23_0", "T23_1", "T23_2"])
        self._a_A12 = self._coefficients(parameters, label, ["A12_1", "A12_2"])
        self._a_T2 = self._coefficients(parameters, label, ["T2_1", "T2_2"])

    def _ff(self, s, m2_R, handles):
        return self._calc_ff(s, m2_R, [c() for c in handles])

    ### primary form factors

    def v(self, s):
        return _real_if(s, self._ff(s, self.process.mR2_1m, self._a_V))

    def a_0(self, s):
        return _real_if(s, self._ff(s, self.process.mR2_0m, self._a_A0))

    def a_1(self, s):
        return _real_if(s, self._ff(s, self.process.mR2_1p, self._a_A1))

    def a_12(self, s):
        #--A_12(0) fixed by A_0(0)
        a = [self.kin_factor * self._a_A0[0](), self._a_A12[0](), self._a_A12[1]()]
        return _real_if(s, self._calc_ff(s, self.process.mR2_1p, a))

    def t_1(self, s):
        return _real_if(s, self._ff(s, self.process.mR2_1m, self._a_T1))

    def t_2(self, s):
        #--T_2(0) = T_1(0)
        a = [self._a_T1[0](), self._a_T2[0](), self._a_T2[1]()]
        return _real_if(s, self._calc_ff(s, self.process.mR2_1p, a))

    def t_23(self, s):
        return _real_if(s, self._ff(s, self.process.mR2_1p, self._a_T23))

    ### derived form factors

    def a_2(self, s):
        mB, mV, mB2, mV2 = self.mB, self.mV, self.mB2, self.mV2
        lam = kallen(mB2, mV2, s)
        value = ((mB + mV)**2 * (mB2 - mV2 - s) * self.a_1(s)
                 - 16.0 * mB * mV2 * (mB + mV) * self.a_12(s)) / lam
        return _real_if(s, complex(value))

    def t_3(self, s):
        mB, mV, mB2, mV2 = self.mB, self.mV, self.mB2, self.mV2
        lam = kallen(mB2, mV2, s)
        value = ((mB2 - mV2) * (mB2 + 3.0 * mV2 - s) * self.t_2(s)
                 - 8.0 * mB * mV2 * (mB - mV) * self.t_23(s)) / lam
        return _real_if(s, complex(value))

    ### helicity form factors, real s only

    def f_perp(self, s):
        lam = kallen(self.mB2, self.mV2, s)
        return np.sqrt(2.0 * lam) / self.mB / (self.mB + self.mV) * self.v(s)

    def f_para(self, s):
        return np.sqrt(2.0) * (self.mB + self.mV) / self.mB * self.a_1(s)

    def f_long(self, s):
        mB, mV, mB2, mV2 = self.mB, self.mV, self.mB2, self.mV2
        lam = kallen(mB2, mV2, s)
        return ((mB2 - mV2 - s) * (mB + mV)**2 * self.a_1(s) - lam * self.a_2(s)) / (2.0 * mV * mB2 * (mB + mV))

    def f_perp_T(self, s):
        lam = kallen(self.mB2, self.mV2, s)
        return np.sqrt(2.0 * lam) / self.mB2 * self.t_1(s)

    def f_para_T(self, s):
        return np.sqrt(2.0) * (self.mB2 - self.mV2) / self.mB2 * self.t_2(s)

    def f_long_T(self, s):
        mB, mV, mB2, mV2 = self.mB, self.mV, self.mB2, self.mV2
        lam = kallen(mB2, mV2, s)
        return (s * (mB2 + 3.0 * mV2 - s) / (2.0 * mB**3 * mV) * self.t_2(s)
                - s * lam / (2.0 * mB**3 * mV * (mB2 - mV2)) * self.t_3(s))

    def f_long_T_Normalized(self, s):
        mB, mV, mB2, mV2 = self.mB, self.mV, self.mB2, self.mV2
        lam = kallen(mB2, mV2, s)
        return (mB2 * (mB2 + 3.0 * mV2 - s) / (2.0 * mB**3 * mV) * self.t_2(s)
                - mB2 * lam / (2.0 * mB**3 * mV * (mB2 - mV2)) * self.t_3(s))
