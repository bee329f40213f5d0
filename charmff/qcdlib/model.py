"""
Model collaborators: strong coupling, running quark masses, CKM elements and
the Wilson coefficients of the charged-current c -> Q l nu transitions.

Two models are available:
    SM  : Standard Model, c_VL = 1 and all other coefficients vanish
    WET : weak effective theory, coefficients read from the parameter store as
          "<Q>c<l>nu<l>::Re{cVL}", "<Q>c<l>nu<l>::Im{cVL}", ...

Every accessor reads the parameter store at call time.
"""

from collections import namedtuple

from charmff.qcdlib.alphaS import ALPHAS
from charmff.qcdlib.masses import MASSES
from charmff.qcdlib.options import ConfigurationError
from charmff.qcdlib.parameters import ParameterUser

WilsonCoefficients = namedtuple("WilsonCoefficients", ["cvl", "cvr", "csl", "csr", "ct"])

#--MSbar mass parameters: (name, reference scale or None for m(m))
_quark_masses = {
    "u": ("mass::u(2GeV)", 2.0),
    "d": ("mass::d(2GeV)", 2.0),
    "s": ("mass::s(2GeV)", 2.0),
    "c": ("mass::c(MSbar)", None),
}


class SM(ParameterUser):
    """
    Standard Model inputs consumed by the form factors and observables.

    inputs: parameters = parameter store; type = Parameters
    """

    def __init__(self, parameters):
        super().__init__()
        self.parameters = parameters
        self.alphaS = ALPHAS(parameters, self)
        self.masses = MASSES(self.alphaS)
        self._m = {q: self.use(parameters, name) for q, (name, _) in _quark_masses.items()}
        self._v_cd = self.use(parameters, "CKM::abs(V_cd)")
        self._v_cs = self.use(parameters, "CKM::abs(V_cs)")

    def alpha_s(self, mu):
        return self.alphaS.get_alphaS(mu * mu)

    def m_q_msbar(self, q, mu):
        """
        MSbar mass of quark q at the scale mu.
        """
        if q not in _quark_masses:
            available = ", ".join(_quark_masses)
            raise ValueError(f"Unknown quark flavour '{q}'. Available flavours: {available}")
        m0 = self._m[q]()
        mu0 = _quark_masses[q][1]
        if mu0 is None:
            mu0 = m0
        return self.masses.run(m0, mu0, mu)

    def m_c_msbar(self, mu):
        return self.m_q_msbar("c", mu)

    def m_s_msbar(self, mu):
        return self.m_q_msbar("s", mu)

    def m_d_msbar(self, mu):
        return self.m_q_msbar("d", mu)

    def m_u_msbar(self, mu):
        return self.m_q_msbar("u", mu)

    def ckm_cd(self):
        return complex(self._v_cd(), 0.0)

    def ckm_cs(self):
        return complex(self._v_cs(), 0.0)

    def wet_clnu(self, Q, lepton, cp_conjugate=False):
        """
        Wilson coefficients of the c -> Q l nu transition.
        """
        return WilsonCoefficients(1.0 + 0j, 0j, 0j, 0j, 0j)


class WET(SM):
    """
    Standard Model inputs with new-physics Wilson coefficients from the parameter store.
    """

    labels = ("cVL", "cVR", "cSL", "cSR", "cT")

    def wet_clnu(self, Q, lepton, cp_conjugate=False):
        prefix = f"{Q}c{lepton}nu{lepton}"
        values = []
        for c in self.labels:
            re = self.use(self.parameters, f"{prefix}::Re{{{c}}}")()
            im = self.use(self.parameters, f"{prefix}::Im{{{c}}}")()
            values.append(complex(re, -im if cp_conjugate else im))
        return WilsonCoefficients(*values)


MODELS = {
    "SM": SM,
    "WET": WET,
}


def make_model(name, parameters):
    """
    Create a model by name.

    Raises:
        ConfigurationError: if the model is unknown
    """
    if name not in MODELS:
        available = ", ".join(MODELS.keys())
        raise ConfigurationError(f"Unknown model '{name}'. Available models: {available}")
    return MODELS[name](parameters)
