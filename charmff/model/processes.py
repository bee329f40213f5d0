"""
Process traits of the charm-meson transitions.

The hadron and resonance masses entering the z-expansion are static properties
of a transition (PDG values); they are not read from the parameter store.
"""

from collections import namedtuple

PToPProcess = namedtuple("PToPProcess", ["label", "m_B", "m_P", "m2_Br1m", "m2_Br0p"])
PToVProcess = namedtuple("PToVProcess", ["label", "mB", "mV", "mR2_1m", "mR2_0m", "mR2_1p"])

#--PDG masses [GeV]
_mD = 1.86966
_mDs = 1.96835
_mDstar = 2.01026
_mDs_star = 2.1122
_mD0_star = 2.343
_mDs0_star = 2.3178
_mD1 = 2.4221
_mDs1 = 2.4595

P_TO_P = {
    "D->pi": PToPProcess("D->pi", _mD, 0.13957, _mDstar**2, _mD0_star**2),
    "D->K": PToPProcess("D->K", _mD, 0.493677, _mDs_star**2, _mDs0_star**2),
    "D_s->K": PToPProcess("D_s->K", _mDs, 0.493677, _mDstar**2, _mD0_star**2),
}

P_TO_V = {
    "D->rho": PToVProcess("D->rho", _mD, 0.77526, _mDstar**2, _mD**2, _mD1**2),
    "D->K^*": PToVProcess("D->K^*", _mD, 0.89555, _mDs_star**2, _mDs**2, _mDs1**2),
}


#--semileptonic D -> P l nu channels: (Q, q, I) -> (form factors, D meson, P meson, isospin factor)
DToPLNuChannel = namedtuple("DToPLNuChannel", ["form_factors", "d_meson", "p_meson", "isospin_factor"])

D_TO_P_L_NU = {
    ("d", "u", "1"): DToPLNuChannel("D->pi", "D_u", "pi^-", 2.0**-0.5),
    ("d", "d", "1"): DToPLNuChannel("D->pi", "D_d", "pi^0", 1.0),
    ("d", "s", "1/2"): DToPLNuChannel("D_s->K", "D_s", "K_u", 1.0),
}
