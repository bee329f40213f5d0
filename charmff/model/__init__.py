"""
Form factors and decay observables of charm mesons.

Modules:
    kernels        : NLO hard-scattering kernels and LO auxiliary functions
    lcsr_dpi       : D -> pi light-cone sum rules [KKMO2009]
    bsz2015        : z-expansion of P -> P and P -> V form factors
    processes      : masses and resonance poles of the transitions
    factory        : form factors by name
    d_to_psd_l_nu  : D -> P l nu observables
"""

from .bsz2015 import BSZ2015PToP, BSZ2015PToV
from .d_to_psd_l_nu import DToPseudoscalarLeptonNeutrino
from .factory import create_form_factors
from .lcsr_dpi import AnalyticFormFactorDToPiKKMO2009

__all__ = [
    "AnalyticFormFactorDToPiKKMO2009",
    "BSZ2015PToP",
    "BSZ2015PToV",
    "DToPseudoscalarLeptonNeutrino",
    "create_form_factors",
]
