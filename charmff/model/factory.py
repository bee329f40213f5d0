"""
Factory for creating form-factor instances by name.

Form factors are addressed as "<process>::<parametrisation>", e.g.
"D->pi::KKMO2009" or "D_s->K::BSZ2015". P -> P and P -> V transitions have
separate registries, since their consumers expect different interfaces.

Example:
    >>> from charmff.model.factory import create_form_factors
    >>> ff = create_form_factors("D->pi::BSZ2015", parameters)
    >>> ff.f_p(0.5)
"""

from functools import partial

from charmff.model.bsz2015 import BSZ2015PToP, BSZ2015PToV
from charmff.model.lcsr_dpi import AnalyticFormFactorDToPiKKMO2009
from charmff.model.processes import P_TO_P, P_TO_V
from charmff.qcdlib.options import ConfigurationError

#--name -> callable(parameters, options)
P_TO_P_FORM_FACTORS = {
    "D->pi::KKMO2009": AnalyticFormFactorDToPiKKMO2009,
}
for _label, _process in P_TO_P.items():
    P_TO_P_FORM_FACTORS[f"{_label}::BSZ2015"] = partial(BSZ2015PToP, _process)

P_TO_V_FORM_FACTORS = {
    f"{label}::BSZ2015": partial(BSZ2015PToV, process) for label, process in P_TO_V.items()
}

REGISTRIES = {
    "PToP": P_TO_P_FORM_FACTORS,
    "PToV": P_TO_V_FORM_FACTORS,
}


def create_form_factors(name, parameters, options=None, transition="PToP"):
    """
    Create form factors by name.

    Args:
        name: "<process>::<parametrisation>"
        parameters: Parameters store
        options: option mapping forwarded to the form factors
        transition: "PToP" or "PToV"

    Returns:
        form-factor instance

    Raises:
        ConfigurationError: if the transition or the name is unknown
    """
    if transition not in REGISTRIES:
        available = ", ".join(REGISTRIES.keys())
        raise ConfigurationError(f"Unknown transition '{transition}'. Available transitions: {available}")

    registry = REGISTRIES[transition]
    if name not in registry:
        available = ", ".join(sorted(registry.keys()))
        raise ConfigurationError(f"Unknown form factors '{name}'. Available form factors: {available}")

    return registry[name](parameters, options)
