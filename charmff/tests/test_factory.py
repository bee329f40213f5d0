"""
Tests of the form-factor factory.
"""

import pytest

from charmff.model.bsz2015 import BSZ2015PToP, BSZ2015PToV
from charmff.model.factory import create_form_factors, P_TO_P_FORM_FACTORS
from charmff.model.lcsr_dpi import AnalyticFormFactorDToPiKKMO2009
from charmff.qcdlib.options import ConfigurationError
from charmff.qcdlib.parameters import Parameters


def test_known_names():
    p = Parameters.defaults()
    assert isinstance(create_form_factors("D->pi::KKMO2009", p), AnalyticFormFactorDToPiKKMO2009)
    assert isinstance(create_form_factors("D->K::BSZ2015", p), BSZ2015PToP)
    assert isinstance(create_form_factors("D->rho::BSZ2015", p, transition="PToV"), BSZ2015PToV)
    assert sorted(P_TO_P_FORM_FACTORS) == ["D->K::BSZ2015", "D->pi::BSZ2015", "D->pi::KKMO2009", "D_s->K::BSZ2015"]


def test_options_are_forwarded():
    p = Parameters.defaults()
    ff = create_form_factors("D->pi::KKMO2009", p, {"rescale-borel": "0"})
    assert ff.rescale_factor_p(1.0) == 1.0


def test_unknown_names():
    p = Parameters.defaults()
    with pytest.raises(ConfigurationError) as excinfo:
        create_form_factors("B->pi::KKMO2009", p)
    assert "Available form factors" in str(excinfo.value)
    print(f"✅ Got expected ConfigurationError: {excinfo.value}")

    #--P -> V names are not P -> P form factors
    with pytest.raises(ConfigurationError):
        create_form_factors("D->rho::BSZ2015", p)

    with pytest.raises(ConfigurationError) as excinfo:
        create_form_factors("D->pi::BSZ2015", p, transition="VToP")
    assert "Available transitions: PToP, PToV" in str(excinfo.value)
