"""
Tests of the parameter store, the parameter cards and the option validation.
"""

import pytest

from charmff.qcdlib import config_loader as cfg
from charmff.qcdlib.options import ConfigurationError, OptionSpecification, validate, as_bool
from charmff.qcdlib.parameters import Parameters, ParameterUser, UnknownParameterError


def test_defaults_card():
    p = Parameters.defaults()
    for name in ("QCD::alpha_s(MZ)", "mass::D_d", "pi::a2@1GeV", "D->pi::M^2@KKMO2009",
                 "D->pi::alpha^f+_0@BSZ2015", "dcenue::Re{cVL}", "scmunumu::mu"):
        assert name in p
    assert p["D->pi::s_0^+'(0)@KKMO2009"]() == 0.0
    print(f"✅ default card holds {len(p)} parameters")


def test_handles_see_updates():
    p = Parameters.defaults()
    mu = p["D->pi::mu@KKMO2009"]
    p["D->pi::mu@KKMO2009"] = 2.0
    assert mu() == 2.0
    mu.set(1.7)
    assert p["D->pi::mu@KKMO2009"]() == 1.7
    assert float(mu) == 1.7


def test_unknown_parameter():
    p = Parameters.defaults()
    with pytest.raises(UnknownParameterError) as excinfo:
        p["D->pi::nonexistent@KKMO2009"]
    assert "D->pi::nonexistent@KKMO2009" in str(excinfo.value)

    with pytest.raises(KeyError):
        p["nonexistent"] = 1.0

    p.declare("nonexistent", 1.0)
    assert p["nonexistent"]() == 1.0


def test_clone_is_independent():
    p = Parameters.defaults()
    q = p.clone()
    q["mass::D_d"] = 2.0
    assert p["mass::D_d"]() != 2.0
    assert p.names() == q.names()


def test_card_extends_defaults():
    defaults = Parameters.defaults()
    reference = Parameters.from_card("kkmo2009_reference.yaml")
    assert reference["D->pi::M^2@KKMO2009"]() == 4.5
    assert reference["D->pi::sp_0^B@KKMO2009"]() == 6.5
    #--everything else is inherited
    assert reference["mass::D_d"]() == defaults["mass::D_d"]()
    assert reference.names() == defaults.names()
    print("✅ reference card overrides only the sum-rule inputs")


def test_invalid_cards(tmp_path):
    with pytest.raises(FileNotFoundError):
        Parameters.from_card("no_such_card.yaml")

    card = tmp_path / "broken.yaml"
    card.write_text("values:\n  mass::D_d: 1.87\n")
    with pytest.raises(ValueError):
        Parameters.from_card(str(card))

    card = tmp_path / "override.yaml"
    card.write_text("extends: defaults.yaml\nparameters:\n  mass::D_d: 1.9\n")
    assert Parameters.from_card(str(card))["mass::D_d"]() == 1.9


def test_parameter_user():
    p = Parameters.defaults()
    a, b = ParameterUser(), ParameterUser()
    a.use(p, "mass::D_d")
    b.use(p, "mass::pi^+")
    b.uses(a)
    assert b.used_parameter_names == ["mass::D_d", "mass::pi^+"]


def test_validate_options():
    specs = (
        OptionSpecification("rescale-borel", ("1", "0"), "1"),
        OptionSpecification("form-factors", (), "BSZ2015"),
    )
    assert validate(None, specs) == {"rescale-borel": "1", "form-factors": "BSZ2015"}
    assert validate({"rescale-borel": 0, "form-factors": "KKMO2009"}, specs)["rescale-borel"] == "0"

    with pytest.raises(ConfigurationError) as excinfo:
        validate({"rescale-borel": "2"}, specs)
    assert "Allowed values: 1, 0" in str(excinfo.value)
    print(f"✅ Got expected ConfigurationError: {excinfo.value}")


def test_as_bool():
    assert as_bool("true") and as_bool("1")
    assert not as_bool("false") and not as_bool("0")
    with pytest.raises(ConfigurationError):
        as_bool("maybe")


def test_config():
    assert cfg.alphaS_order in (0, 1, 2)
    assert cfg.integration["epsrel"] > 0.0
    assert cfg.lcda["nf"] == 3
    assert cfg.get_anomalous_dimension("a2") == pytest.approx(50.0 / 9.0)
