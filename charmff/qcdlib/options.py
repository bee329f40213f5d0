"""
Discrete options and their validation.

Options are plain string-to-string mappings (e.g. {"rescale-borel": "0"}).
Every consumer declares the options it understands as a tuple of
OptionSpecification, and validate() resolves a user mapping against them at
construction time, filling in defaults and rejecting values outside the
allowed set.
"""

from collections import namedtuple


class ConfigurationError(ValueError):
    """
    Raised for invalid option values or unsupported option combinations.
    """


OptionSpecification = namedtuple("OptionSpecification", ["name", "allowed_values", "default"])


def validate(options, specifications):
    """
    Resolve the options of one consumer.

    Args:
        options: mapping of option name to value (may be None)
        specifications: iterable of OptionSpecification

    Returns:
        dict holding one value per specified option

    Raises:
        ConfigurationError: if a value is not among the allowed values
    """
    options = dict(options or {})
    resolved = {}
    for spec in specifications:
        value = str(options.get(spec.name, spec.default))
        if spec.allowed_values and value not in spec.allowed_values:
            available = ", ".join(spec.allowed_values)
            raise ConfigurationError(
                f"Invalid value '{value}' for option '{spec.name}'. Allowed values: {available}"
            )
        resolved[spec.name] = value
    return resolved


def as_bool(value):
    """
    Interpret a boolean option value ("true"/"false", "1"/"0").
    """
    value = str(value).lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    raise ConfigurationError(f"Cannot interpret '{value}' as a boolean option value")
