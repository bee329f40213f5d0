"""
Configuration loader for charmff calculations

This module loads configuration from config.yaml, providing a single source of truth
for the numerical and perturbative settings used across the charmff codebase.

Usage:
    from charmff.qcdlib import config_loader as cfg
    print(cfg.alphaS_order)
    print(cfg.integration['epsrel'])
"""

import yaml
import os

# Load configuration from YAML file
_config_path = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'config.yaml')

try:
    with open(_config_path, 'r') as f:
        _config = yaml.safe_load(f)
except FileNotFoundError:
    raise FileNotFoundError(
        f"Configuration file not found: {_config_path}\n"
        "Make sure config.yaml exists in the charmff/ directory."
    )
except yaml.YAMLError as e:
    raise ValueError(f"Error parsing config.yaml: {e}")

# Perturbative orders
alphaS_order = _config['alphaS_order']
mass_order = _config['mass_order']

# Numerical integration and LCDA settings
integration = _config['integration']
lcda = _config['lcda']

log_level = _config.get('logging', {}).get('level', 'WARNING')

# Keep the full config dict accessible for other uses
config = _config


def get_anomalous_dimension(moment):
    """
    Helper function to get the LO anomalous dimension of an LCDA moment.

    Args:
        moment: 'a2', 'a4', 'f3', 'omega3', 'delta2' or 'omega4'

    Returns:
        LO anomalous dimension gamma of the moment
    """
    return _config['lcda']['anomalous_dimensions'][moment]
