"""
charmff: light-cone sum rules and parametrisations of charm-meson form factors,
and the D -> P l nu observables built from them.
"""

__version__ = "0.1.0"
