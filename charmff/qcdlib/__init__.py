"""
QCD building blocks: configuration, parameters, options, strong coupling,
running masses, special functions, quadrature and pion LCDAs.
"""
