from scipy.special import spence, exp1
import numpy as np

def re_li2(x):
    """
    Real part of Li2(x) for real x, also above the branch point x = 1.

    scipy's spence is defined such that Li2(z) = spence(1 - z); the complex
    argument keeps it on the principal branch for x > 1.
    """
    return np.real(spence(1.0-complex(x)))

def gamma_inc0(x):
    """
    Upper incomplete gamma function Gamma(0,x) = E1(x), x > 0.
    """
    return exp1(x)

def kallen(a,b,c):
    """
    Kallen triangle function lambda(a,b,c).
    """
    return a*a+b*b+c*c-2.0*(a*b+a*c+b*c)
