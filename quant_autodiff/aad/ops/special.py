# aad/ops/special.py
import numpy as np
from scipy import special

from .arithmetic import _unary

SQRT_TWO_PI = np.sqrt(2.0 * np.pi)
TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)


def _phi(a):
    return np.exp(-0.5 * a * a) / SQRT_TWO_PI


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    return _unary(x, special.erf, lambda a,y: TWO_OVER_SQRT_PI * np.exp(-a * a), "erf")


def erfc(x):
    """Complementary error function 1 - erf(x); derivative -(2/√π) * e^(-x²)."""
    return _unary(x, special.erfc, lambda a,y: -TWO_OVER_SQRT_PI * np.exp(-a * a), "erfc")


def norm_pdf(x):
    """Standard normal density φ(x); dφ/dx = -x φ(x)."""
    return _unary(x, _phi, lambda a,y: -a * y, "norm_pdf")


def norm_cdf(x):
    """
    Standard normal CDF N(x) as a single primitive with local partial
    dN/dx = φ(x). Uses scipy's ndtr, which stays accurate in the lower tail.
    """
    return _unary(x, special.ndtr, lambda a,y: _phi(a), "norm_cdf")
