# aad/ops/__init__.py

# Convenience re-exports so users can do: from quant_autodiff.aad.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, recip, abs, powi, powf, pow
from .transcendental import (
    exp, exp2, exp_m1, ln, log, ln_1p, log2, log10, sqrt, cbrt,
    sin, cos, tan, asin, acos, atan,
    sinh, cosh, tanh, asinh, acosh, atanh,
)
from .special import erf, erfc, norm_pdf, norm_cdf

__all__ = [
    "add", "sub", "mul", "div", "neg", "recip", "abs", "powi", "powf", "pow",
    "exp", "exp2", "exp_m1", "ln", "log", "ln_1p", "log2", "log10", "sqrt", "cbrt",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
    "erf", "erfc", "norm_pdf", "norm_cdf",
]
