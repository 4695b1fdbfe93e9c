# aad/ops/transcendental.py
import numpy as np

from .arithmetic import _unary

LN_2 = np.log(2.0)
LN_10 = np.log(10.0)

# Each primitive takes a Variable (recorded on its graph) or a plain
# number/ndarray (evaluated with numpy, nothing recorded).
# Local partials are written in terms of the input a and the output y.

def exp(x):    return _unary(x, np.exp,   lambda a,y: y,                   "exp")
def exp2(x):   return _unary(x, np.exp2,  lambda a,y: y * LN_2,            "exp2")
def exp_m1(x): return _unary(x, np.expm1, lambda a,y: np.exp(a),           "exp_m1")

def ln(x):     return _unary(x, np.log,   lambda a,y: 1.0 / a,             "ln")
def ln_1p(x):  return _unary(x, np.log1p, lambda a,y: 1.0 / (1.0 + a),     "ln_1p")
def log2(x):   return _unary(x, np.log2,  lambda a,y: 1.0 / (a * LN_2),    "log2")
def log10(x):  return _unary(x, np.log10, lambda a,y: 1.0 / (a * LN_10),   "log10")

log = ln

def sqrt(x):   return _unary(x, np.sqrt,  lambda a,y: 0.5 / y,             "sqrt")
def cbrt(x):   return _unary(x, np.cbrt,  lambda a,y: 1.0 / (3.0 * y * y), "cbrt")


# ----- Trigonometric -----
def sin(x):    return _unary(x, np.sin,   lambda a,y: np.cos(a),                  "sin")
def cos(x):    return _unary(x, np.cos,   lambda a,y: -np.sin(a),                 "cos")
def tan(x):    return _unary(x, np.tan,   lambda a,y: 1.0 / np.square(np.cos(a)), "tan")

def asin(x):   return _unary(x, np.arcsin, lambda a,y: 1.0 / np.sqrt(1.0 - a * a),  "asin")
def acos(x):   return _unary(x, np.arccos, lambda a,y: -1.0 / np.sqrt(1.0 - a * a), "acos")
def atan(x):   return _unary(x, np.arctan, lambda a,y: 1.0 / (1.0 + a * a),         "atan")


# ----- Hyperbolic -----
def sinh(x):   return _unary(x, np.sinh,  lambda a,y: np.cosh(a),                  "sinh")
def cosh(x):   return _unary(x, np.cosh,  lambda a,y: np.sinh(a),                  "cosh")
def tanh(x):   return _unary(x, np.tanh,  lambda a,y: 1.0 / np.square(np.cosh(a)), "tanh")

def asinh(x):  return _unary(x, np.arcsinh, lambda a,y: 1.0 / np.sqrt(a * a + 1.0),             "asinh")
def acosh(x):  return _unary(x, np.arccosh, lambda a,y: 1.0 / (np.sqrt(a - 1.0) * np.sqrt(a + 1.0)), "acosh")
def atanh(x):  return _unary(x, np.arctanh, lambda a,y: 1.0 / (1.0 - a * a),                    "atanh")
