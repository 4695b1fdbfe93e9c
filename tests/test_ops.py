import math
import warnings

import numpy as np
import pytest

from quant_autodiff.aad import ForeignHandleError, Graph, Variable, ops

UNARY_CASES = [
    ("neg", 0.5), ("recip", 1.9), ("abs", -1.3), ("abs", 0.8),
    ("exp", 0.7), ("exp2", 0.7), ("exp_m1", 0.3),
    ("ln", 1.7), ("ln_1p", 0.4), ("log2", 1.7), ("log10", 1.7),
    ("sqrt", 2.3), ("cbrt", 2.3),
    ("sin", 0.9), ("cos", 0.9), ("tan", 0.6),
    ("asin", 0.4), ("acos", 0.4), ("atan", 0.8),
    ("sinh", 0.6), ("cosh", 0.6), ("tanh", 0.6),
    ("asinh", 0.8), ("acosh", 1.8), ("atanh", 0.3),
    ("erf", 0.5), ("erfc", 0.5), ("norm_pdf", 0.7), ("norm_cdf", 0.7),
]


def central_difference(f, a, h=1e-6):
    return (f(a + h) - f(a - h)) / (2.0 * h)


@pytest.mark.parametrize("name,point", UNARY_CASES)
def test_unary_partial_matches_finite_difference(name, point):
    op = getattr(ops, name)
    g = Graph()
    x = g.var(point)
    y = op(x)

    assert isinstance(y, Variable)
    assert y.value == pytest.approx(float(op(point)), rel=1e-15)
    node = g.node(y.index)
    assert node.op_tag == name
    assert node.parents[0][0] == x.index

    expected = central_difference(lambda a: float(op(a)), point)
    assert y.accumulate().wrt(x) == pytest.approx(expected, rel=1e-6, abs=1e-9)


@pytest.mark.parametrize("name", ["sin", "cos", "tan", "sinh", "cosh", "tanh", "asinh",
                                  "exp", "ln", "sqrt", "recip", "abs", "erf"])
def test_variable_methods_match_free_functions(name):
    g = Graph()
    x = g.var(0.6)
    via_method = getattr(x, name)()
    via_function = getattr(ops, name)(x)
    assert via_method.value == via_function.value
    assert g.node(via_method.index).parents == g.node(via_function.index).parents


def test_plain_inputs_are_evaluated_without_recording():
    assert ops.exp(0.0) == 1.0
    assert ops.sin(np.pi / 2) == pytest.approx(1.0)
    np.testing.assert_allclose(ops.sqrt([1.0, 4.0, 9.0]), [1.0, 2.0, 3.0])
    assert ops.add(1.0, 2.0) == 3.0
    assert ops.norm_cdf(0.0) == pytest.approx(0.5)


@pytest.mark.parametrize("a,b", [(3.0, 4.0), (-1.5, 0.25), (2.0, -7.0)])
def test_binary_partials(a, b):
    g = Graph()
    x, y = g.vars([a, b])
    cases = {
        "add": (x + y, 1.0, 1.0),
        "sub": (x - y, 1.0, -1.0),
        "mul": (x * y, b, a),
        "div": (x / y, 1.0 / b, -a / b ** 2),
    }
    for tag, (z, dx, dy) in cases.items():
        assert g.node(z.index).op_tag == tag
        grad = z.accumulate()
        assert grad.wrt(x) == pytest.approx(dx, rel=1e-15)
        assert grad.wrt(y) == pytest.approx(dy, rel=1e-15)


def test_reflected_scalar_operators():
    g = Graph()
    x = g.var(4.0)
    assert (2.0 + x).value == 6.0
    assert (2.0 - x).value == -2.0
    assert (2.0 * x).value == 8.0
    assert (2.0 / x).value == 0.5
    grad = (2.0 / x).accumulate()
    assert grad.wrt(x) == pytest.approx(-2.0 / 16.0)
    assert (-x).value == -4.0
    assert (+x) is x
    assert abs(g.var(-3.0)).value == 3.0


def test_numpy_scalars_on_the_left_defer_to_variable():
    g = Graph()
    x = g.var(3.0)
    z = np.float64(2.0) * x
    assert isinstance(z, Variable)
    assert z.accumulate().wrt(x) == 2.0


def test_variable_with_array_is_rejected():
    g = Graph()
    x = g.var(1.0)
    with pytest.raises(TypeError):
        ops.mul(x, np.array([1.0, 2.0]))
    with pytest.raises(TypeError):
        ops.add(x, "1")


def test_mixing_graphs_raises():
    x = Graph().var(1.0)
    y = Graph().var(2.0)
    for combine in (lambda: x + y, lambda: x * y, lambda: y / x, lambda: x ** y):
        with pytest.raises(ForeignHandleError):
            combine()


def test_abs_partial_is_zero_at_zero():
    g = Graph()
    x = g.var(0.0)
    assert x.abs().accumulate().wrt(x) == 0.0


def test_powi():
    g = Graph()
    x = g.var(1.5)
    y = x.powi(3)
    assert g.node(y.index).op_tag == "powi"
    assert y.value == pytest.approx(3.375)
    assert y.accumulate().wrt(x) == pytest.approx(3 * 1.5 ** 2)

    z = x.powi(-2)
    assert z.accumulate().wrt(x) == pytest.approx(-2 * 1.5 ** -3)

    with pytest.raises(TypeError):
        x.powi(2.5)


def test_pow_operator_dispatch():
    g = Graph()
    x = g.var(2.0)
    assert g.node((x ** 3).index).op_tag == "powi"
    assert g.node((x ** 0.5).index).op_tag == "powf"
    assert g.node((x ** g.var(1.0)).index).op_tag == "powf"


def test_powf_constant_exponent():
    g = Graph()
    x = g.var(2.0)
    y = x.powf(0.5)
    assert y.value == pytest.approx(math.sqrt(2.0))
    assert y.accumulate().wrt(x) == pytest.approx(0.5 / math.sqrt(2.0))


def test_powf_variable_exponent_matches_finite_differences():
    a, p = 1.7, 2.3
    g = Graph()
    x, e = g.vars([a, p])
    y = x.powf(e)
    assert len(g.node(y.index).parents) == 2
    grad = y.accumulate()
    dx = central_difference(lambda t: t ** p, a)
    dp = central_difference(lambda t: a ** t, p)
    assert grad.wrt(x) == pytest.approx(dx, rel=1e-7)
    assert grad.wrt(e) == pytest.approx(dp, rel=1e-7)


def test_scalar_base_variable_exponent():
    g = Graph()
    p = g.var(1.5)
    y = 3.0 ** p
    assert y.value == pytest.approx(3.0 ** 1.5)
    assert y.accumulate().wrt(p) == pytest.approx(3.0 ** 1.5 * math.log(3.0))


def test_powf_exponent_partial_vanishes_at_zero_base():
    g = Graph()
    x, p = g.vars([0.0, 2.5])
    grad = x.powf(p).accumulate()
    assert grad.wrt(p) == 0.0
    assert grad.wrt(x) == 0.0


def test_domain_errors_propagate_without_raising_or_warning():
    g = Graph()
    x = g.var(-1.0)
    zero = g.var(0.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isnan(x.ln().value)
        assert math.isnan(x.sqrt().value)
        assert math.isnan(x.powf(0.5).value)
        assert math.isinf((x / zero).value)
        assert math.isinf(zero.recip().value)
        assert math.isinf((x / zero).accumulate().wrt(x))
        assert math.isnan(ops.ln(-1.0))
        assert math.isinf(ops.div(1.0, 0.0))
