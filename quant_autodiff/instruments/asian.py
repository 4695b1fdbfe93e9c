"""
Geometric-average Asian option, closed form (Kemna & Vorst).

The geometric average of a lognormal price is itself lognormal, so the option
prices like a European option with adjusted volatility and cost of carry:

    v_a = v / sqrt(3)
    b_a = (b - v^2 / 6) / 2          with b = r - q
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

import numpy as np

from ..aad import ops
from .base import ClosedFormOption
from .daycount import year_fraction_from

SQRT_3 = np.sqrt(3.0)


@dataclass
class AsianOption(ClosedFormOption):
    """
    Attributes:
        initial_price (float | Variable): Spot price S
        strike_price (float): Strike K
        risk_free_rate (float | Variable): Continuously compounded rate r
        volatility (float | Variable): Volatility v
        dividend_rate (float | Variable): Continuous dividend yield q
        expiry_date (datetime): Expiry
        valuation_date (datetime, optional): Defaults to now (UTC)
    """
    initial_price: Any
    strike_price: float
    risk_free_rate: Any
    volatility: Any
    dividend_rate: Any
    expiry_date: datetime
    valuation_date: Optional[datetime] = None

    def time_to_expiry(self) -> float:
        return year_fraction_from(self.valuation_date, self.expiry_date)

    def price_geometric_average(self):
        """Return (call, put) for the continuous geometric average."""
        S = self.initial_price
        K = self.strike_price
        r = self.risk_free_rate
        v = self.volatility
        q = self.dividend_rate
        T = self.time_to_expiry()
        sqrt_T = ops.sqrt(T)

        v_a = v / SQRT_3
        b = r - q
        b_a = 0.5 * (b - v * v / 6.0)

        # expired or zero-length contracts give NaN/Inf like the AD primitives
        with np.errstate(all="ignore"):
            d1 = (ops.ln(ops.div(S, K)) + (b_a + 0.5 * v_a * v_a) * T) / (v_a * sqrt_T)
            d2 = d1 - v_a * sqrt_T

        carry = S * ops.exp((b_a - r) * T)
        discount = K * ops.exp(-r * T)

        c = carry * ops.norm_cdf(d1) - discount * ops.norm_cdf(d2)
        p = -carry * ops.norm_cdf(-d1) + discount * ops.norm_cdf(-d2)
        return c, p

    def price(self):
        return self.price_geometric_average()
