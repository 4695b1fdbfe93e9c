"""
Forward-start option (Rubinstein): an at-the-money-scaled option whose strike
alpha * S(t) is fixed at a future start date t and which expires at T.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

import numpy as np

from ..aad import ops
from .base import ClosedFormOption
from .daycount import year_fraction_from


@dataclass
class ForwardStartOption(ClosedFormOption):
    """
    Attributes:
        initial_price (float | Variable): Spot price S
        alpha (float): Strike as a fraction of the spot at the start date
        risk_free_rate (float | Variable): Continuously compounded rate r
        volatility (float | Variable): Volatility v
        dividend_rate (float | Variable): Continuous dividend yield q
        start (datetime): Date the strike is set
        end (datetime): Expiry
        valuation_date (datetime, optional): Defaults to now (UTC)
    """
    initial_price: Any
    alpha: float
    risk_free_rate: Any
    volatility: Any
    dividend_rate: Any
    start: datetime
    end: datetime
    valuation_date: Optional[datetime] = None

    def price(self):
        """Return (call, put)."""
        S = self.initial_price
        a = self.alpha
        r = self.risk_free_rate
        v = self.volatility
        q = self.dividend_rate

        T = year_fraction_from(self.valuation_date, self.end)
        t = year_fraction_from(self.valuation_date, self.start)
        tau = T - t
        sqrt_tau = ops.sqrt(tau)

        b = r - q

        with np.errstate(all="ignore"):
            d1 = (ops.ln(ops.recip(a)) + (b + v * v / 2.0) * tau) / (v * sqrt_tau)
            d2 = d1 - v * sqrt_tau

        scale = S * ops.exp((b - r) * t)
        growth = ops.exp((b - r) * tau)
        discount = a * ops.exp(-r * tau)

        c = scale * (growth * ops.norm_cdf(d1) - discount * ops.norm_cdf(d2))
        p = scale * (-growth * ops.norm_cdf(-d1) + discount * ops.norm_cdf(-d2))
        return c, p
