"""
Base class for closed-form option pricers that run on either plain floats or
AD Variables.

Market inputs may be floats or Variables; the pricing formulas only use the
elementary functions of `aad.ops`, so the same code prices with floats and
records a graph when given Variables. `greeks()` prices once on a fresh graph
and reads every sensitivity off a single reverse sweep.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, Tuple

from ..aad.core.seeds import value
from ..aad.core.tape import Graph

logger = logging.getLogger(__name__)

# market input field -> name of the sensitivity reported by greeks()
SENSITIVITIES = {
    "initial_price": "delta",
    "risk_free_rate": "rho",
    "volatility": "vega",
    "dividend_rate": "psi",
}


class ClosedFormOption(ABC):
    """
    Subclasses are dataclasses with (at least) the fields named in
    SENSITIVITIES and implement `price()` returning (call, put).
    """

    @abstractmethod
    def price(self) -> Tuple:
        """Return (call, put) prices: floats, or Variables if any input is one."""

    def greeks(self, option_type: str = "call") -> Dict[str, float]:
        """
        Price and first-order sensitivities of the call or put.

        Returns:
            {
                'price': float,
                'delta': float,   # ∂V/∂S
                'rho':   float,   # ∂V/∂r
                'vega':  float,   # ∂V/∂σ
                'psi':   float,   # ∂V/∂q
            }
        """
        if option_type not in ("call", "put"):
            raise ValueError(f"option_type must be 'call' or 'put', got {option_type!r}")

        graph = Graph()
        inputs = {field: graph.var(float(value(getattr(self, field)))) for field in SENSITIVITIES}
        call, put = replace(self, **inputs).price()
        priced = call if option_type == "call" else put

        result = {"price": float(value(priced))}
        gradient = priced.accumulate()
        for field, var in inputs.items():
            result[SENSITIVITIES[field]] = gradient.wrt(var)

        logger.debug(f"{type(self).__name__} {option_type} greeks on {len(graph)} nodes: {result}")
        return result
