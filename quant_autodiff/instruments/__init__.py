from .asian import AsianOption
from .forward_start import ForwardStartOption
from .daycount import year_fraction

__all__ = ["AsianOption", "ForwardStartOption", "year_fraction"]
