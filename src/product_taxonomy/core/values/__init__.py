from .loader import load_values
from .value import Value

__all__ = ["Value", "load_values"]
