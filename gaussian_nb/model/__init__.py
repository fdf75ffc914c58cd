from .parameters import ModelParameters
from .state import ModelState

__all__ = ["ModelParameters", "ModelState"]
