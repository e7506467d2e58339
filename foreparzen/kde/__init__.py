from .component import Component
from .mixture import DensityMixture

__all__ = ["Component", "DensityMixture"]
