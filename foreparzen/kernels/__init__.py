"""
Kernel shapes for the Parzen estimators.

Continuous: Epanechnikov, Gaussian, Uniform. Discrete: Binomial, DiscreteUniform.
New shapes subclass ``Kernel`` (or ``DiscreteKernel``) and implement
``_density`` and ``sample``.
"""

from .base import DiscreteKernel, Kernel
from .binomial import Binomial
from .epanechnikov import Epanechnikov
from .factory import KernelShape, build_kernel, check_kernel_kind, resolve_kernel
from .gaussian import Gaussian
from .uniform import DiscreteUniform, Uniform

__all__ = [
    "Kernel",
    "DiscreteKernel",
    "Binomial",
    "DiscreteUniform",
    "Epanechnikov",
    "Gaussian",
    "Uniform",
    "KernelShape",
    "build_kernel",
    "check_kernel_kind",
    "resolve_kernel",
]
