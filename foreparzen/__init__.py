"""
foreparzen: Tree-of-Parzen-estimators search over a single scalar parameter.

    >>> from foreparzen import TPE, Domain
    >>> tpe = TPE(Domain.real(0.0, 1.0), kernel="epanechnikov", seed=0)
    >>> x = tpe.request_candidate()
    >>> tpe.report_outcome(x, (x - 0.3) ** 2)
"""

from .domain import Domain
from .exceptions import (
    InvalidBandwidth,
    InvalidDomain,
    InvalidMetric,
    NoTrialsYet,
    OutOfDomainParameter,
    ParzenError,
)
from .kde import Component, DensityMixture
from .kernels import (
    Binomial,
    DiscreteKernel,
    DiscreteUniform,
    Epanechnikov,
    Gaussian,
    Kernel,
    Uniform,
)
from .observation import Trial, TrialHistory
from .tpe import TPE, TPEConf

__version__ = "0.1.0"

__all__ = [
    "TPE",
    "TPEConf",
    "Domain",
    "Trial",
    "TrialHistory",
    "Component",
    "DensityMixture",
    "Kernel",
    "DiscreteKernel",
    "Binomial",
    "DiscreteUniform",
    "Epanechnikov",
    "Gaussian",
    "Uniform",
    "ParzenError",
    "InvalidDomain",
    "InvalidBandwidth",
    "InvalidMetric",
    "OutOfDomainParameter",
    "NoTrialsYet",
]
