from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type, Union

from ..exceptions import InvalidDomain
from .base import Kernel
from .binomial import Binomial
from .epanechnikov import Epanechnikov
from .gaussian import Gaussian
from .uniform import DiscreteUniform, Uniform

if TYPE_CHECKING:
    from ..domain import Domain

KernelShape = Union[str, Type[Kernel]]

_CONTINUOUS: Dict[str, Type[Kernel]] = {
    "epanechnikov": Epanechnikov,
    "gaussian": Gaussian,
    "uniform": Uniform,
}
_DISCRETE: Dict[str, Type[Kernel]] = {
    "binomial": Binomial,
    "uniform": DiscreteUniform,
}


def resolve_kernel(shape: KernelShape, domain: "Domain") -> Type[Kernel]:
    """
    Resolve a kernel shape for ``domain``, failing fast on a kind mismatch.
    ``"uniform"`` picks the discrete variant on integral domains.
    """
    if isinstance(shape, str):
        key = shape.lower()
        table = _DISCRETE if domain.is_integral else _CONTINUOUS
        if key in table:
            return table[key]
        other = _CONTINUOUS if domain.is_integral else _DISCRETE
        if key in other:
            raise InvalidDomain(
                f"kernel '{shape}' cannot be used on a {domain.kind} domain"
            )
        raise ValueError(
            f"Unknown kernel '{shape}'; expected one of "
            f"{sorted(set(_CONTINUOUS) | set(_DISCRETE))}"
        )
    if not (isinstance(shape, type) and issubclass(shape, Kernel)):
        raise TypeError(f"kernel must be a Kernel subclass or a name, got {shape!r}")
    check_kernel_kind(shape, domain)
    return shape


def check_kernel_kind(kernel: Union[Kernel, Type[Kernel]], domain: "Domain") -> None:
    if bool(kernel.discrete) != domain.is_integral:
        kind = "discrete" if kernel.discrete else "continuous"
        name = kernel.__name__ if isinstance(kernel, type) else type(kernel).__name__
        raise InvalidDomain(
            f"{kind} kernel {name} cannot be attached to a {domain.kind} domain"
        )


def build_kernel(
    shape: KernelShape, location: float, bandwidth: float, domain: "Domain"
) -> Kernel:
    return resolve_kernel(shape, domain)(location, bandwidth)
