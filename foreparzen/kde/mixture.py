from __future__ import annotations

from typing import Any, Iterator, Sequence, Type, Union

import numpy as np
from scipy.special import logsumexp

from ..kernels import Kernel
from ..utils import as_output, choose_index, safe_normalize
from .component import Component


class DensityMixture:
    """
    Parzen-window estimate: a weighted sum of kernels plus a prior component.

    Weights are normalised on use, so they only need to be non-negative. The
    prior is always present; with a positive prior weight the mixture density
    is positive wherever the prior's is.
    """

    def __init__(
        self,
        prior: Union[Component, Kernel],
        components: Sequence[Component] = (),
    ):
        self.prior = prior if isinstance(prior, Component) else Component(prior)
        self.components = tuple(components)
        self._all = (self.prior,) + self.components
        w = np.array([c.weight for c in self._all], dtype=float)
        if float(np.sum(w)) <= 0.0:
            raise ValueError("DensityMixture needs at least one positive weight")
        self._weights = safe_normalize(w)

    @classmethod
    def from_trials(
        cls,
        prior: Union[Component, Kernel],
        parameters: Sequence[Any],
        kernel: Type[Kernel],
        bandwidths: Sequence[float],
        weight: float = 1.0,
    ) -> "DensityMixture":
        """One ``kernel`` per observed parameter, centred on it."""
        if len(parameters) != len(bandwidths):
            raise ValueError(
                f"Got {len(parameters)} parameters but {len(bandwidths)} bandwidths"
            )
        comps = [
            Component(kernel(p, float(bw)), weight)
            for p, bw in zip(parameters, bandwidths)
        ]
        return cls(prior, comps)

    @property
    def weights(self) -> np.ndarray:
        return self._weights.copy()

    def __len__(self) -> int:
        return len(self._all)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._all)

    def density(self, x: Any):
        arr = np.atleast_1d(np.asarray(x, dtype=float))
        total = np.zeros_like(arr, dtype=float)
        for w, comp in zip(self._weights, self._all):
            if w > 0.0:
                total += w * np.asarray(comp.kernel.density(arr), dtype=float)
        return as_output(total, np.ndim(x) == 0)

    def log_density(self, x: Any):
        arr = np.atleast_1d(np.asarray(x, dtype=float))
        with np.errstate(divide="ignore"):
            log_w = np.log(self._weights)
            log_comp = np.stack(
                [np.asarray(c.kernel.log_density(arr), dtype=float) for c in self._all]
            )
        out = logsumexp(log_comp + log_w[:, None], axis=0)
        return as_output(out, np.ndim(x) == 0)

    def sample(self, rng: np.random.Generator) -> Any:
        """Pick a component by weight, then draw from its kernel."""
        idx = choose_index(rng, self._weights)
        return self._all[idx].kernel.sample(rng)

    def __repr__(self) -> str:
        return f"DensityMixture(components={len(self.components)}, prior={self.prior.kernel!r})"
