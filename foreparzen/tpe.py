from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np

from .acquisition import AcquisitionStrategy, build_acquisition_strategy
from .bandwidth import BandwidthRule, build_bandwidth_rule
from .domain import Domain
from .exceptions import OutOfDomainParameter
from .gamma import GammaStrategy, build_gamma_strategy
from .kde import Component, DensityMixture
from .kernels import Kernel, KernelShape, check_kernel_kind, resolve_kernel
from .observation import DIRECTIONS, Trial, TrialHistory
from .utils import SeedLike, ensure_rng

__all__ = [
    "TPE",
    "TPEConf",
]

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Options (quick reference)
# -----------------------------------------------------------------------------
# Split: split_fraction (float or callable n -> n_good), gamma_strategy
# Bandwidth: bandwidth_rule ("neighbor" | "span" | "silverman" | callable),
#            bandwidth_factor, min_bandwidth, min_bandwidth_factor
# Prior: prior_weight
# Search: candidate_count, n_startup_trials, direction, acq_log_space, verbose


@dataclass
class TPEConf:
    """
    Single config container for TPE.
    Use with `TPE.from_config(domain, conf)`.
    """

    gamma: Dict[str, Any] = field(
        default_factory=lambda: {
            "split_fraction": 0.25,
            "gamma_strategy": "fraction",
        }
    )
    bandwidth: Dict[str, Any] = field(
        default_factory=lambda: {
            "bandwidth_rule": "neighbor",
            "bandwidth_factor": 1.0,
            "min_bandwidth": 1e-3,
            "min_bandwidth_factor": 0.05,
        }
    )
    prior: Dict[str, Any] = field(
        default_factory=lambda: {
            "prior_weight": 1.0,
        }
    )
    search: Dict[str, Any] = field(
        default_factory=lambda: {
            "candidate_count": 24,
            "n_startup_trials": 0,
            "direction": "minimize",
            "acq_log_space": False,
            "verbose": False,
        }
    )
    extra: Dict[str, Any] = field(default_factory=dict)

    def known_keys(self) -> set:
        defaults = TPEConf()
        return (
            set(defaults.gamma)
            | set(defaults.bandwidth)
            | set(defaults.prior)
            | set(defaults.search)
        )

    def to_kwargs(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        out.update(dict(self.gamma))
        out.update(dict(self.bandwidth))
        out.update(dict(self.prior))
        out.update(dict(self.search))
        out.update(dict(self.extra))
        unknown = sorted(set(out) - self.known_keys())
        if unknown:
            raise ValueError(f"Unknown TPE options: {unknown}")
        return out


class TPE:
    """
    Tree-of-Parzen-estimators search over one scalar domain.

    Ask/tell loop: ``request_candidate`` proposes a parameter, the caller
    evaluates it and hands the metric back through ``report_outcome``.

    - cold (no reports yet): candidates are drawn from the prior alone
    - warm: the history is split into good/bad by metric rank, each subset
      becomes a kernel mixture on top of the prior, ``candidate_count`` points
      are drawn from the good mixture and the one maximising l(x)/g(x) wins
    """

    COLD = "cold"
    WARM = "warm"

    @classmethod
    def from_config(
        cls,
        domain: Union[Domain, Tuple],
        cfg: TPEConf,
        kernel: KernelShape = "epanechnikov",
        prior: Union[None, Kernel, Component] = None,
        seed: SeedLike = None,
        **overrides: Any,
    ) -> "TPE":
        return cls(domain, kernel=kernel, prior=prior, conf=cfg, seed=seed, **overrides)

    def __init__(
        self,
        domain: Union[Domain, Tuple],
        kernel: KernelShape = "epanechnikov",
        prior: Union[None, Kernel, Component] = None,
        conf: Optional[TPEConf] = None,
        seed: SeedLike = None,
        **overrides: Any,
    ):
        cfg = TPEConf() if conf is None else conf
        if overrides:
            cfg = TPEConf(
                gamma=dict(cfg.gamma),
                bandwidth=dict(cfg.bandwidth),
                prior=dict(cfg.prior),
                search=dict(cfg.search),
                extra={**cfg.extra, **overrides},
            )
        opts = cfg.to_kwargs()

        split_fraction = opts.get("split_fraction", 0.25)
        gamma_strategy = opts.get("gamma_strategy", "fraction")
        bandwidth_rule = opts.get("bandwidth_rule", "neighbor")
        bandwidth_factor = opts.get("bandwidth_factor", 1.0)
        min_bandwidth = opts.get("min_bandwidth", 1e-3)
        min_bandwidth_factor = opts.get("min_bandwidth_factor", 0.05)
        prior_weight = opts.get("prior_weight", 1.0)
        candidate_count = opts.get("candidate_count", 24)
        n_startup_trials = opts.get("n_startup_trials", 0)
        direction = opts.get("direction", "minimize")
        acq_log_space = opts.get("acq_log_space", False)
        verbose = opts.get("verbose", False)

        # kernel/domain kind mismatches raise InvalidDomain here
        self.domain = Domain.parse(domain)
        self.kernel = resolve_kernel(kernel, self.domain)
        self.prior = self._make_prior(prior, prior_weight)

        if str(direction).lower() not in DIRECTIONS:
            raise ValueError(f"direction must be one of {DIRECTIONS}, got '{direction}'")
        if int(candidate_count) < 1:
            raise ValueError(f"candidate_count must be >= 1, got {candidate_count}")
        if int(n_startup_trials) < 0:
            raise ValueError(f"n_startup_trials must be >= 0, got {n_startup_trials}")

        self.gamma_strategy: GammaStrategy = build_gamma_strategy(
            split_fraction, gamma_strategy
        )
        self.bandwidth_rule: BandwidthRule = build_bandwidth_rule(
            bandwidth_rule,
            bandwidth_factor=bandwidth_factor,
            min_bandwidth=min_bandwidth,
            min_bandwidth_factor=min_bandwidth_factor,
        )
        self.acquisition_strategy: AcquisitionStrategy = build_acquisition_strategy(
            log_space=acq_log_space
        )
        self.candidate_count = int(candidate_count)
        self.n_startup_trials = int(n_startup_trials)
        self.verbose = bool(verbose)

        self.history = TrialHistory(direction)
        self._rng = ensure_rng(seed)
        self._models: Optional[Tuple[int, DensityMixture, DensityMixture]] = None
        self._last: Dict[str, Any] = {}

        if self.verbose:
            _attach_stream_handler()
        logger.debug(
            f"TPE on {self.domain} with {self.kernel.__name__} kernel, "
            f"{self.history.direction}, {self.candidate_count} candidates"
        )

    def _make_prior(
        self, prior: Union[None, Kernel, Component], prior_weight: float
    ) -> Component:
        if prior is None:
            comp = Component(self.domain.default_prior(), prior_weight)
        elif isinstance(prior, Component):
            comp = prior
        elif isinstance(prior, Kernel):
            comp = Component(prior, prior_weight)
        else:
            raise TypeError(f"prior must be a Kernel or Component, got {prior!r}")
        check_kernel_kind(comp.kernel, self.domain)
        if comp.weight <= 0.0:
            raise ValueError(f"prior weight must be positive, got {comp.weight}")
        return comp

    # ────────────────────────────────────────────────────────────────────────
    #   Core methods (request_candidate, report_outcome, best_trial)
    # ────────────────────────────────────────────────────────────────────────

    @property
    def direction(self) -> str:
        return self.history.direction

    @property
    def state(self) -> str:
        return self.COLD if len(self.history) == 0 else self.WARM

    @property
    def trials(self) -> Tuple[Trial, ...]:
        return self.history.trials

    def request_candidate(self, rng: SeedLike = None) -> Union[float, int]:
        """
        Propose the next parameter to evaluate. Never changes the history.
        ``rng`` overrides the optimizer's own random source for this call.
        """
        rng = self._rng if rng is None else ensure_rng(rng)

        # 1. Prior phase
        if len(self.history) < max(1, self.n_startup_trials):
            x = self.domain.clip(self.prior.kernel.sample(rng))
            self._last = {"source": "prior", "candidate": x, "score": None}
            logger.debug(f"[{self.state}] prior candidate {x!r}")
            return x

        # 2. Fit models
        good, bad = self.density_models()

        # 3. Draw from l(x), rank by l(x)/g(x)
        candidates = np.array(
            [self.domain.clip(good.sample(rng)) for _ in range(self.candidate_count)]
        )
        scores = self.acquisition_strategy.score(candidates, good, bad)
        i = self.acquisition_strategy.best_index(scores)
        x = self.domain.coerce(candidates[i])

        self._last = {
            "source": "model",
            "candidate": x,
            "score": float(scores[i]),
            "n_good": len(good.components),
            "n_bad": len(bad.components),
        }
        logger.debug(
            f"[{self.state}] candidate {x!r} score={float(scores[i]):.4g} "
            f"(good={len(good.components)}, bad={len(bad.components)}, "
            f"pool={self.candidate_count})"
        )
        return x

    def report_outcome(self, parameter: Any, metric: Any) -> None:
        """Record the metric observed for ``parameter``."""
        if not self.domain.contains(parameter):
            raise OutOfDomainParameter(
                f"parameter {parameter!r} is outside {self.domain}"
            )
        previous = self.history.best() if len(self.history) else None
        trial = self.history.record(self.domain.coerce(parameter), metric)
        if previous is None or self.history.best() is trial:
            logger.info(
                f"New best trial #{trial.index}: parameter={trial.parameter!r}, "
                f"metric={trial.metric!r}"
            )

    def best_trial(self) -> Trial:
        """Best trial so far; raises ``NoTrialsYet`` on an empty history."""
        return self.history.best()

    # ────────────────────────────────────────────────────────────────────────
    #   Models
    # ────────────────────────────────────────────────────────────────────────

    def density_models(self) -> Tuple[DensityMixture, DensityMixture]:
        """
        Good and bad mixtures for the current history, rebuilt whenever the
        history has grown since the last call.
        """
        n = len(self.history)
        if self._models is not None and self._models[0] == n:
            return self._models[1], self._models[2]
        good_trials, bad_trials = self.history.partition(self.gamma_strategy)
        good = self._build_mixture([t.parameter for t in good_trials])
        bad = self._build_mixture([t.parameter for t in bad_trials])
        self._models = (n, good, bad)
        return good, bad

    def _build_mixture(self, parameters: List[Any]) -> DensityMixture:
        if not parameters:
            return DensityMixture(self.prior)
        bandwidths = self.bandwidth_rule.bandwidths(parameters, self.domain)
        return DensityMixture.from_trials(self.prior, parameters, self.kernel, bandwidths)

    def diagnostics(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "observations": len(self.history),
            "state": self.state,
            "direction": self.direction,
            "kernel": self.kernel.__name__,
        }
        out.update({f"last_{k}": v for k, v in self._last.items()})
        if len(self.history):
            best = self.history.best()
            out.update({"best_parameter": best.parameter, "best_metric": best.metric})
        return out


def _attach_stream_handler() -> None:
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt="%(message)s"))
        logger.addHandler(handler)
