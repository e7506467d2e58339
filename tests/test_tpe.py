"""Tests for the TPE ask/tell loop."""

import logging
import math
from collections import Counter

import numpy as np
import pytest

from foreparzen import (
    TPE,
    Binomial,
    Component,
    DiscreteUniform,
    Domain,
    Epanechnikov,
    Gaussian,
    InvalidDomain,
    InvalidMetric,
    NoTrialsYet,
    OutOfDomainParameter,
    TPEConf,
    Uniform,
)


def _run(tpe, objective, n):
    for _ in range(n):
        x = tpe.request_candidate()
        tpe.report_outcome(x, objective(x))
    return tpe


class TestConstruction:
    def test_inverted_domain(self):
        with pytest.raises(InvalidDomain):
            TPE(Domain(10, -10))
        with pytest.raises(InvalidDomain):
            TPE(("int", (10, -10)), kernel="binomial")

    def test_kernel_kind_mismatch(self):
        with pytest.raises(InvalidDomain):
            TPE(Domain.integer(0, 10), kernel="epanechnikov")
        with pytest.raises(InvalidDomain):
            TPE(Domain.real(0.0, 1.0), kernel=Binomial)

    def test_prior_kind_mismatch(self):
        with pytest.raises(InvalidDomain):
            TPE(Domain.integer(0, 10), kernel="binomial", prior=Uniform.with_bounds(0, 10))
        with pytest.raises(InvalidDomain):
            TPE(Domain.real(0.0, 1.0), prior=DiscreteUniform.with_bounds(0, 1))

    def test_bad_options(self):
        domain = Domain.real(0.0, 1.0)
        with pytest.raises(ValueError):
            TPE(domain, split_fraction=0.0)
        with pytest.raises(ValueError):
            TPE(domain, candidate_count=0)
        with pytest.raises(ValueError):
            TPE(domain, direction="up")
        with pytest.raises(ValueError):
            TPE(domain, n_ei_candidates=24)
        with pytest.raises(ValueError):
            TPE(domain, prior=Component(Uniform.with_bounds(0.0, 1.0), 0.0))

    def test_from_config(self):
        conf = TPEConf()
        conf.search["candidate_count"] = 8
        tpe = TPE.from_config(Domain.real(0.0, 1.0), conf, direction="maximize")
        assert tpe.candidate_count == 8
        assert tpe.direction == "maximize"
        # the passed config is not mutated by overrides
        assert conf.extra == {}

    def test_defaults(self):
        tpe = TPE(Domain.real(0.0, 1.0))
        assert tpe.kernel is Epanechnikov
        assert tpe.candidate_count == 24
        assert tpe.direction == "minimize"
        assert tpe.gamma_strategy.n_good(4) == 1


class TestColdState:
    def test_draws_from_prior(self):
        tpe = TPE(Domain.real(0.0, 1.0), seed=3)
        prior = Uniform.with_bounds(0.0, 1.0)
        rng = np.random.default_rng(3)
        got = [tpe.request_candidate() for _ in range(50)]
        expected = [prior.sample(rng) for _ in range(50)]
        assert got == pytest.approx(expected)
        assert tpe.state == TPE.COLD

    def test_custom_prior(self):
        prior = Epanechnikov(0.8, 0.05)
        tpe = TPE(Domain.real(0.0, 1.0), prior=prior, seed=1)
        xs = [tpe.request_candidate() for _ in range(200)]
        assert all(abs(x - 0.8) <= math.sqrt(5.0) * 0.05 + 1e-9 for x in xs)

    def test_transition_is_permanent(self):
        tpe = TPE(Domain.real(0.0, 1.0), seed=0)
        assert tpe.state == "cold"
        tpe.report_outcome(tpe.request_candidate(), 1.0)
        assert tpe.state == "warm"
        for _ in range(3):
            tpe.request_candidate()
        assert tpe.state == "warm"


class TestRequestCandidate:
    def test_does_not_touch_history(self):
        tpe = _run(TPE(Domain.real(0.0, 1.0), seed=0), lambda x: x * x, 5)
        before = tpe.trials
        for _ in range(10):
            tpe.request_candidate()
        assert tpe.trials == before

    @pytest.mark.parametrize("kernel", ["epanechnikov", "gaussian", "uniform"])
    def test_continuous_stays_in_domain(self, kernel):
        domain = Domain.real(-2.0, 3.0)
        tpe = TPE(domain, kernel=kernel, seed=11)
        for _ in range(60):
            x = tpe.request_candidate()
            assert domain.contains(x)
            tpe.report_outcome(x, (x - 2.9) ** 2)
        for _ in range(1000):
            assert domain.contains(tpe.request_candidate())

    @pytest.mark.parametrize("kernel", ["binomial", "uniform"])
    def test_discrete_stays_in_domain(self, kernel):
        domain = Domain.integer(-5, 5)
        tpe = TPE(domain, kernel=kernel, seed=5)
        for _ in range(60):
            x = tpe.request_candidate()
            assert isinstance(x, int)
            assert domain.contains(x)
            tpe.report_outcome(x, -abs(x))
        for _ in range(1000):
            x = tpe.request_candidate()
            assert isinstance(x, int) and -5 <= x <= 5

    def test_seeded_runs_are_reproducible(self):
        def objective(x):
            return math.sin(3 * x)

        a = _run(TPE(Domain.real(0.0, 2.0), seed=99), objective, 20)
        b = _run(TPE(Domain.real(0.0, 2.0), seed=99), objective, 20)
        assert a.trials == b.trials

    def test_per_call_rng(self):
        tpe = _run(TPE(Domain.real(0.0, 1.0), seed=0), lambda x: x, 6)
        x1 = tpe.request_candidate(rng=np.random.default_rng(42))
        x2 = tpe.request_candidate(rng=np.random.default_rng(42))
        assert x1 == x2

    def test_log_space_ranks_identically(self):
        def objective(x):
            return (x - 0.3) ** 2

        plain = _run(TPE(Domain.real(0.0, 1.0), seed=4), objective, 15)
        logged = _run(TPE(Domain.real(0.0, 1.0), seed=4, acq_log_space=True), objective, 15)
        assert plain.trials == logged.trials

    def test_startup_trials_use_prior(self):
        tpe = TPE(Domain.real(0.0, 1.0), seed=2, n_startup_trials=3)
        _run(tpe, lambda x: x, 2)
        tpe.request_candidate()
        assert tpe.diagnostics()["last_source"] == "prior"
        _run(tpe, lambda x: x, 1)
        tpe.request_candidate()
        assert tpe.diagnostics()["last_source"] == "model"


class TestReportOutcome:
    def test_out_of_domain(self):
        tpe = TPE(Domain.integer(-100, 100), kernel="binomial", seed=0)
        tpe.report_outcome(3, 1.0)
        with pytest.raises(OutOfDomainParameter):
            tpe.report_outcome(1000, 0.0)
        with pytest.raises(OutOfDomainParameter):
            tpe.report_outcome(2.5, 0.0)
        assert len(tpe.history) == 1

    def test_nan_metric(self):
        tpe = TPE(Domain.real(0.0, 1.0))
        with pytest.raises(InvalidMetric):
            tpe.report_outcome(0.5, float("nan"))
        assert len(tpe.history) == 0

    def test_non_numeric_metric_leaves_history_usable(self):
        tpe = TPE(Domain.real(0.0, 1.0), seed=0)
        tpe.report_outcome(0.5, 1.0)
        with pytest.raises(InvalidMetric):
            tpe.report_outcome(0.6, "oops")
        with pytest.raises(InvalidMetric):
            tpe.report_outcome(0.7, np.float32("nan"))
        assert len(tpe.history) == 1
        assert tpe.best_trial().parameter == 0.5
        assert 0.0 <= tpe.request_candidate() <= 1.0

    def test_int_parameters_are_stored_as_int(self):
        tpe = TPE(Domain.integer(0, 10), kernel="binomial")
        tpe.report_outcome(4.0, 1.0)
        assert tpe.best_trial().parameter == 4
        assert isinstance(tpe.best_trial().parameter, int)

    def test_new_best_is_logged(self, caplog):
        tpe = TPE(Domain.real(0.0, 1.0))
        with caplog.at_level(logging.INFO, logger="foreparzen.tpe"):
            tpe.report_outcome(0.5, 2.0)
            tpe.report_outcome(0.6, 3.0)
            tpe.report_outcome(0.7, 1.0)
        messages = [r.getMessage() for r in caplog.records if r.name == "foreparzen.tpe"]
        assert len([m for m in messages if m.startswith("New best")]) == 2


class TestBestTrial:
    def test_no_trials(self):
        with pytest.raises(NoTrialsYet):
            TPE(Domain.integer(-100, 100), kernel="binomial").best_trial()

    def test_never_gets_worse(self):
        tpe = TPE(Domain.real(-1.0, 1.0), seed=8)
        best_so_far = math.inf
        for _ in range(40):
            x = tpe.request_candidate()
            tpe.report_outcome(x, abs(x - 0.2))
            best = tpe.best_trial().metric
            assert best <= best_so_far
            best_so_far = best

    def test_maximize(self):
        tpe = TPE(Domain.real(0.0, 1.0), direction="maximize")
        for x, m in [(0.1, 1.0), (0.2, 5.0), (0.3, 5.0), (0.4, 2.0)]:
            tpe.report_outcome(x, m)
        best = tpe.best_trial()
        assert (best.parameter, best.metric) == (0.2, 5.0)


class TestModels:
    def test_cached_until_history_grows(self):
        tpe = _run(TPE(Domain.real(0.0, 1.0), seed=0), lambda x: x, 8)
        first = tpe.density_models()
        assert tpe.density_models()[0] is first[0]
        tpe.report_outcome(0.5, 0.5)
        assert tpe.density_models()[0] is not first[0]

    def test_split_sizes(self):
        tpe = _run(TPE(Domain.real(0.0, 1.0), seed=0), lambda x: x, 12)
        good, bad = tpe.density_models()
        assert len(good.components) == 3
        assert len(bad.components) == 9

    def test_densities_positive(self):
        domain = Domain.real(0.0, 1.0)
        tpe = _run(TPE(domain, kernel=Gaussian, seed=0), lambda x: x, 20)
        good, bad = tpe.density_models()
        xs = np.linspace(0.0, 1.0, 501)
        assert np.all(good.density(xs) > 0.0)
        assert np.all(bad.density(xs) > 0.0)

    def test_diagnostics(self):
        tpe = TPE(Domain.real(0.0, 1.0), seed=0)
        assert tpe.diagnostics()["observations"] == 0
        _run(tpe, lambda x: x, 3)
        tpe.request_candidate()
        diag = tpe.diagnostics()
        assert diag["state"] == "warm"
        assert diag["last_source"] == "model"
        assert diag["last_score"] > 0.0
        assert diag["best_metric"] == min(tpe.history.metrics())


class TestConvergence:
    @pytest.mark.parametrize("seed", range(10))
    def test_cosine_minimum(self, seed):
        domain = Domain.real(math.pi / 2.0, 3.0 * math.pi / 2.0)
        tpe = TPE(domain, kernel=Epanechnikov, seed=seed)
        _run(tpe, math.cos, 100)
        best = tpe.best_trial()
        assert abs(best.parameter - math.pi) < 0.3
        assert abs(best.metric + 1.0) < 0.05

    def test_integer_parabola(self):
        hits = 0
        for seed in range(30):
            tpe = TPE(Domain.integer(-100, 100), kernel=Binomial, seed=seed)
            _run(tpe, lambda x: x * x - 4 * x, 30)
            best = tpe.best_trial()
            hits += (best.parameter, best.metric) == (2, -4)
        assert hits >= 20

    @pytest.mark.parametrize("seed", range(10))
    def test_maximize_sine(self, seed):
        tpe = TPE(Domain.real(0.0, math.pi), direction="maximize", seed=seed)
        _run(tpe, math.sin, 60)
        assert tpe.best_trial().metric > 0.99


class TestExploration:
    @pytest.mark.parametrize("seed", range(10))
    def test_integer_search_does_not_stall(self, seed):
        tpe = TPE(Domain.integer(-100, 100), kernel=Binomial, seed=seed)
        _run(tpe, lambda x: x * x - 4 * x, 30)
        counts = Counter(tpe.history.parameters())
        assert max(counts.values()) <= 20
        assert len(counts) >= 8

    def test_repeated_reports_keep_proposals_spread(self):
        tpe = TPE(Domain.integer(-100, 100), kernel=Binomial, seed=0)
        for _ in range(8):
            tpe.report_outcome(-7, 0.0)
        proposals = [tpe.request_candidate() for _ in range(50)]
        assert proposals.count(-7) < 10
        assert len(set(proposals)) > 5
