import logging
import math

from foreparzen import TPE, Domain, Epanechnikov

logging.basicConfig(level=logging.INFO, format="%(message)s")


def main(n_trials: int = 100, seed: int = 42):
    domain = Domain.real(math.pi / 2, 3 * math.pi / 2)
    tpe = TPE(domain, kernel=Epanechnikov, seed=seed)

    for _ in range(n_trials):
        x = tpe.request_candidate()
        tpe.report_outcome(x, math.cos(x))

    best = tpe.best_trial()
    print(f"best x={best.parameter:.5f} (pi={math.pi:.5f}), cos(x)={best.metric:.5f}")
    print(tpe.diagnostics())


if __name__ == "__main__":
    main()
