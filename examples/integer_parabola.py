import argparse

from foreparzen import TPE, TPEConf, Domain


def objective(x: int) -> int:
    return x * x - 4 * x


def main():
    parser = argparse.ArgumentParser(description="Minimise x^2 - 4x over [-100, 100]")
    parser.add_argument("--trials", type=int, default=30)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--bandwidth-rule", default="neighbor")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    conf = TPEConf()
    conf.bandwidth["bandwidth_rule"] = args.bandwidth_rule
    conf.search["verbose"] = args.verbose

    tpe = TPE.from_config(Domain.integer(-100, 100), conf, kernel="binomial", seed=args.seed)
    for _ in range(args.trials):
        x = tpe.request_candidate()
        tpe.report_outcome(x, objective(x))

    best = tpe.best_trial()
    print(f"best trial #{best.index}: x={best.parameter}, f(x)={best.metric}")


if __name__ == "__main__":
    main()
