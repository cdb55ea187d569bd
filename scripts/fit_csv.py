"""
Fit a linear regression to a CSV dataset by gradient descent.

The data is shuffled and split into training and test sets, the model is
fitted on the training set, and test-set metrics are printed.

Example:
    python scripts/fit_csv.py --data data/housing.csv --target price \
        --features area rooms --iterations 5000 --learning-rate 1e-3 --verbose
"""

import argparse

from gdregression import LinearRegression, train_test_sets, r2_score, rmse
from gdregression.data import load_csv


def main():
    parser = argparse.ArgumentParser(
        description="Fit a linear regression to a CSV file with gradient descent"
    )
    parser.add_argument(
        "--data",
        type=str,
        required=True,
        help="Path to CSV file",
    )
    parser.add_argument(
        "--target",
        type=str,
        required=True,
        help="Name of the label column",
    )
    parser.add_argument(
        "--features",
        type=str,
        nargs="+",
        default=None,
        help="Feature columns (default: every column except the target)",
    )
    parser.add_argument(
        "--ratio",
        type=float,
        default=70,
        help="Percentage of rows used for training (default: 70)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=1000,
        help="Number of gradient descent iterations (default: 1000)",
    )
    parser.add_argument(
        "--learning-rate",
        type=float,
        default=1e-3,
        help="Gradient descent step size (default: 1e-3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the train/test shuffle",
    )
    parser.add_argument(
        "--analytic",
        action="store_true",
        help="Seed gradient descent with closed-form weights (single feature only)",
    )
    parser.add_argument(
        "--search",
        action="store_true",
        help="Grid search iterations and learning rate before fitting",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print progress messages",
    )
    args = parser.parse_args()

    features, labels = load_csv(args.data, args.target, args.features, verbose=args.verbose)
    X_train, X_test, y_train, y_test = train_test_sets(
        features, labels, args.ratio, seed=args.seed
    )
    print(f"Training on {len(X_train)} rows, testing on {len(X_test)} rows")

    model = LinearRegression(X_train, y_train)

    iterations, learning_rate = args.iterations, args.learning_rate
    if args.search:
        iteration_candidates = sorted({iterations // 10 or 1, iterations, iterations * 10})
        learning_rate_candidates = [learning_rate * 10, learning_rate, learning_rate / 10]
        iterations, learning_rate = model.search(
            iteration_candidates, learning_rate_candidates, verbose=args.verbose
        )

    result = model.fit(
        iterations=iterations,
        learning_rate=learning_rate,
        seed_from_analytic=args.analytic,
        verbose=args.verbose,
    )

    print("\n=== Fitted Parameters ===")
    print(f"Intercept: {result.intercept}")
    print(f"Slopes:    {list(result.slopes)}")
    print(f"Training MSE: {result.error}")

    if len(X_test) == 0:
        print("Warning: test set is empty, skipping evaluation")
        return

    scores = model.score(X_test, y_test)
    predictions = list(model.predict(X_test))
    print("\n=== Test Metrics ===")
    print(f"MSE:  {scores.mse}")
    print(f"MAE:  {scores.mae}")
    print(f"RMSE: {rmse(y_test, predictions)}")
    print(f"R2:   {r2_score(y_test, predictions)}")


if __name__ == "__main__":
    main()
