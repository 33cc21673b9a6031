"""CPU performance prediction with Tikhonov-regularised linear regression."""

from __future__ import annotations

import argparse
import logging
import math
import random
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

from .linear_system import LinearSystem
from .matrix import Matrix
from .vector import Vector

logger = logging.getLogger(__name__)

NUM_FEATURES = 10
DEFAULT_ALPHAS = (0.0001, 0.001, 0.01, 0.1, 1.0, 10.0)
_FALLBACK_ALPHA = 0.01
_INITIAL_BEST_RMSE = 1e9
_SAMPLE_LIMIT = 10
_NORMALIZED_FIELDS = ("myct", "mmin", "mmax", "cach", "chmin", "chmax")


@dataclass
class CPUData:
    """One machine from the CPU performance data set."""

    vendor: str
    model: str
    myct: float   # machine cycle time in nanoseconds
    mmin: float   # minimum main memory in kilobytes
    mmax: float   # maximum main memory in kilobytes
    cach: float   # cache memory in kilobytes
    chmin: float  # minimum channels in units
    chmax: float  # maximum channels in units
    prp: float    # published relative performance (target)
    erp: float    # estimated relative performance


@dataclass
class EvaluationResult:
    """Test-set RMSE and the first few (predicted, actual) pairs."""

    rmse: float
    samples: list[tuple[float, float]] = field(default_factory=list)


def parse_line(line: str) -> CPUData:
    """Parse one comma-separated record; extra trailing fields are ignored."""
    fields = line.rstrip("\r\n").split(",")
    if len(fields) < 10:
        raise ValueError(f"expected at least 10 fields, got {len(fields)}")
    vendor, model, *numeric = fields[:10]
    try:
        values = [float(item) for item in numeric]
    except ValueError as exc:
        raise ValueError(f"invalid numeric field in line {line!r}") from exc
    return CPUData(vendor, model, *values)


def get_features(cpu: CPUData) -> Vector:
    """The six base attributes followed by four engineered ones."""
    ratio = cpu.mmin / cpu.mmax if cpu.mmax != 0 else 0.0
    return Vector.from_iterable(
        [
            cpu.myct,
            cpu.mmin,
            cpu.mmax,
            cpu.cach,
            cpu.chmin,
            cpu.chmax,
            ratio,
            cpu.myct * cpu.cach,
            cpu.myct * cpu.myct,
            cpu.cach * cpu.cach,
        ]
    )


def calculate_rmse(predictions: Vector, actual: Vector) -> float:
    """Root mean squared error between two equally long vectors."""
    if len(predictions) != len(actual):
        raise ValueError(
            f"sizes differ: {len(predictions)} predictions, {len(actual)} actual values"
        )
    if len(predictions) == 0:
        raise ValueError("cannot compute RMSE of empty vectors")
    total = sum(((p - a) ** 2 for p, a in zip(predictions, actual)), 0.0)
    return math.sqrt(total / len(predictions))


def _safe_std(value: float) -> float:
    return 1.0 if value < 1e-12 else value


def _design(records: Sequence[CPUData]) -> tuple[Matrix, Vector]:
    rows = [list(get_features(cpu)) + [1.0] for cpu in records]
    return Matrix.from_rows(rows), Vector.from_iterable(cpu.prp for cpu in records)


def _fit(a: Matrix, b: Vector, alpha: float) -> Vector:
    # The Tikhonov normal equations (A^T A + alpha^2 I) x = A^T b, solved by
    # elimination instead of an adjugate inverse to keep the cost polynomial.
    at = a.transpose()
    normal = at * a
    penalty = alpha * alpha
    for i in range(normal.rows):
        normal[i, i] += penalty
    return LinearSystem(normal, at * b).solve()


def _linear_value(params: Vector, cpu: CPUData) -> float:
    weights = list(params)
    features = get_features(cpu)
    return sum((w * f for w, f in zip(weights, features)), 0.0) + weights[NUM_FEATURES]


class CPUPerformanceRegression:
    """Loads CPU data, trains a regularised linear model and evaluates it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.data: list[CPUData] = []
        self.train_data: list[CPUData] = []
        self.test_data: list[CPUData] = []
        self.parameters: Vector | None = None

    def load_data(self, filename: str) -> int:
        """Append the records of a CSV file; return how many were read."""
        loaded = 0
        with open(filename, encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    cpu = parse_line(line)
                except ValueError:
                    logger.error("Error parsing line: %s", line.rstrip("\r\n"))
                    continue
                self.data.append(cpu)
                loaded += 1
        logger.info("Loaded %d data points", len(self.data))
        return loaded

    def split_data(self, train_ratio: float = 0.8) -> None:
        """Shuffle the data and split it into training and testing sets."""
        self.rng.shuffle(self.data)
        train_size = int(len(self.data) * train_ratio)
        self.train_data = list(self.data[:train_size])
        self.test_data = list(self.data[train_size:])
        logger.info("Training set: %d samples", len(self.train_data))
        logger.info("Testing set: %d samples", len(self.test_data))

    def normalize_features(self) -> None:
        """Standardise the base attributes using training-set statistics."""
        n = len(self.train_data)
        if n == 0:
            return
        if n < 2:
            raise ValueError("at least two training samples are needed to normalise")

        stats: dict[str, tuple[float, float]] = {}
        for name in _NORMALIZED_FIELDS:
            values = [getattr(cpu, name) for cpu in self.train_data]
            mean = sum(values, 0.0) / n
            variance = sum(((v - mean) ** 2 for v in values), 0.0) / (n - 1)
            stats[name] = (mean, _safe_std(math.sqrt(variance)))

        def scale(cpu: CPUData) -> CPUData:
            return replace(
                cpu,
                **{name: (getattr(cpu, name) - mean) / std for name, (mean, std) in stats.items()},
            )

        self.train_data = [scale(cpu) for cpu in self.train_data]
        self.test_data = [scale(cpu) for cpu in self.test_data]
        logger.info("Features normalized")

    def grid_search_alpha(self, alphas: Iterable[float]) -> float:
        """Pick the alpha with the lowest training RMSE and keep its parameters."""
        alphas = list(alphas)
        if not alphas:
            raise ValueError("at least one alpha is required")
        if not self.train_data:
            logger.error("No training data for Grid Search")
            return _FALLBACK_ALPHA

        best_alpha = alphas[0]
        best_rmse = _INITIAL_BEST_RMSE
        best_params: Vector | None = None

        a, b = _design(self.train_data)
        for alpha in alphas:
            try:
                params = _fit(a, b, alpha)
                predictions = Vector.from_iterable(
                    _linear_value(params, cpu) for cpu in self.train_data
                )
                rmse = calculate_rmse(predictions, b)
            except (ValueError, ArithmeticError) as exc:
                logger.error("Error with alpha = %g: %s", alpha, exc)
                continue
            logger.info("Alpha = %g, RMSE = %g", alpha, rmse)
            if rmse < best_rmse:
                best_rmse = rmse
                best_alpha = alpha
                best_params = params

        self.parameters = best_params
        logger.info("Best alpha found: %g with RMSE = %g", best_alpha, best_rmse)
        return best_alpha

    def train(self) -> float | None:
        """Fit the model with the best alpha; return that alpha, or None on failure."""
        if not self.train_data:
            logger.error("No training data available")
            return None

        best_alpha = self.grid_search_alpha(DEFAULT_ALPHAS)
        a, b = _design(self.train_data)
        try:
            self.parameters = _fit(a, b, best_alpha)
        except (ValueError, ArithmeticError) as exc:
            logger.error("Error during training: %s", exc)
            return None

        logger.info("Training completed with alpha = %g", best_alpha)
        logger.info("Model parameters:")
        for index, weight in enumerate(list(self.parameters)[:NUM_FEATURES], start=1):
            logger.info("x%d: %g", index, weight)
        logger.info("Bias (x%d): %g", NUM_FEATURES + 1, self.parameters[NUM_FEATURES])
        return best_alpha

    def predict(self, dataset: Sequence[CPUData]) -> Vector:
        """Predict performance for each record, clamped at zero."""
        if self.parameters is None or len(self.parameters) != NUM_FEATURES + 1:
            raise RuntimeError("model has not been trained")
        return Vector.from_iterable(
            max(0.0, _linear_value(self.parameters, cpu)) for cpu in dataset
        )

    def evaluate(self) -> EvaluationResult | None:
        """Report test-set RMSE and a few sample predictions."""
        if not self.test_data:
            logger.error("No test data available")
            return None

        predictions = self.predict(self.test_data)
        actual = Vector.from_iterable(cpu.prp for cpu in self.test_data)
        rmse = calculate_rmse(predictions, actual)

        logger.info("\n=== Model Evaluation ===")
        logger.info("Test set RMSE: %g", rmse)
        logger.info("\nSample predictions vs actual:")
        logger.info("Predicted\tActual\t\tDifference")
        samples = list(zip(predictions, actual))[:_SAMPLE_LIMIT]
        for pred, act in samples:
            logger.info("%.2f\t\t%.2f\t\t%.2f", pred, act, pred - act)
        return EvaluationResult(rmse, samples)

    def run(self, filename: str) -> EvaluationResult | None:
        """Load, split, normalise, train and evaluate."""
        logger.info("=== CPU Performance Linear Regression ===")
        self.load_data(filename)
        self.split_data(0.8)
        self.normalize_features()
        self.train()
        return self.evaluate()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Predict CPU performance by linear regression.")
    parser.add_argument("filename", nargs="?", default="machine.data", help="data file")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the split")
    args = parser.parse_args(argv)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        CPUPerformanceRegression(random.Random(args.seed)).run(args.filename)
    except OSError:
        print(f"Error: Could not open file {args.filename}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous_level)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())