# linregkit

A small, dependency-free linear algebra toolkit for Python:

- `linregkit.vector.Vector`: a fixed-length vector of floats with addition,
  subtraction, scaling, dot product (`v * w`), `resize` and `copy`.
- `linregkit.matrix.Matrix`: a dense matrix with addition, subtraction,
  products with matrices, vectors and scalars, `transpose`, `determinant`,
  `inverse` (adjugate method) and `pseudo_inverse` (`(AᵀA)⁻¹Aᵀ`).
- `linregkit.linear_system.LinearSystem`: solves a square system `A x = b`
  by Gaussian elimination with partial pivoting.
- `linregkit.pos_sym_system.PosSymLinSystem`: solves a symmetric
  positive-definite system by the conjugate gradient method (tolerance
  `1e-10`, at most 1000 iterations, starting from the zero vector).
- `linregkit.tikhonov.TikhonovSolver`: regularized least squares, solving
  `(AᵀA + λ²I) x = Aᵀb`.
- `linregkit.regression.CPUPerformanceRegression`: a pipeline that fits a
  regularized linear model to the CPU performance data set (`machine.data`).

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from linregkit.matrix import Matrix
from linregkit.vector import Vector
from linregkit.linear_system import LinearSystem
from linregkit.pos_sym_system import PosSymLinSystem
from linregkit.tikhonov import TikhonovSolver

a = Matrix.from_rows([[4.0, 1.0], [1.0, 3.0]])
b = Vector.from_iterable([1.0, 2.0])

x = LinearSystem(a, b).solve()
y = PosSymLinSystem(a, b).solve()
z = TikhonovSolver(0.1).solve(a, b)

print(a.determinant(), a.inverse().to_rows())
print(a[0, 1], a.shape, list(x))
```

Both types use zero-based indexing: `Matrix` elements are addressed with
`(row, column)` pairs such as `m[0, 0]`, and `Vector` with plain integers.
Out-of-range indices raise `IndexError`; mismatched sizes raise `ValueError`.

Errors:

- `Matrix.inverse` raises `SingularMatrixError` (a `ValueError`) when the
  determinant is zero; `LinearSystem.solve` raises it when elimination meets
  a zero pivot.
- `LinearSystem` raises `ValueError` for a non-square matrix or a right-hand
  side of the wrong size.
- `PosSymLinSystem` raises `ValueError` for a matrix that is not symmetric
  (to within `1e-8`), and from `solve` when the matrix is found not to be
  positive definite.

### Regression pipeline

```python
import random
from linregkit.regression import CPUPerformanceRegression

model = CPUPerformanceRegression(random.Random(1))
result = model.run("machine.data")
print(result.rmse, result.samples)
```

`run` loads the comma-separated records (lines that cannot be parsed are
logged and skipped), shuffles and splits them 80/20 into training and test
sets, standardizes the six base attributes with training-set statistics,
chooses the regularization parameter from `0.0001, 0.001, 0.01, 0.1, 1, 10`
by training RMSE, fits the model, and returns an `EvaluationResult` with the
test RMSE and up to ten `(predicted, actual)` pairs. Each step is also
available on its own: `load_data`, `split_data`, `normalize_features`,
`grid_search_alpha`, `train`, `predict` and `evaluate`. The helpers
`parse_line`, `get_features` (six base plus four engineered features) and
`calculate_rmse` are module-level functions. Progress is reported through
the `linregkit.regression` logger.

## Commands

Run the demonstration on a random diagonally dominant system, printing
matrix operations and the solutions from each solver:

```
linregkit-demo
linregkit-demo --size 4 --seed 42
```

Train and evaluate the CPU performance model. The data file defaults to
`machine.data` in the current directory; `--seed` fixes the shuffle:

```
linregkit-cpu
linregkit-cpu path/to/machine.data --seed 7
```

The command prints its progress and results to standard output, and exits
with status 1 if the file cannot be opened.

## What it does not do

- The data set itself is not included; supply `machine.data` yourself.
- Trained models are not saved; parameters live only on the
  `CPUPerformanceRegression` object.
- `determinant` and `inverse` use cofactor expansion, whose cost grows
  factorially; they are meant for small matrices.