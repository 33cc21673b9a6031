"""Dense vectors and matrices, linear system solvers, Tikhonov regularization and a CPU performance regression pipeline."""

__version__ = "0.1.0"
__all__ = [
    "vector",
    "matrix",
    "linear_system",
    "pos_sym_system",
    "tikhonov",
    "demo",
    "regression",
]