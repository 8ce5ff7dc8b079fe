"""Gaussian elimination solver with a step-by-step transcript."""

from solver.elimination import (
    GaussianElimination,
    Inconsistent,
    Infinite,
    InvalidShapeError,
    NumericalInstabilityError,
    SolutionResult,
    SolverError,
    StepLog,
    Unique,
)
from solver.engine import solve_augmented_matrix
from solver.formatting import EPSILON, format_number, render_matrix, variable_name
from solver.generator import generate_random_matrix

__all__ = [
    "EPSILON",
    "GaussianElimination",
    "Inconsistent",
    "Infinite",
    "InvalidShapeError",
    "NumericalInstabilityError",
    "SolutionResult",
    "SolverError",
    "StepLog",
    "Unique",
    "format_number",
    "generate_random_matrix",
    "render_matrix",
    "solve_augmented_matrix",
    "variable_name",
]
