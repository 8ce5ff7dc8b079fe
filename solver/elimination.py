"""Gaussian elimination with partial pivoting on an augmented matrix.

The engine takes an augmented coefficient matrix (the constants live in the
last column), reduces it to row echelon form, classifies the system as
having a unique solution, no solution or infinitely many solutions, and
back-substitutes when the solution is unique.  Every row operation is
recorded in a step log so the whole reduction can be shown to a student.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from solver import formatting
from solver.formatting import EPSILON

logger = logging.getLogger(__name__)


# ── Errors ──────────────────────────────────────────────────────────────

class SolverError(ValueError):
    """Base class for errors raised by the elimination engine."""


class InvalidShapeError(SolverError):
    """The augmented matrix is empty, ragged or has no coefficient column."""


class NumericalInstabilityError(SolverError, ArithmeticError):
    """Back substitution reached a pivot that is effectively zero."""


# ── Results ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Unique:
    """The system has exactly one solution."""
    values: tuple = ()
    kind = "unique"


@dataclass(frozen=True)
class Infinite:
    """The system is dependent / underdetermined."""
    kind = "infinite"


@dataclass(frozen=True)
class Inconsistent:
    """The system reduces to ``0 = c`` with ``c != 0``."""
    kind = "inconsistent"


SolutionResult = Unique | Infinite | Inconsistent


# ── Step log ────────────────────────────────────────────────────────────

class StepLog:
    """Append-only list of step records.

    Each record is a dict with ``phase``, ``description``, ``expression``
    and ``explanation`` keys.  Once frozen, appending raises RuntimeError.
    """

    def __init__(self):
        self._records = []
        self._frozen = False

    def record(self, phase: str, description: str,
               expression: str = "", explanation: str = "") -> None:
        if self._frozen:
            raise RuntimeError("Step log is closed; no more steps can be added.")
        self._records.append({
            "phase": phase,
            "description": description,
            "expression": expression,
            "explanation": explanation,
        })

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def entries(self) -> tuple:
        return tuple(dict(r) for r in self._records)

    def __len__(self) -> int:
        return len(self._records)


# ── Engine ──────────────────────────────────────────────────────────────

def _owned_copy(matrix) -> np.ndarray:
    """Validate the shape of *matrix* and return a float64 deep copy."""
    if isinstance(matrix, np.ndarray):
        if matrix.ndim != 2:
            raise InvalidShapeError(
                f"Augmented matrix must be 2-dimensional, got {matrix.ndim} dimension(s).")
        rows = list(matrix)
    else:
        try:
            rows = [list(row) for row in matrix]
        except TypeError:
            raise InvalidShapeError("Augmented matrix must be a sequence of rows.")

    if not rows:
        raise InvalidShapeError("Augmented matrix must have at least one row.")
    widths = {len(row) for row in rows}
    if len(widths) != 1:
        raise InvalidShapeError(
            f"Every row must have the same length; got lengths {sorted(widths)}.")
    width = widths.pop()
    if width < 2:
        raise InvalidShapeError(
            "Augmented matrix needs at least one coefficient column "
            "and one constant column.")
    return np.array(rows, dtype=np.float64)


class GaussianElimination:
    """Solve one augmented matrix by Gaussian elimination.

    The caller's matrix is copied on construction and never modified.
    ``solve()`` runs once; the step log becomes readable afterwards, also
    when ``solve()`` raised, and a repeat call re-raises the same error.
    Instances are not safe to share between threads.
    """

    def __init__(self, matrix):
        self._matrix = _owned_copy(matrix)
        self.rows, self.cols = self._matrix.shape
        self._log = StepLog()
        self._result: Optional[SolutionResult] = None
        self._error: Optional[SolverError] = None

    @property
    def num_variables(self) -> int:
        return self.cols - 1

    @property
    def matrix(self) -> np.ndarray:
        """A copy of the working matrix in its current state."""
        return self._matrix.copy()

    @property
    def result(self) -> Optional[SolutionResult]:
        return self._result

    @property
    def steps(self) -> tuple:
        if not self._log.frozen:
            raise RuntimeError("Steps are only available after solve() has completed.")
        return self._log.entries()

    @property
    def transcript(self) -> str:
        return formatting.render_transcript(self.steps)

    def _snapshot(self) -> str:
        return formatting.render_matrix(self._matrix, self.rows, self.cols)

    # ── Public entry point ───────────────────────────────────────────

    def solve(self) -> SolutionResult:
        if self._error is not None:
            raise self._error
        if self._result is not None:
            return self._result

        try:
            self._result = self._run()
        except SolverError as exc:
            logger.warning("Solving %dx%d system failed: %s", self.rows, self.cols, exc)
            self._error = exc
            raise
        finally:
            self._log.freeze()
        return self._result

    def _run(self) -> SolutionResult:
        logger.debug("Solving %dx%d augmented matrix", self.rows, self.cols)
        self._log.record(
            "setup", "Initial augmented matrix", self._snapshot(),
            f"{self.rows} equation{'s' if self.rows != 1 else ''} in "
            f"{self.num_variables} unknown{'s' if self.num_variables != 1 else ''}. "
            f"The last column holds the constant terms.",
        )

        self._forward_elimination()
        rank = self._rank()

        # 0 = c takes precedence over a rank deficit
        if self._is_inconsistent():
            result = Inconsistent()
            self._log.record(
                "classification", "The system is inconsistent and has no solution",
                explanation="A row reduced to 0 = c with c not zero, which no "
                            "choice of values can satisfy.",
            )
        elif rank < self.num_variables:
            result = Infinite()
            self._log.record(
                "classification", "The system has infinitely many solutions",
                explanation=(
                    f"Only {rank} independent equation"
                    f"{'s' if rank != 1 else ''} remain for "
                    f"{self.num_variables} unknowns, so at least one variable is free."
                ),
            )
        else:
            result = Unique(self._back_substitution())

        logger.info("Classified %dx%d system as %s", self.rows, self.cols, result.kind)
        return result

    # ── Forward elimination ──────────────────────────────────────────

    def _forward_elimination(self) -> None:
        m = self._matrix
        # pivot row; advances only when a column yields a pivot
        r = 0
        for p in range(self.cols - 1):
            if r >= self.rows:
                break
            max_row = self._find_pivot_row(r, p)

            if abs(m[max_row, p]) < EPSILON:
                logger.debug("Column %d has no usable pivot; skipping", p + 1)
                self._log.record(
                    "forward", f"Skipping column {p + 1} (pivot element is zero)",
                    explanation=(
                        f"Every remaining entry in column {p + 1} is zero, "
                        f"so there is nothing to eliminate here."
                    ),
                )
                continue

            if max_row != r:
                m[[r, max_row]] = m[[max_row, r]]
                logger.debug("Swapped rows %d and %d", r + 1, max_row + 1)
                self._log.record(
                    "forward", f"Swap row {r + 1} with row {max_row + 1}",
                    self._snapshot(),
                    f"Row {max_row + 1} has the largest entry in column "
                    f"{p + 1}; using it as the pivot keeps rounding errors small.",
                )

            for i in range(r + 1, self.rows):
                factor = m[i, p] / m[r, p]
                if abs(factor) < EPSILON:
                    continue

                m[i, p:] -= factor * m[r, p:]
                tail = m[i, p:]
                tail[np.abs(tail) < EPSILON] = 0.0

                logger.debug("R%d -= %r * R%d", i + 1, factor, r + 1)
                self._log.record(
                    "forward", f"Eliminate in row {i + 1} using row {r + 1}",
                    formatting.format_row_operation(i, r, factor)
                    + "\n\n" + self._snapshot(),
                    f"Subtract {formatting.format_number(factor)} times row "
                    f"{r + 1} from row {i + 1} to make column {p + 1} "
                    f"zero below the pivot.",
                )
            r += 1

        self._log.record(
            "forward", "Row Echelon Form", self._snapshot(),
            "Forward elimination is finished.",
        )

    def _find_pivot_row(self, start: int, col: int) -> int:
        # argmax returns the first of equal maxima
        return start + int(np.argmax(np.abs(self._matrix[start:, col])))

    # ── Classification ───────────────────────────────────────────────

    def _coefficient_rows_nonzero(self) -> np.ndarray:
        coeffs = self._matrix[:, :-1]
        return np.any(np.abs(coeffs) >= EPSILON, axis=1)

    def _is_inconsistent(self) -> bool:
        constants_nonzero = np.abs(self._matrix[:, -1]) >= EPSILON
        return bool(np.any(~self._coefficient_rows_nonzero() & constants_nonzero))

    def _rank(self) -> int:
        return int(np.count_nonzero(self._coefficient_rows_nonzero()))

    # ── Back substitution ────────────────────────────────────────────

    def _back_substitution(self) -> tuple:
        m = self._matrix
        n = self.num_variables
        solution = np.zeros(n, dtype=np.float64)

        for i in range(min(self.rows, n) - 1, -1, -1):
            coefficient = m[i, i]
            if abs(coefficient) < EPSILON:
                raise NumericalInstabilityError(
                    f"Pivot for {formatting.variable_name(i)} in row {i + 1} is "
                    f"effectively zero ({coefficient!r}); cannot back-substitute.")

            total = float(np.dot(m[i, i + 1:n], solution[i + 1:n]))
            constant = m[i, n]
            solution[i] = (constant - total) / coefficient

            self._log.record(
                "back_substitution", f"Solve for {formatting.variable_name(i)}",
                formatting.format_substitution(i, constant, total, coefficient, solution[i]),
                f"Move the known terms of row {i + 1} to the right-hand side "
                f"and divide by the pivot.",
            )

        values = tuple(float(v) for v in solution)
        self._log.record(
            "back_substitution", "Final Solution",
            formatting.render_final_answer(Unique(values)),
        )
        return values
