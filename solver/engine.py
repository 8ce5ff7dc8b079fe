""" Step-by-step linear system solver using Gaussian elimination."""

"""
Takes an augmented matrix such as ``[[1, 1, 3], [2, -1, 0]]``
(x + y = 3, 2x - y = 0), reduces it with partial pivoting and produces a
result dict with numbered steps, the final answer and a verification of
the answer against every original equation.
"""

import time
from datetime import datetime

import numpy as np

from solver.elimination import GaussianElimination
from solver.formatting import (
    format_number,
    render_final_answer,
    render_matrix,
    variable_name,
)

# Residual allowed when checking a solution against the original equations.
_VERIFY_TOLERANCE = 1e-9


def _format_equation(row) -> str:
    """Render one augmented row as ``2X - Y + 0.5Z = 4``."""
    terms = []
    for j, coeff in enumerate(row[:-1]):
        if coeff == 0:
            continue
        name = variable_name(j)
        magnitude = format_number(abs(coeff))
        term = name if magnitude == "1" else f"{magnitude}{name}"
        if not terms:
            terms.append(f"-{term}" if coeff < 0 else term)
        else:
            terms.append(f"- {term}" if coeff < 0 else f"+ {term}")
    lhs = " ".join(terms) if terms else "0"
    return f"{lhs} = {format_number(row[-1])}"


def _build_verification(original: np.ndarray, values: tuple) -> tuple:
    """Substitute *values* into every row of *original*.

    Returns ``(verification_steps, all_ok)``.
    """
    x = np.array(values, dtype=np.float64)
    verification_steps = [{
        "description": "Substitute into every equation",
        "expression": ", ".join(
            f"{variable_name(j)} = {format_number(v)}" for j, v in enumerate(values)
        ),
        "explanation": "Plug the solution back into each original equation.",
    }]

    all_ok = True
    for i, row in enumerate(original):
        lhs_val = float(np.dot(row[:-1], x))
        rhs_val = float(row[-1])
        ok = abs(lhs_val - rhs_val) <= _VERIFY_TOLERANCE * max(1.0, abs(rhs_val))
        all_ok = all_ok and ok
        verification_steps.append({
            "description": f"Equation ({i + 1}): {_format_equation(row)}",
            "expression": (
                f"LHS = {format_number(lhs_val)},  "
                f"RHS = {format_number(rhs_val)}"
                f"  →  {'✓' if ok else '✗'}"
            ),
            "explanation": (
                f"Both sides ≈ {format_number(lhs_val)}."
                if ok else "Sides differ; the elimination lost precision."
            ),
        })

    verification_steps.append({
        "description": "All equations verified" if all_ok else "Verification failed",
        "expression": (
            "All equations satisfied  ✓" if all_ok
            else "At least one equation is not satisfied  ✗"
        ),
        "explanation": (
            "The solution is correct." if all_ok
            else "The system may be ill-conditioned; treat the answer with care."
        ),
    })
    return verification_steps, all_ok


def solve_augmented_matrix(matrix) -> dict:
    """
    Solve the linear system described by an augmented matrix.

    Returns a result dict with the keys ``matrix``, ``given``, ``method``,
    ``result``, ``steps``, ``transcript``, ``final_answer``,
    ``verification_steps`` and ``summary``.

    Raises ``InvalidShapeError`` for an empty or ragged matrix.
    """
    t_start = time.perf_counter()

    solver = GaussianElimination(matrix)
    original = solver.matrix
    n_eq, n_var = solver.rows, solver.num_variables
    result = solver.solve()

    steps = [dict(s) for s in solver.steps]
    for i, s in enumerate(steps, 1):
        s["step_number"] = i

    verification_steps = []
    validation_status = "pass"
    if result.kind == "unique":
        verification_steps, ok = _build_verification(original, result.values)
        if not ok:
            validation_status = "fail"
    for i, s in enumerate(verification_steps, 1):
        s["step_number"] = i

    var_names = ", ".join(variable_name(j) for j in range(n_var))
    t_end = time.perf_counter()
    runtime_ms = round((t_end - t_start) * 1000, 2)

    return {
        "matrix": render_matrix(original),
        "given": {
            "problem": "Solve the system of linear equations",
            "inputs": {
                "equations": [_format_equation(row) for row in original],
                "number_of_equations": str(n_eq),
                "variables": var_names,
                "number_of_variables": str(n_var),
            },
        },
        "method": {
            "name": "Gaussian Elimination (partial pivoting)",
            "description": (
                "Reduce the augmented matrix to row echelon form, classify "
                "the system, then back-substitute."
            ),
            "parameters": {
                "equation_type": (
                    f"System of {n_eq} linear equation"
                    f"{'s' if n_eq != 1 else ''}"
                ),
                "variables": var_names,
                "approach": "Pivot → Eliminate → Classify → Back-substitute",
            },
        },
        "result": result,
        "steps": steps,
        "transcript": solver.transcript,
        "final_answer": render_final_answer(result),
        "verification_steps": verification_steps,
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps),
            "verification_steps": len(verification_steps),
            "validation_status": validation_status,
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": f"NumPy {np.__version__}",
        },
    }


if __name__ == "__main__":
    test_systems = [
        [[1, 1, 3], [2, -1, 0]],
        [[0, 1, 2], [1, 1, 3]],
        [[1, 1, 1], [1, 1, 2]],
        [[1, 1, 3], [2, 2, 6]],
    ]
    for system in test_systems:
        print(f"\n{'=' * 50}")
        res = solve_augmented_matrix(system)
        print(res["matrix"])
        print('=' * 50)
        print(res["transcript"])
        print(f"  => {res['final_answer']}")
