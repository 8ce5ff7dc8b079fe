"""Text rendering for the elimination transcript.

Pure functions only: number formatting, variable names, matrix snapshots
and the solution summary.  The elimination engine decides *when* a step is
recorded; this module decides how it reads.
"""

import math

# Tolerance for "effectively zero" / "effectively an integer".
EPSILON = 1e-10

# Display names used instead of X1, X2, ...
VARIABLE_NAMES = ("X", "Y", "Z", "A", "B", "C", "D", "E", "F", "G")

CELL_WIDTH = 10

_PHASE_HEADINGS = {
    "setup": "Starting Gaussian Elimination",
    "forward": "Forward Elimination",
    "back_substitution": "Back Substitution",
}


def variable_name(index: int) -> str:
    """Return the display name for the variable in column *index*."""
    if index < 0:
        raise ValueError(f"Variable index must be non-negative, got {index}.")
    if index < len(VARIABLE_NAMES):
        return VARIABLE_NAMES[index]
    return f"X{index + 1}"


def format_number(value: float) -> str:
    """Format a float with at most two decimals.

    - Values within EPSILON of an integer print without a decimal point
      (``3.0`` → ``3``, ``-1e-11`` → ``0``).
    - Otherwise rounds to two decimals and strips trailing zeros
      (``1.50`` → ``1.5``).
    - Always uses ``.`` as the decimal separator.
    """
    value = float(value)
    if not math.isfinite(value):
        return str(value)
    nearest = round(value)
    if abs(value - nearest) < EPSILON:
        return str(int(nearest))
    formatted = f"{value:.2f}".rstrip("0").rstrip(".")
    if formatted == "-0":
        return "0"
    return formatted


def render_matrix(matrix, rows: int = None, cols: int = None) -> str:
    """Render an augmented matrix as aligned text.

    Each row is bracketed, every cell is right-aligned to CELL_WIDTH and a
    ``|`` separates the constant column from the coefficients.
    """
    if rows is None:
        rows = len(matrix)
    if cols is None:
        cols = len(matrix[0]) if rows else 0

    lines = []
    for i in range(rows):
        line = "[ "
        for j in range(cols):
            if j == cols - 1:
                line += "  | "
            line += f"{format_number(matrix[i][j]):>{CELL_WIDTH}}"
            if j < cols - 1:
                line += "  "
        lines.append(line + " ]")
    return "\n".join(lines)


def format_row_operation(row: int, pivot_row: int, factor: float) -> str:
    """``R3 = R3 - 1.5 * R1`` for zero-based row indices."""
    return f"R{row + 1} = R{row + 1} - {format_number(factor)} * R{pivot_row + 1}"


def format_substitution(index: int, constant: float, total: float,
                        coefficient: float, result: float) -> str:
    """``Y = (6 - 0) / 3 = 2``"""
    return (
        f"{variable_name(index)} = ({format_number(constant)} - "
        f"{format_number(total)}) / {format_number(coefficient)} = "
        f"{format_number(result)}"
    )


def render_final_answer(result) -> str:
    if result.kind == "unique":
        return "\n".join(
            f"{variable_name(i)} = {format_number(v)}"
            for i, v in enumerate(result.values)
        )
    if result.kind == "infinite":
        return "Infinitely many solutions"
    return "No solution"


def render_solution_summary(result) -> str:
    """The closing block printed after the transcript."""
    lines = ["=== Solution Summary ==="]
    if result.kind == "unique":
        lines.append("The system has a unique solution:")
        lines.append(render_final_answer(result))
    elif result.kind == "infinite":
        lines.append("The system has infinitely many solutions.")
    else:
        lines.append("The system is inconsistent and has no solution.")
    return "\n".join(lines)


def render_transcript(steps) -> str:
    """Join step records into the printable elimination transcript."""
    blocks = []
    phase = None
    for step in steps:
        if step["phase"] != phase:
            phase = step["phase"]
            heading = _PHASE_HEADINGS.get(phase)
            if heading:
                blocks.append(f"{heading}\n{'-' * len(heading)}")
        if step["expression"]:
            blocks.append(f"{step['description']}:\n{step['expression']}")
        else:
            blocks.append(f"{step['description']}.")
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
