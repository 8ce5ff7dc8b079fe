"""
GaussSolver — Interactive console front-end.

Walks the user through choosing how to build the augmented matrix, reads
or generates it, then prints the matrix, the elimination transcript and a
solution summary.
"""

import logging

from cli.prompts import read_int_in_range, read_number
from cli.settings import DEFAULT_SETTINGS
from solver.elimination import SolverError
from solver.engine import solve_augmented_matrix
from solver.formatting import render_matrix, render_solution_summary, variable_name
from solver.generator import generate_random_matrix

logger = logging.getLogger(__name__)

MANUAL_ENTRY = 1
RANDOM_GENERATION = 2


class LinearSystemCLI:
    """Prompt sequence: menu → sizes → entries → solve and report.

    *input_func* and *output_func* default to ``input`` and ``print``;
    tests pass scripted replacements.  *rng* is forwarded to the random
    generator (a seed or ``numpy.random.Generator``); when omitted, the
    ``seed`` setting is used.
    """

    def __init__(self, settings: dict = None, input_func=input,
                 output_func=print, rng=None):
        self.settings = dict(DEFAULT_SETTINGS)
        if settings:
            self.settings.update(settings)
        self._input = input_func
        self._output = output_func
        self._rng = rng if rng is not None else self.settings["seed"]

    # ── Prompt helpers ──────────────────────────────────────────────────

    def _read_int(self, prompt: str, min_value: int, max_value: int) -> int:
        return read_int_in_range(prompt, min_value, max_value,
                                 input_func=self._input, output_func=self._output)

    def _read_number(self, prompt: str) -> float:
        return read_number(prompt, self.settings["max_magnitude"],
                           input_func=self._input, output_func=self._output)

    # ── Steps of the session ────────────────────────────────────────────

    def choose_generation_method(self) -> int:
        self._output("\nChoose matrix generation method:")
        self._output("1. Enter matrix manually")
        self._output("2. Generate basic random matrix")
        return self._read_int("Enter your choice (1-2): ", MANUAL_ENTRY, RANDOM_GENERATION)

    def read_dimensions(self) -> tuple[int, int]:
        max_eq = self.settings["max_equations"]
        max_var = self.settings["max_variables"]
        num_equations = self._read_int(
            f"Enter the number of equations (1-{max_eq}): ", 1, max_eq)
        num_variables = self._read_int(
            f"Enter the number of variables (1-{max_var}): ", 1, max_var)
        return num_equations, num_variables

    def input_matrix_manually(self, num_equations: int, num_variables: int) -> list:
        self._output("\nEnter the coefficients of the augmented matrix:")
        self._output("Format: [coefficients... | constant]")
        self._output("You can use decimals (e.g., 2.5) or fractions (e.g., 3/4).")

        matrix = []
        for i in range(num_equations):
            self._output(f"\n--- Equation {i + 1} ---")
            row = [
                self._read_number(f"Coefficient for {variable_name(j)}: ")
                for j in range(num_variables)
            ]
            row.append(self._read_number("Constant term: "))
            matrix.append(row)
        logger.debug("Read %dx%d matrix from the console", num_equations, num_variables + 1)
        return matrix

    def generate_matrix(self, num_equations: int, num_variables: int) -> list:
        low, high = self.settings["random_min"], self.settings["random_max"]
        self._output(
            f"\nGenerating basic random matrix with coefficients between "
            f"{low} and {high}...")
        self._output("Warning: This may not have a unique solution!")
        matrix = generate_random_matrix(num_equations, num_variables,
                                        rng=self._rng, low=low, high=high)
        self._output("Basic random matrix generated successfully!")
        return matrix

    def solve_and_report(self, matrix: list):
        """Print the system, the transcript and the summary; return the result."""
        rows, cols = len(matrix), len(matrix[0])
        self._output("\n=== System of Equations ===")
        self._output("")
        self._output(render_matrix(matrix, rows, cols))
        self._output("")

        report = solve_augmented_matrix(matrix)
        result = report["result"]
        logger.debug("Solved in %s ms (%s steps)", report["summary"]["runtime_ms"],
                     report["summary"]["total_steps"])

        self._output("\n=== Solution Process ===")
        self._output(report["transcript"])
        self._output(render_solution_summary(result))
        return result

    def run(self):
        self._output("=== Linear System Solver ===")
        self._output(
            "This program solves systems of linear equations using Gaussian Elimination.")

        choice = self.choose_generation_method()
        num_equations, num_variables = self.read_dimensions()

        if choice == MANUAL_ENTRY:
            matrix = self.input_matrix_manually(num_equations, num_variables)
        else:
            matrix = self.generate_matrix(num_equations, num_variables)

        return self.solve_and_report(matrix)

    @staticmethod
    def _friendly_error(exc: Exception) -> str:
        msg = str(exc)
        if isinstance(exc, SolverError):
            return f"The solver could not finish this system.\n\nDetails: {msg}"
        return (
            "GaussSolver ran into an unexpected problem.\n\n"
            f"Details: {msg}"
        )
