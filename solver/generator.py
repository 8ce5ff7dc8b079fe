"""Random augmented matrices for practice problems.

Coefficients are uniform random integers in ``[low, high]`` excluding zero;
constant terms may be zero.  The result may well have no unique solution.
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)

RANDOM_RANGE_MIN = -100
RANDOM_RANGE_MAX = 100


def _as_generator(rng) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def generate_random_matrix(num_equations: int, num_variables: int, rng=None,
                           low: int = RANDOM_RANGE_MIN,
                           high: int = RANDOM_RANGE_MAX) -> list:
    """Return a ``num_equations`` x ``num_variables + 1`` augmented matrix.

    *rng* may be a ``numpy.random.Generator``, an integer seed or None.
    """
    if num_equations < 1 or num_variables < 1:
        raise ValueError("Need at least one equation and one variable.")
    if low > high:
        raise ValueError(f"Empty range: low ({low}) is greater than high ({high}).")
    if low == 0 and high == 0:
        raise ValueError("The range [0, 0] cannot produce nonzero coefficients.")

    gen = _as_generator(rng)
    coefficients = gen.integers(low, high, size=(num_equations, num_variables),
                                endpoint=True)
    # Redraw zeros until every coefficient is nonzero
    zeros = coefficients == 0
    while zeros.any():
        coefficients[zeros] = gen.integers(low, high, size=int(zeros.sum()),
                                           endpoint=True)
        zeros = coefficients == 0

    constants = gen.integers(low, high, size=(num_equations, 1), endpoint=True)
    matrix = np.hstack([coefficients, constants]).astype(np.float64)

    logger.debug("Generated %dx%d random matrix in [%d, %d]",
                 num_equations, num_variables + 1, low, high)
    return matrix.tolist()
