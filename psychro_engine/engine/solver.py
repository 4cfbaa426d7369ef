"""
Bounded scalar root finder.

Thin wrapper over scipy's Brent implementation (inverse quadratic
interpolation, secant steps and bisection fallback). scipy already
guarantees convergence for a valid bracket; this wrapper adds the contract
the engine relies on:

  - the counterpart points must bracket a sign change, otherwise a
    ConvergenceError is raised before any iteration runs
  - a non-finite residual anywhere aborts the solve
  - running out of iterations is an error, never a silently returned value

Use a new BrentSolver (or find_root) for every logical solve. An instance
only remembers the statistics of its own last run.
"""

import logging
import math
from typing import Callable

from scipy.optimize import brentq

from psychro_engine.config import SOLVER_ACCURACY, SOLVER_MAX_ITERATIONS
from psychro_engine.exceptions import ConvergenceError

logger = logging.getLogger(__name__)


class BrentSolver:
    """Brent root finder for f(x) = 0 on [point_a, point_b]."""

    def __init__(
        self,
        name: str = "BrentSolver",
        accuracy: float = SOLVER_ACCURACY,
        max_iterations: int = SOLVER_MAX_ITERATIONS,
    ) -> None:
        if not accuracy > 0:
            raise ValueError(f"{name}: accuracy must be positive, got {accuracy}")
        if max_iterations < 1:
            raise ValueError(f"{name}: max_iterations must be >= 1, got {max_iterations}")
        self.name = name
        self.accuracy = accuracy
        self.max_iterations = max_iterations
        self.iterations = 0
        self.function_calls = 0

    def _evaluate(self, func: Callable[[float], float], x: float) -> float:
        self.function_calls += 1
        value = func(x)
        if not math.isfinite(value):
            raise ConvergenceError(
                f"{self.name}: non-finite residual f({x!r}) = {value!r}"
            )
        return value

    def solve(self, func: Callable[[float], float], point_a: float, point_b: float) -> float:
        """
        Find the root of func between the two counterpart points.

        The points may be given in any order.

        Raises:
            ConvergenceError: if the bracket has no sign change, a residual is
                NaN/inf, or the iteration budget is exhausted
        """
        self.iterations = 0
        self.function_calls = 0

        if not (math.isfinite(point_a) and math.isfinite(point_b)):
            raise ConvergenceError(
                f"{self.name}: counterpart points must be finite, got a={point_a}, b={point_b}"
            )
        a, b = sorted((point_a, point_b))

        f_a = self._evaluate(func, a)
        if f_a == 0.0:
            return a
        f_b = self._evaluate(func, b)
        if f_b == 0.0:
            return b

        if f_a * f_b > 0:
            raise ConvergenceError(
                f"{self.name}: f(a) and f(b) must have opposite signs. "
                f"a = {a:.6g}, b = {b:.6g}, f(a) = {f_a:.6g}, f(b) = {f_b:.6g}"
            )

        logger.debug("%s: solving on [%.6g, %.6g]", self.name, a, b)

        root, info = brentq(
            lambda x: self._evaluate(func, x),
            a,
            b,
            xtol=self.accuracy,
            maxiter=self.max_iterations,
            full_output=True,
            disp=False,
        )
        self.iterations = info.iterations

        if not info.converged:
            raise ConvergenceError(
                f"{self.name}: no convergence after {info.iterations} iterations "
                f"({info.flag}). Last estimate: {root!r}"
            )

        logger.debug(
            "%s: root %.10g after %d iterations", self.name, root, info.iterations
        )
        return root


def find_root(
    func: Callable[[float], float],
    point_a: float,
    point_b: float,
    name: str = "BrentSolver",
    accuracy: float = SOLVER_ACCURACY,
    max_iterations: int = SOLVER_MAX_ITERATIONS,
) -> float:
    """Solve func(x) = 0 on [point_a, point_b] with a fresh solver instance."""
    solver = BrentSolver(name=name, accuracy=accuracy, max_iterations=max_iterations)
    return solver.solve(func, point_a, point_b)
