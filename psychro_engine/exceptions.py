"""
Error taxonomy for the psychro engine.

Argument, direction and limit errors subclass ValueError so callers (and the
API layer) can treat them as bad input. Convergence failures are runtime
errors: the input looked valid but the numerics could not produce a root.
"""


class InvalidArgumentError(ValueError):
    """Input is missing, non-finite, or outside its declared range."""


class ProcessDirectionError(InvalidArgumentError):
    """Requested target implies the opposite process (e.g. heating that cools)."""


class ProcessLimitError(InvalidArgumentError):
    """Requested power or target exceeds the physical limit for the flow."""


class ConvergenceError(RuntimeError):
    """Root finder bracket has no sign change, or the iteration budget ran out."""
