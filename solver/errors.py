# Solver error taxonomy


class SolverError(Exception):
    """Base class for all errors raised by the guess generator."""


class InvalidConfiguration(SolverError, ValueError):
    """Raised when a solver is built with an unusable alphabet or length."""


class InvalidFeedback(SolverError, ValueError):
    """Raised when feedback cannot belong to a combination of the given length."""


class ExhaustedCandidateSpace(SolverError, RuntimeError):
    """Raised when no candidate is left, i.e. the feedback history contradicts itself."""
