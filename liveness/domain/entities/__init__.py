"""
Domain Entities Package

Value objects describing probe verdicts and orchestration runs.
"""

from .errors import DomainError, DuplicateProbeError, UnknownProbeError
from .run import ParallelStrategy, RunMode, RunOutcome
from .verdict import FailureKind, Verdict, VerdictState

__all__ = [
    "Verdict",
    "VerdictState",
    "FailureKind",
    "RunMode",
    "RunOutcome",
    "ParallelStrategy",
    "DomainError",
    "DuplicateProbeError",
    "UnknownProbeError",
]
