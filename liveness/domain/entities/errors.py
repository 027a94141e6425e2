"""
Domain Errors

Errors raised while assembling probes. Probe checks themselves never
raise: every failure becomes an unhealth Verdict.
"""

from typing import Any, Dict, Iterable, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnknownProbeError(DomainError):
    """Raised when a configured target has no registered probe."""

    def __init__(self, name: str, known: Iterable[str] = ()):
        known_names = sorted(known)
        message = f"Unknown health target '{name}'"
        if known_names:
            message = f"{message} (known: {', '.join(known_names)})"
        super().__init__(message, {"name": name, "known": known_names})


class DuplicateProbeError(DomainError):
    """Raised when a probe name is registered or targeted twice."""

    def __init__(self, name: str):
        super().__init__(f"Health target '{name}' declared more than once", {"name": name})
