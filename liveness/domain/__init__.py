"""
Domain Layer Package

Verdicts, run outcomes, the probe port and the orchestration engine.
Nothing here depends on drivers, frameworks or configuration loading.
"""

from liveness.domain import entities, ports, services

__all__ = ["entities", "ports", "services"]
