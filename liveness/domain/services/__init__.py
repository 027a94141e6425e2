"""Domain services package."""

from .orchestrator import HealthOrchestrator, VerdictCollector

__all__ = ["HealthOrchestrator", "VerdictCollector"]
