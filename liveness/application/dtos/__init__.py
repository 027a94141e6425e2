"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .healthcheck_dto import HealthcheckReport, VerdictDTO

__all__ = ["HealthcheckReport", "VerdictDTO"]
