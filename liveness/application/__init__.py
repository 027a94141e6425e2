"""
Application Layer Package

Use cases that run the health orchestration and the DTOs that carry
their results to the presentation layer.
"""

from liveness.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
