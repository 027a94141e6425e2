"""
Use Cases Package - Application Layer

Use cases orchestrate the domain services on behalf of the presentation
layer and shape their results into DTOs.
"""

from .healthcheck_use_cases import RunHealthcheckUseCase

__all__ = ["RunHealthcheckUseCase"]
