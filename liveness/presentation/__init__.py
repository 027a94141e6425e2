"""
Presentation Layer Package

HTTP-facing components: routers and the response shapes they emit.
"""

from liveness.presentation import controllers

__all__ = ["controllers"]
