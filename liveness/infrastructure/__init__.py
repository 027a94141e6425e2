"""
Infrastructure Layer Package

Concrete probes for the dependencies the service watches, built on the
official drivers (pymongo, redis-py).
"""

from liveness.infrastructure import probes

__all__ = ["probes"]
