"""
Liveness Aggregator Root Module

This module serves as the root for the source code of the service.

Layer Structure:
- Domain: Verdicts, run outcomes, probe port and the orchestration engine
- Application: Use cases and DTOs for health reports
- Infrastructure: Probe implementations for the checked dependencies
- Presentation: Controllers exposing the health endpoints
- Shared: Cross-cutting concerns (logging, timing, environment)
- Main: Composition root, application entry point and configuration
"""
