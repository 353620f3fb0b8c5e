"""
Infrastructure layer - adapters for the certification registry.

This layer contains:
- Adapters (system clock, structlog audit sink)
- In-memory stubs for tests and local development
- Observability (structlog configuration, correlation ids)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
