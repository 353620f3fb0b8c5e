"""
Application layer - use cases and orchestration for the certification registry.

This layer contains:
- Port definitions (event sink, time authority)
- Application services (role directory, registry, lifecycle, access, integrity)

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: api
"""
