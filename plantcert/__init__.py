"""
plantcert - Plant Equipment Certification Registry

Tracks the certification lifecycle of regulated plant equipment:
plants and equipment are registered, organizational roles submit
supporting documents, document visibility is enforced per role, and
equipment moves through a guarded certification workflow that ends
with a verifiable integrity hash.

Core guarantees:
- Every mutation is authorized by role and lifecycle state first
- Only the gateway principal writes registry records
- Equipment ownership is soulbound and never changes
- Every successful mutation emits exactly one audit event
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
