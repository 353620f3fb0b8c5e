"""Test helpers for the certification registry tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    addresses: Well-known participant addresses used across the suite
    workflow: Shortcuts that move equipment through the lifecycle

Usage:
    from tests.helpers import FakeTimeAuthority
    from tests.helpers.workflow import drive_to_certified
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = ["FakeTimeAuthority"]
