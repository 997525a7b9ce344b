"""
Test doubles for external collaborators.

Exports:
- FakeEntryCollection: in-memory stand-in for the pymongo entries collection
- StepClock: deterministic server clock for the fake collection
- FakeIdentityProvider: credential -> Principal table
"""
from .fake_collection import FakeEntryCollection, StepClock
from .fake_identity_provider import FakeIdentityProvider

__all__ = ["FakeEntryCollection", "StepClock", "FakeIdentityProvider"]
