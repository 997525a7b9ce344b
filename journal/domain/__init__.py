"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: Entry, Principal and the explicit AuthSession
- Policy: the authoritative access rules for stored entries
- Repository Interfaces: Abstract contracts for data access
"""
