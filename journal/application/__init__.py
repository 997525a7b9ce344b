"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create entry, list entries, delete entry)
- Services: Application services that coordinate use cases and auth
- State: Client-side view state for the entry list and composer
"""
