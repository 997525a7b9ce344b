"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- Controllers: FastAPI route handlers for auth and entries
- Dependencies: Session resolution and service lookup from the DI container
"""
