"""
API v1 Package
===============

Version 1 API controllers.
"""
from .auth_controller import router as auth_router
from .entry_controller import router as entry_router

__all__ = ["auth_router", "entry_router"]
