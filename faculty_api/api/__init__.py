"""API endpoints package."""

from faculty_api.api.router import create_api_router

__all__ = ["create_api_router"]
