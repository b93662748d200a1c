"""
NSS API package.

Provides the FastAPI application for the NSS users, messages and guards service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
