"""
FlickFinder REST API.

This module provides a FastAPI-based read-only REST API over the
movie catalog. Run it with ``python -m flickfinder serve`` or
``uvicorn --factory api.main:create_app``.
"""

from api.main import create_app

__all__ = ["create_app"]
