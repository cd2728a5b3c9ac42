"""
Dependency injection for the API.

The store handle and configuration live on ``app.state``; the application
factory owns their lifecycle. Routes receive them through these
dependencies.
"""

from fastapi import Depends, Request

from flickfinder.config import Config
from flickfinder.database import DatabaseManager
from flickfinder.service import CatalogService


def get_config(request: Request) -> Config:
    """Get the configuration the app was created with."""
    return request.app.state.config


def get_db(request: Request) -> DatabaseManager:
    """Get the shared DatabaseManager."""
    return request.app.state.db


def get_service(
    db: DatabaseManager = Depends(get_db),
    config: Config = Depends(get_config),
) -> CatalogService:
    """Get a CatalogService bound to the shared store handle."""
    return CatalogService(db, config)
