#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from typing import Generator
from sqlalchemy.orm import Session

from core.config_loader import AppConfig
from database import database
from .config import get_config


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    The engine is bound to the configured database URL on first use.

    Yields:
        Session: Database session that will be automatically closed.
    """
    database.configure_database(get_config().database.url)
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


def get_app_config() -> AppConfig:
    """FastAPI dependency returning the application config."""
    return get_config()
