# =============================================================================
# Payload API - Services Package
# =============================================================================
"""Service layer for external integrations."""

from .database import Database, get_database, get_session

__all__ = ["Database", "get_database", "get_session"]
