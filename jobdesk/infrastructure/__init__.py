"""
Infrastructure package: persistence for the job desk.
"""

from .database import get_database_health

__all__ = ["get_database_health"]
