"""
Jobdesk API.

A service for managing customers, jobs, per-job question forms and the
workers staffed on each job.
"""

__version__ = "0.1.0"
__description__ = "Job management service"

from .api import create_app
from .config import settings

__all__ = [
    "create_app",
    "settings",
]
