# src/stakeguard/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .posts import router as posts_router
from .reports import router as reports_router
from .reputation import router as reputation_router
from .system import router as system_router

__all__ = [
    "posts_router",
    "reports_router",
    "reputation_router",
    "system_router",
]
