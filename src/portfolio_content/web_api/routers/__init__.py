"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import content, health

__all__ = ["content", "health"]
