"""
Dependencies
============
Shared FastAPI dependencies. Override ``get_client`` in tests.
"""
from portfolio_content.api import default_client
from portfolio_content.client import ContentClient


def get_client() -> ContentClient:
    """The process-wide content client built from settings."""
    return default_client()
