"""
Content Preview API
===================
FastAPI app serving the WordPress content exactly as the site build sees it.

Quick Start:
    uvicorn portfolio_content.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
