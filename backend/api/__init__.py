"""
API Package
===========

REST API endpoints for the listing parser.
"""

from .routes import register_routes

__all__ = ['register_routes']
