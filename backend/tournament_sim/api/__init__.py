"""
API module.
"""

from .routes import simulations_router

__all__ = [
    "simulations_router",
]
