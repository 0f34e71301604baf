"""
Graph analytics pipeline package.
"""

from .nodes import create_pipeline

__all__ = ["create_pipeline"]
