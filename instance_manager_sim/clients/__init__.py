"""
Instance manager client implementations
"""

from .base import BaseInstanceManagerClient, PageVisitor

__all__ = [
    "BaseInstanceManagerClient",
    "PageVisitor",
]
