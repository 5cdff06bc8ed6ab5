"""
Durable local storage for journal documents.
"""
from .local_storage import LocalStorage

__all__ = ["LocalStorage"]
