"""
Storage module initialization.
"""

from .baseline import BaselineDocument, BaselineRecord, BaselineStore

__all__ = [
    "BaselineDocument",
    "BaselineRecord",
    "BaselineStore",
]
