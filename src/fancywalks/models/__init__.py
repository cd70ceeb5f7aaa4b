"""
Data models and schemas.
"""

from .walk import DEFAULT_HOME, HomeLocation, WalkRecord

__all__ = [
    "DEFAULT_HOME",
    "HomeLocation",
    "WalkRecord",
]
