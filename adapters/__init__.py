"""
Adapters package - External service connections.
Database adapter for MongoDB.
"""

from adapters import mongo_adapter

__all__ = [
    "mongo_adapter",
]
