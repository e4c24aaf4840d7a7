"""
Posts Module - Black Box Interface

Purpose: Store posts in process memory
Interface: list(), get(), create(), replace(), delete()
Hidden: Storage layout, id allocation, locking

Replaceable with any post backend (database, document store).
"""

from .repository import SEED_POSTS, Post, PostRepository

__all__ = ["Post", "PostRepository", "SEED_POSTS"]
