"""
News Module - Black Box Interface

Purpose: Serve the static news feed
Interface: list(), get()
Hidden: Seed content

Read-only; items are fixed at construction time.
"""

from .catalog import SEED_NEWS, NewsCatalog, NewsItem

__all__ = ["NewsCatalog", "NewsItem", "SEED_NEWS"]
