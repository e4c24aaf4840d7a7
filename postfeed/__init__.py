"""
Postfeed - Posts, News and Token Auth API

A small HTTP API serving a single frontend client.

Architecture:
- Each module is self-contained with clear interfaces
- Stores are explicit objects injected into the application
- No module knows the internals of another

Modules:
- auth: Credential store, token store and authentication service
- middleware: Bearer token guard for protected routes
- posts: In-memory post repository
- news: Read-only news catalog
- api: Request/response models and routers
"""

__version__ = "1.0.0"
