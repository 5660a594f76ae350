"""Architecture Decision Record lifecycle package."""

__all__ = []
