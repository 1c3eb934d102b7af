"""Google+ integration."""

from .comments import Comments

__all__ = ["Comments"]
