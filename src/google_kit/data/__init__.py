"""Authenticated data facades (Picasa albums and photos, Google+ comments)."""

from .base import Data

__all__ = ["Data"]
