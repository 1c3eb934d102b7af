"""Embeddable Google widgets."""

from .base import Embed
from .maps import Maps

__all__ = ["Embed", "Maps"]
