"""Picasa Web Albums integration.

Albums and photos are Atom entries edited locally and written back with
etag-conditional requests.
"""

from .album import Album
from .photo import Photo
from .service import Picasa

__all__ = ["Album", "Photo", "Picasa"]
