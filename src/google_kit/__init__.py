"""Object-oriented facades over Google web APIs.

This package wraps the Picasa Web Albums API, Google+ comments and
Google Maps embedding. Authentication is handled by an ``Auth``
collaborator; requests go through the requests library.
"""

from .auth import Auth, OAuth2Auth
from .core.errors import (
    EntryDeletedError,
    EtagMismatchError,
    FileAccessError,
    GeocodeError,
    GoogleError,
    MissingKeyError,
    TransportError,
    UnexpectedDataError,
    UnsupportedFileError,
)
from .core.paths import app_version
from .data.picasa import Album, Photo, Picasa
from .data.plus import Comments
from .embed import Maps
from .google import Google

__version__ = app_version()

__all__ = [
    "Album",
    "Auth",
    "Comments",
    "EntryDeletedError",
    "EtagMismatchError",
    "FileAccessError",
    "GeocodeError",
    "Google",
    "GoogleError",
    "Maps",
    "MissingKeyError",
    "OAuth2Auth",
    "Photo",
    "Picasa",
    "TransportError",
    "UnexpectedDataError",
    "UnsupportedFileError",
]
