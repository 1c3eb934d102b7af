"""Shared helpers: exceptions and per-user paths."""

from .errors import (
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

__all__ = [
    "EntryDeletedError",
    "EtagMismatchError",
    "FileAccessError",
    "GeocodeError",
    "GoogleError",
    "MissingKeyError",
    "TransportError",
    "UnexpectedDataError",
    "UnsupportedFileError",
]
