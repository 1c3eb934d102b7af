"""Authentication collaborators for the Google facades."""

from .base import Auth
from .oauth2 import OAuth2Auth

__all__ = ["Auth", "OAuth2Auth"]
