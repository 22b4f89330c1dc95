"""Remote listing backends used by the reconciler."""

from markscrub.remote.base import RemoteLister
from markscrub.remote.drive import AUTH_HINT, GoogleDriveLister

__all__ = ["AUTH_HINT", "GoogleDriveLister", "RemoteLister"]
