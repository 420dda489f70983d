"""
Custom exceptions for the partner directory.
"""


class DirectoryError(Exception):
    """Base exception for directory errors."""
    pass


class DirectoryEntryNotFoundError(DirectoryError):
    """Raised when a caterer or delivery person uid is unknown."""

    def __init__(self, kind, uid, message=None):
        self.kind = kind
        self.uid = uid
        if message is None:
            message = f"{kind} {uid} not found."
        super().__init__(message)
