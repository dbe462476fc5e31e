"""Exceptions for database export import."""


class SourceError(Exception):
    """Base exception for all import errors."""


class UnknownDatabaseError(SourceError):
    """Column headers match no supported database export."""


class UnsupportedFileError(SourceError):
    """File extension is not a readable export format."""
