class DatabaseError(Exception):
    """Base for all database errors."""


class NotFoundError(DatabaseError):
    """Document not found."""


class DuplicateError(DatabaseError):
    """Unique index violation."""
