class DomainError(Exception):
    """Base exception for the registration backend."""


class ValidationError(DomainError):
    """Raised when input data is invalid or references an unknown column."""


class NotFoundError(DomainError):
    """Raised when a well-formed request targets a row that does not exist."""


class StorageError(DomainError):
    """Raised when the database fails (connectivity, constraint, statement)."""


class AuthServiceError(DomainError):
    """Raised when login cannot look up the account.

    Covers both a missing account and a storage failure, so callers cannot
    tell "wrong username" apart from "database down".
    """
