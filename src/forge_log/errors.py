"""Exceptions raised by services and mapped to HTTP responses by the web app."""


class ForgeLogError(Exception):
    """Base class for expected, user-facing failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ForgeLogError):
    """A record addressed by id or key does not exist."""

    status_code = 404

    def __init__(self, label: str):
        super().__init__(f"{label} not found")
        self.label = label


class BadRequestError(ForgeLogError):
    """Request content that passed schema validation but cannot be processed."""


class ConflictError(ForgeLogError):
    """A write would duplicate a value that must be unique."""

    status_code = 409
