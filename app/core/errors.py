"""Typed application errors. Each carries the HTTP status it is rendered with.

Controllers and dependencies raise these; a single set of handlers in
app.api.error_handlers turns them into the response envelope.
"""


class AppError(Exception):
    """Base class for errors rendered as {success: false, error: message}."""

    status_code = 500
    headers: dict[str, str] | None = None

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Missing or malformed required input."""

    status_code = 400


class AuthenticationError(AppError):
    """Missing, invalid or expired credential, or a credential for an unknown user."""

    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(AppError):
    """Valid credential, but the caller does not own the resource."""

    status_code = 401


class NotFoundError(AppError):
    """Identifier does not resolve to a stored entity."""

    status_code = 404


class ConflictError(AppError):
    """Duplicate value for a unique field (e.g. email)."""

    status_code = 400


class StoreError(AppError):
    """Backing-store failure; the message shown to clients is always generic."""

    status_code = 500

    def __init__(self, message: str = "Database error", cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(message)
