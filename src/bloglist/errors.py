"""Error taxonomy shared by services, auth, and the HTTP boundary.

Learn: Components raise these where they detect the problem; the
handlers in bloglist.api.errors translate them into HTTP responses
with a generic {"error": message} payload. The message is always safe
to show to a client. Internal details go to the log, never the body.
"""


class AppError(Exception):
    """Base for errors that map onto an HTTP status."""

    status_code: int = 500
    message: str = "internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Bad input shape or length."""

    status_code = 400
    message = "invalid input"


class ConflictError(AppError):
    """Uniqueness violation, e.g. a duplicate username."""

    status_code = 400
    message = "resource already exists"


class AuthenticationError(AppError):
    """Missing, invalid or expired token, or bad credentials."""

    status_code = 401
    message = "token missing or invalid"


class AuthorizationError(AppError):
    """Valid identity without rights to the resource."""

    status_code = 401
    message = "unauthorized"


class NotFoundError(AppError):
    status_code = 404
    message = "not found"


class FatalConfigError(Exception):
    """Configuration the service cannot start with (e.g. no signing secret)."""
