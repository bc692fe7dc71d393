"""Error taxonomy shared by the repositories and the API layer."""


class GymFlowError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(GymFlowError):
    """Missing or malformed input."""

    status_code = 400
    default_message = "Invalid request"


class AuthError(GymFlowError):
    """Bad credentials or token."""

    status_code = 401
    default_message = "Invalid credentials"


class NotFoundError(GymFlowError):
    """Referenced entity does not exist."""

    status_code = 404
    default_message = "Not found"


class ConflictError(GymFlowError):
    """Resource already exists."""

    status_code = 409
    default_message = "Already exists"


class InternalError(GymFlowError):
    """Store or infrastructure failure."""
