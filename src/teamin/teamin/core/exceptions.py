class DomainError(Exception):
    """Base exception for business rule violations."""

    code = "DOMAIN_ERROR"
    http_status = 400
    default_message = "Request could not be processed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "VALIDATION_ERROR"
    default_message = "Invalid input"


class AuthenticationError(DomainError):
    """Raised when the caller cannot be identified."""

    code = "UNAUTHORIZED"
    http_status = 401
    default_message = "Authentication required"


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    code = "FORBIDDEN"
    http_status = 403
    default_message = "Insufficient permissions"


class NotFoundError(DomainError):
    code = "NOT_FOUND"
    http_status = 404
    default_message = "Not found"


class InvalidCredentials(AuthenticationError):
    """Unknown email and wrong password share this error on purpose."""

    code = "INVALID_CREDENTIALS"
    default_message = "Invalid email or password"


class ActorNotFound(AuthenticationError):
    code = "ACTOR_NOT_FOUND"
    default_message = "Current user not found"


class PermissionDenied(AuthorizationError):
    code = "PERMISSION_DENIED"


class UserNotFound(NotFoundError):
    code = "USER_NOT_FOUND"
    default_message = "User not found"


class EntryNotFound(NotFoundError):
    code = "ENTRY_NOT_FOUND"
    default_message = "Presence entry not found"


class EmailTaken(ValidationError):
    code = "EMAIL_TAKEN"
    http_status = 409
    default_message = "Email already registered"


class DuplicateEntry(ValidationError):
    code = "DUPLICATE_ENTRY"
    http_status = 409
    default_message = "Presence entry already exists for this user and date"


class DateOutOfRange(ValidationError):
    code = "DATE_OUT_OF_RANGE"
    http_status = 422
    default_message = "Date must be within the next two weeks from today"
