"""Error categories and library exceptions shared by consuming services."""

# Stable, machine-readable category codes for API consumers.
NOT_FOUND = "NOT_FOUND"
BAD_REQUEST = "BAD_REQUEST"
UNAUTHORIZED = "UNAUTHORIZED"
INTERNAL_ERROR = "INTERNAL_ERROR"

# Each category is bound to exactly one HTTP status.
CATEGORY_STATUS = {
    NOT_FOUND: 404,
    BAD_REQUEST: 400,
    UNAUTHORIZED: 401,
    INTERNAL_ERROR: 500,
}


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class DomainValidationError(DomainError):
    """Raised when a request is malformed or breaks a business rule (e.g. invalid dates, missing required fields)."""

    pass
