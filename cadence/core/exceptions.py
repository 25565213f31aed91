"""
Domain errors.

Raised by the scheduling core and services, translated to HTTP
responses by :mod:`cadence.core.error_handlers`.
"""


class DomainError(Exception):
    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    def __init__(self, entity: str, message: str | None = None, details: dict | None = None):
        code = f"NF_{entity.upper()}"
        msg = message or f"{entity.replace('_', ' ').capitalize()} not found"
        super().__init__(code, msg, details)


class ValidationError(DomainError):
    """A precondition of the requested operation does not hold."""

    def __init__(self, field: str, message: str, details: dict | None = None):
        code = f"VAL_{field.upper()}"
        super().__init__(code, message, details or {"field": field})


class ConflictError(DomainError):
    """The storage layer rejected a write (uniqueness race). Safe to retry."""

    def __init__(self, message: str, code: str = "CF_STORAGE", details: dict | None = None):
        super().__init__(code, message, details)
