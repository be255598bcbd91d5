from __future__ import annotations

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base exception for business rule violations.

    Each subclass carries the HTTP status it maps to, a short machine code and
    whether a caller may retry the same request.
    """

    status_code = 400
    code = "domain_error"
    retryable = False

    def __init__(self, message: str = "", *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"code": self.code, "retryable": self.retryable}
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    code = "validation_error"


class InvalidRoleError(ValidationError):
    code = "invalid_role"


class InvalidPageSizeError(ValidationError):
    code = "invalid_page_size"


class InvalidPageNumberError(ValidationError):
    code = "invalid_page_number"


class InvalidDateRangeError(ValidationError):
    code = "invalid_date_range"


class UnsupportedExportFormatError(ValidationError):
    code = "unsupported_export_format"


class UnknownOperationError(ValidationError):
    code = "unknown_operation"


class NotFoundError(DomainError):
    status_code = 404
    code = "not_found"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"


class ConflictError(DomainError):
    """Request clashes with stored state. Served as a 400 like other input errors."""

    code = "conflict"


class DuplicateEmailError(ConflictError):
    code = "duplicate_email"


class PreconditionError(DomainError):
    """Raised when a request is well-formed but cannot be served as asked."""

    code = "precondition_failed"


class BatchTooLargeError(PreconditionError):
    code = "batch_too_large"


class NoDataForAnalyticsError(PreconditionError):
    status_code = 409
    code = "no_data_for_analytics"


class SimulatedTransientFailure(DomainError):
    """Injected failure modelling a flaky downstream dependency."""

    status_code = 500
    code = "simulated_transient_failure"
    retryable = True


class StoreError(DomainError):
    """Unexpected repository failure, already logged; message is safe to show."""

    status_code = 500
    code = "store_error"
