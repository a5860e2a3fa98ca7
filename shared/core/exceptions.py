"""
Custom exceptions for the application.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

if TYPE_CHECKING:
    from shared.validation.violations import Violation


class BaseAPIException(Exception):
    """Base exception class for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class BadRequestError(BaseAPIException):
    """Raised when the request payload cannot be interpreted at all."""

    def __init__(
        self,
        message: str = "Bad request",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_code="BAD_REQUEST",
            details=details,
        )


class InputValidationError(BaseAPIException):
    """
    Raised when mutation arguments break one or more declared field rules.

    Carries every violation found for the request, in field order.
    """

    def __init__(
        self,
        violations: Sequence["Violation"],
        schema_name: Optional[str] = None,
        message: str = "Validation failed",
    ):
        self.violations: List["Violation"] = list(violations)
        self.schema_name = schema_name
        super().__init__(
            message=message,
            status_code=422,
            error_code="VALIDATION_ERROR",
            details={
                "schema": schema_name,
                "violation_count": len(self.violations),
            },
        )

    @property
    def fields(self) -> List[str]:
        """Names of the offending fields, without duplicates, in order."""
        seen: List[str] = []
        for violation in self.violations:
            if violation.field not in seen:
                seen.append(violation.field)
        return seen

    def __str__(self) -> str:
        summary = "; ".join(v.message for v in self.violations)
        return f"{self.message}: {summary}" if summary else self.message
