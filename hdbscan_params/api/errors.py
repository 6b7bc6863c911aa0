"""
Structured error types for the HTTP boundary.

Validation outcomes are never errors here: an invalid parameter set is a
successful validation. These types cover the transport failures only.
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any, List
from enum import Enum


class ApiErrorCode(Enum):
    """Error codes returned in the response envelope."""
    VALIDATION_ERROR = "VALIDATION_ERROR"  # Malformed request body or field
    INVALID_JSON = "INVALID_JSON"          # Body is not parseable JSON
    INTERNAL_ERROR = "INTERNAL_ERROR"      # Unexpected server-side failure

    @property
    def http_status(self) -> int:
        """HTTP status code for this error."""
        if self is ApiErrorCode.INTERNAL_ERROR:
            return 500
        return 400


@dataclass
class ApiError:
    """Structured API error.

    Attributes:
        code: Error code enum value
        message: Human-readable error message
        details: Additional error details (e.g. offending request fields)
    """
    code: ApiErrorCode
    message: str
    details: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            'code': self.code.value,
            'message': self.message,
        }
        if self.details:
            result['details'] = self.details
        return result

    @classmethod
    def invalid_json(cls) -> 'ApiError':
        return cls(
            code=ApiErrorCode.INVALID_JSON,
            message="Request body is not valid JSON",
        )

    @classmethod
    def invalid_request(cls, message: str, errors: List[Dict[str, Any]]) -> 'ApiError':
        """Create a VALIDATION_ERROR listing the offending request fields."""
        return cls(
            code=ApiErrorCode.VALIDATION_ERROR,
            message=message,
            details={
                'errors': [
                    {'loc': [str(p) for p in e.get('loc', ())], 'msg': e.get('msg', '')}
                    for e in errors
                ]
            },
        )

    @classmethod
    def internal(cls) -> 'ApiError':
        return cls(
            code=ApiErrorCode.INTERNAL_ERROR,
            message="Internal server error during validation",
        )


class ApiRequestError(Exception):
    """Raised by request parsing helpers; carries the error to return."""

    def __init__(self, error: ApiError):
        super().__init__(error.message)
        self.error = error
