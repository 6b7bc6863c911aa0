"""
API response envelope.

Every HTTP response uses the same envelope:
    {"success": true, "data": ...}
    {"success": false, "error": {"code": ..., "message": ...}}
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from .errors import ApiError


@dataclass
class ApiResponse:
    """Response envelope.

    Attributes:
        success: Whether the request was handled
        data: Payload on success
        error: Error on failure
    """
    success: bool
    data: Optional[Any] = None
    error: Optional[ApiError] = None

    @property
    def status_code(self) -> int:
        """HTTP status code matching this response."""
        if self.success:
            return 200
        return self.error.code.http_status

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        response: Dict[str, Any] = {'success': self.success}
        if self.success:
            response['data'] = self.data
        if self.error:
            response['error'] = self.error.to_dict()
        return response

    @classmethod
    def success_response(cls, data: Any) -> 'ApiResponse':
        """Create a successful response.

        Args:
            data: JSON-serializable payload

        Returns:
            ApiResponse with success=True
        """
        return cls(success=True, data=data)

    @classmethod
    def error_response(cls, error: ApiError) -> 'ApiResponse':
        """Create an error response.

        Args:
            error: Error to report

        Returns:
            ApiResponse with success=False
        """
        return cls(success=False, error=error)
