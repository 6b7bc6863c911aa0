"""
Request schemas for the HTTP boundary.

Bodies are parsed here rather than by the web framework so that malformed
JSON and schema violations map onto the envelope error codes.
"""

from typing import Any, Dict, Literal, Union
import json

from pydantic import BaseModel, Field, ValidationError

from ..params.schema import Mode
from .errors import ApiError, ApiErrorCode, ApiRequestError


ModeLiteral = Literal["basic", "advanced", "super-advanced"]


class ValidationRequest(BaseModel):
    """Request schema for parameter validation."""
    params: Dict[str, Any] = Field(..., description="Clustering parameters to validate")
    mode: ModeLiteral = Field("basic", description="Validation mode")

    @property
    def mode_enum(self) -> Mode:
        return Mode.from_string(self.mode)


class DependencyRequest(BaseModel):
    """Request schema for dependency checks."""
    params: Dict[str, Any] = Field(..., description="Clustering parameters to check")


def _describe(exc: ValidationError) -> ApiError:
    """Turn pydantic errors into a single VALIDATION_ERROR."""
    errors = exc.errors()
    fields = {str(e['loc'][0]) for e in errors if e.get('loc')}

    if 'mode' in fields:
        message = (
            "Invalid validation mode. Must be one of: "
            f"{', '.join(m.value for m in Mode)}"
        )
    elif 'params' in fields:
        message = "Clustering parameters are required and must be an object"
    else:
        message = "Invalid request body"

    return ApiError.invalid_request(message, errors)


def load_json_body(body: Union[bytes, str]) -> Dict[str, Any]:
    """Decode a JSON object body.

    Args:
        body: Raw request body

    Returns:
        Decoded object

    Raises:
        ApiRequestError: INVALID_JSON for unparsable bodies,
            VALIDATION_ERROR when the body is not a JSON object
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ApiRequestError(ApiError.invalid_json())

    if not isinstance(data, dict):
        raise ApiRequestError(ApiError(
            code=ApiErrorCode.VALIDATION_ERROR,
            message="Request body must be a JSON object",
        ))
    return data


def parse_validation_request(body: Union[bytes, str]) -> ValidationRequest:
    """Parse and check a validation request body.

    Raises:
        ApiRequestError: On malformed JSON or invalid fields
    """
    data = load_json_body(body)
    try:
        return ValidationRequest.model_validate(data)
    except ValidationError as e:
        raise ApiRequestError(_describe(e))


def parse_dependency_request(body: Union[bytes, str]) -> DependencyRequest:
    """Parse and check a dependency request body.

    Raises:
        ApiRequestError: On malformed JSON or invalid fields
    """
    data = load_json_body(body)
    try:
        return DependencyRequest.model_validate(data)
    except ValidationError as e:
        raise ApiRequestError(_describe(e))
