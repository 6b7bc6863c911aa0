"""
Validation API Routes.

Handles one-shot parameter validation, dependency checks and schema
discovery. Every response uses the {success, data | error} envelope.
"""

import logging
from typing import Any, Callable, Dict

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from hdbscan_params import (
    Mode,
    create_editor,
    schema_for,
    validate_clustering_params,
    validate_dependencies,
)
from hdbscan_params.api import (
    ApiError,
    ApiRequestError,
    ApiResponse,
    parse_dependency_request,
    parse_validation_request,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/clusters", tags=["validation"])

ENDPOINT_INFO = {
    "modes": [m.value for m in Mode],
    "description": "Validate HDBSCAN clustering parameters",
    "endpoints": {
        "POST /api/clusters/validate": "Validate parameters: {params, mode?}",
        "GET /api/clusters/validate": "Describe this API",
        "GET /api/clusters/schema?mode=": "Field descriptors and layout of a mode",
        "POST /api/clusters/dependencies": "Cross-field checks: {params}",
        "WS /api/clusters/validate/live?mode=&debounce_ms=": "Debounced live validation",
    },
}


def _respond(response: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.to_dict())


async def _handle(request: Request, handler: Callable[[bytes], Any]) -> JSONResponse:
    """Run a body handler and map its outcome onto the envelope."""
    try:
        body = await request.body()
        return _respond(ApiResponse.success_response(handler(body)))
    except ApiRequestError as e:
        logger.info("Rejected request to %s: %s", request.url.path, e.error.message)
        return _respond(ApiResponse.error_response(e.error))
    except Exception:
        logger.exception("Unexpected error handling %s", request.url.path)
        return _respond(ApiResponse.error_response(ApiError.internal()))


def _validate(body: bytes) -> Dict[str, Any]:
    request = parse_validation_request(body)
    return validate_clustering_params(request.params, request.mode_enum).to_dict()


def _check_dependencies(body: bytes) -> Dict[str, Any]:
    request = parse_dependency_request(body)
    return validate_dependencies(request.params).to_dict()


@router.post("/validate")
async def validate_params(request: Request) -> JSONResponse:
    """Validate clustering parameters for a mode.

    An invalid parameter set is still a successful request: the outcome is
    reported in data.isValid.
    """
    return await _handle(request, _validate)


@router.get("/validate")
async def describe_validation() -> JSONResponse:
    """Describe the validation API."""
    return _respond(ApiResponse.success_response(ENDPOINT_INFO))


@router.post("/dependencies")
async def check_dependencies(request: Request) -> JSONResponse:
    """Run the cross-field dependency rules."""
    return await _handle(request, _check_dependencies)


@router.get("/schema")
async def get_schema(
    mode: Mode = Query(Mode.BASIC, description="Validation mode")
) -> JSONResponse:
    """Get field descriptors, editor defaults and form layout of a mode."""
    editor = create_editor(mode)
    data = schema_for(mode).to_dict()
    data['defaults'] = editor.params
    data['layout'] = editor.get_layout().to_dict()
    return _respond(ApiResponse.success_response(data))
