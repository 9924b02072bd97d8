"""Response envelopes."""

from typing import Any, Dict, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..core.exceptions import (
    SUCCESS_CODE,
    SUCCESS_MESSAGE,
    ErrorCodeTable,
    NeoAclError,
    create_error_response,
    get_http_status_code,
)
from ..dispatch.entities import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
    "Access-Control-Allow-Headers": "*",
}


def _success_body(response: Response) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "error": SUCCESS_CODE,
        "message": response.message or SUCCESS_MESSAGE,
        "data": response.data,
    }
    if response.count is not None:
        body["count"] = response.count
    if response.start is not None:
        body["start"] = response.start
    if response.total is not None:
        body["total"] = response.total
    if response.last_evaluated_key is not None:
        body["lastEvaluatedKey"] = response.last_evaluated_key
    return body


def build_success_response(response: Response) -> JSONResponse:
    """Render a handler response; a Location header turns it into a 301."""
    headers = dict(CORS_HEADERS)
    headers.update(response.headers)

    has_location = any(key.lower() == "location" for key in response.headers)
    status_code = status.HTTP_301_MOVED_PERMANENTLY if has_location else status.HTTP_200_OK

    content = response.data if response.bare_body else _success_body(response)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content), headers=headers)


def build_error_response(
    exception: NeoAclError,
    table: Optional[ErrorCodeTable] = None,
) -> JSONResponse:
    """Render an error envelope with the status from the error-code table."""
    return JSONResponse(
        status_code=get_http_status_code(exception, table),
        content=create_error_response(exception, table),
        headers=dict(CORS_HEADERS),
    )
