"""Request payload extraction."""

import json
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple
from urllib.parse import parse_qsl

from fastapi import Request

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _flatten(items: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """Single values stay scalar, repeated keys become lists."""
    grouped: Dict[str, list] = {}
    for key, value in items:
        grouped.setdefault(key, []).append(value)
    return {key: values[0] if len(values) == 1 else values for key, values in grouped.items()}


async def _parse_body(request: Request) -> Dict[str, Any]:
    body = await request.body()
    if not body:
        return {}

    if request.headers.get("content-type", "").startswith(FORM_CONTENT_TYPE):
        form = await request.form()
        return _flatten(form.multi_items())

    try:
        data = json.loads(body)
    except ValueError:
        # Not JSON: read it as a url-encoded form, whatever the content type
        logger.debug("Request body is not JSON, parsing it as a url-encoded form")
        return _flatten(parse_qsl(body.decode("utf-8", errors="replace")))

    if not isinstance(data, dict):
        return {"body": data}
    return data


async def build_payload(
    request: Request,
    stage_variables: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """
    Merge every request input into one payload dict.

    Sources are applied in order, later ones overriding earlier keys:
    stage variables, body, path parameters, query parameters, cookies.
    """
    payload: Dict[str, Any] = dict(stage_variables or {})
    payload.update(await _parse_body(request))
    payload.update(request.path_params)
    payload.update(request.query_params)
    payload.update(request.cookies)
    return payload
