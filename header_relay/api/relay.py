"""
Relay Preview API

Dry-run endpoint: shows the headers that would be forwarded upstream for the incoming
request. Nothing is sent anywhere.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request

from header_relay.api.deps import HeaderAssemblerDep, RequiredHeaderExtractorDep
from header_relay.common.responses import JSONResponseEmitter, send_validation_error
from header_relay.common.sanitizer import sanitize_headers

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Relay"])

_UNPARSED = object()


async def _read_body(request: Request) -> Any:
    """
    Read the request body in the form it will be forwarded

    JSON objects and arrays are parsed into structured values. JSON scalars and
    non-JSON bodies are kept as received text (or bytes when not valid UTF-8), so
    they are measured on their wire bytes. An empty body is None.
    Returns _UNPARSED when a JSON body cannot be parsed.
    """
    raw = await request.body()
    if not raw:
        return None

    content_type = request.headers.get("content-type", "")
    if "json" in content_type.lower():
        try:
            parsed = json.loads(raw)
        except ValueError:
            return _UNPARSED
        if isinstance(parsed, (dict, list)):
            return parsed

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw


@router.api_route(
    "/v1/relay/preview/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
)
async def preview_forwarded_headers(
    request: Request,
    path: str,
    assembler: HeaderAssemblerDep,
    extractor: RequiredHeaderExtractorDep,
):
    """
    Preview forwarded headers

    Requires an Authorization header. Credential values are masked in the result.
    """
    emitter = JSONResponseEmitter()

    token = extractor.extract(
        request.headers, "authorization", 401, "Missing authorization header", emitter
    )
    if token is None:
        return emitter.response

    body = await _read_body(request)
    if body is _UNPARSED:
        send_validation_error(emitter, "Invalid JSON body")
        return emitter.response

    headers = assembler.assemble(request.headers, request.method, body)
    logger.info("Previewed %s /%s with %d forwarded headers", request.method, path, len(headers))

    return {
        "method": request.method,
        "path": f"/{path}",
        "headers": sanitize_headers(headers),
    }
