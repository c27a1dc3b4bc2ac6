"""
Response Emission

The core never writes to a socket itself. Failure paths hand a status code and a JSON
payload to a ResponseEmitter supplied by the transport; JSONResponseEmitter is the
FastAPI implementation used by the service routes.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol, runtime_checkable

from fastapi.responses import JSONResponse

from header_relay.common.errors import ResponseAlreadySentError

logger = logging.getLogger(__name__)

UNSERIALIZABLE_PAYLOAD = {
    "error": "Internal server error",
    "message": "Response data could not be serialized",
}


@runtime_checkable
class ResponseEmitter(Protocol):
    """Writes one status code + JSON payload envelope to the transport"""

    def emit(self, status_code: int, payload: Any) -> None:
        ...


class JSONResponseEmitter:
    """
    FastAPI Response Emitter

    Captures the emitted envelope as a JSONResponse for the route to return.
    At most one envelope may be emitted per instance; create one per request.

    Example:
        emitter = JSONResponseEmitter()
        token = extractor.extract(request.headers, "authorization", 401, "Missing", emitter)
        if token is None:
            return emitter.response
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.response: Optional[JSONResponse] = None

    @property
    def emitted(self) -> bool:
        """Whether an envelope has been emitted"""
        return self.response is not None

    def emit(self, status_code: int, payload: Any) -> None:
        """
        Emit a JSON envelope

        A status code outside 100-599 is sent as 500. A payload that cannot be
        rendered as JSON is replaced with a generic 500 envelope.

        Raises:
            ResponseAlreadySentError: An envelope was already emitted on this instance
        """
        if self.response is not None:
            raise ResponseAlreadySentError(
                details={
                    "status_code": status_code,
                    "previous_status_code": self.response.status_code,
                }
            )

        if not _is_valid_status(status_code):
            self.logger.warning("emit received invalid status code %r, sending 500", status_code)
            status_code = 500

        try:
            # Same encoder settings JSONResponse.render uses
            json.dumps(payload, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            self.logger.error("emit could not serialize %s payload: %s", type(payload).__name__, e)
            status_code = 500
            payload = dict(UNSERIALIZABLE_PAYLOAD)

        self.logger.debug("emit sending %d with %s", status_code, payload)
        self.response = JSONResponse(content=payload, status_code=status_code)


def _is_valid_status(status_code: Any) -> bool:
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        return False
    return 100 <= status_code <= 599


def send_json_response(emitter: ResponseEmitter, status_code: int, data: Any) -> None:
    """Send a JSON payload with the given status code"""
    emitter.emit(status_code, data)


def send_validation_error(
    emitter: ResponseEmitter,
    message: str,
    additional_data: Optional[dict[str, Any]] = None,
    status_code: int = 400,
) -> None:
    """
    Send a validation error envelope

    Body is {"error": message} merged with additional_data (e.g. the missing fields).
    """
    payload: dict[str, Any] = {"error": message}
    if additional_data:
        payload.update(additional_data)
    emitter.emit(status_code, payload)


def send_auth_error(emitter: ResponseEmitter, message: str = "Authentication required") -> None:
    """Send a 401 authentication error envelope"""
    logger.info("Sending 401: %s", message)
    emitter.emit(401, {"error": message})


def send_server_error(
    emitter: ResponseEmitter,
    message: str = "Internal server error",
    error: Optional[BaseException] = None,
    context: Optional[str] = None,
) -> None:
    """
    Send a 500 envelope

    The client only sees the public message; the error and context are logged.
    """
    if error is not None:
        logger.error(
            "Server error in %s: %s",
            context or "unknown",
            error,
            exc_info=(type(error), error, error.__traceback__),
        )
    else:
        logger.error("Server error in %s: %s", context or "unknown", message)
    emitter.emit(500, {"error": message})
