"""
Content-Length Calculation

Computes the byte-accurate Content-Length of a request body. Length is always measured
on the UTF-8 encoded wire form: "café" is 5 bytes, not 4 characters.
"""

import json
import logging
from typing import Any, Optional

from header_relay.common.errors import InvalidInputError


class _Unset:
    """Marker for a body that was never provided"""

    _instance: Optional["_Unset"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

_BYTES_TYPES = (bytes, bytearray, memoryview)
_STRUCTURED_TYPES = (dict, list, tuple)


def serialize_body(body: Any) -> str:
    """
    Serialize a structured body to its JSON wire form

    Non-ASCII characters are written as-is (not \\u-escaped), so the UTF-8 byte length
    of the result is what actually goes on the wire.

    Raises:
        InvalidInputError: Body contains values JSON cannot represent
    """
    try:
        return json.dumps(body, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            message=f"Body is not JSON serializable: {e}",
            details={"body_type": type(body).__name__},
        ) from e


def is_empty_body(body: Any) -> bool:
    """
    Whether a body counts as absent for framing purposes

    None, UNSET, "", b"" and structured values without entries are empty.
    Scalars such as 0 or False are not: they are "other" bodies.
    """
    if body is None or body is UNSET:
        return True
    if isinstance(body, (str,) + _BYTES_TYPES + _STRUCTURED_TYPES):
        return len(body) == 0
    return False


class ContentLengthCalculator:
    """
    Content-Length Calculator

    Measures bodies in the forms a proxied request can carry:
    - None / "" / b"" / empty dict, list or tuple -> "0"
    - str -> UTF-8 byte length
    - bytes-like -> raw length
    - dict / list / tuple -> UTF-8 byte length of the JSON wire form
    - any other scalar -> "0"

    An UNSET body is a caller bug and raises InvalidInputError.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize calculator

        Args:
            logger: Diagnostics logger, defaults to this module's logger
        """
        self.logger = logger or logging.getLogger(__name__)

    def compute_length(self, body: Any = UNSET) -> str:
        """
        Compute Content-Length for a body

        Args:
            body: Request body

        Returns:
            str: Base-10 byte length, e.g. "11"

        Raises:
            InvalidInputError: Body is UNSET or cannot be serialized
        """
        self.logger.debug("compute_length running with body type %s", type(body).__name__)

        if body is UNSET:
            self.logger.error("compute_length called without a body")
            raise InvalidInputError(message="Body is undefined", code="body_undefined")

        if is_empty_body(body):
            length = 0
        elif isinstance(body, str):
            length = len(body.encode("utf-8"))
        elif isinstance(body, _BYTES_TYPES):
            length = memoryview(body).nbytes
        elif isinstance(body, _STRUCTURED_TYPES):
            length = len(serialize_body(body).encode("utf-8"))
        else:
            # Numbers, booleans and unknown objects are not expected here; measure as empty.
            self.logger.debug(
                "compute_length falling back to 0 for body type %s", type(body).__name__
            )
            length = 0

        self.logger.debug("compute_length returning %d", length)
        return str(length)
