"""
Required Header Extraction

Fail-closed lookup of a header an operation cannot proceed without. A missing header
is not raised: an error envelope is emitted and None is returned, and the caller
must stop processing the request.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from header_relay.common.header_names import get_header
from header_relay.common.responses import ResponseEmitter

INTERNAL_ERROR_STATUS = 500
INTERNAL_ERROR_MESSAGE = "Internal server error"


class HeaderOutcome(str, Enum):
    """Terminal state of one extraction"""
    PRESENT = "present"
    MISSING = "missing"
    ERROR = "error"


class RequiredHeaderExtractor:
    """
    Required Header Extractor

    Every call ends in exactly one outcome:
    - PRESENT: value returned, nothing emitted
    - MISSING: emit(missing_status, {"error": missing_message}), None returned
    - ERROR: lookup itself failed, emit(500, {"error": "Internal server error"}), None returned
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def extract(
        self,
        headers: Optional[Mapping[str, Any]],
        name: str,
        missing_status: int,
        missing_message: str,
        emitter: ResponseEmitter,
    ) -> Any:
        """
        Extract a required header

        Args:
            headers: Inbound headers; None counts as "header missing"
            name: Header name, matched case-insensitively
            missing_status: Status code emitted when the header is absent or empty
            missing_message: Error message emitted when the header is absent or empty
            emitter: Response emitter for the current request

        Returns:
            The header value, or None after an error envelope was emitted
        """
        _outcome, value = self.extract_with_outcome(
            headers, name, missing_status, missing_message, emitter
        )
        return value

    def extract_with_outcome(
        self,
        headers: Optional[Mapping[str, Any]],
        name: str,
        missing_status: int,
        missing_message: str,
        emitter: ResponseEmitter,
    ) -> tuple[HeaderOutcome, Any]:
        """Same as extract, also reporting which outcome was reached"""
        self.logger.debug("extract running with %s", name)

        try:
            value = get_header(headers, name)
        except Exception as e:
            self.logger.error(
                "extract failed to read header %s: %s", name, e, exc_info=True
            )
            emitter.emit(INTERNAL_ERROR_STATUS, {"error": INTERNAL_ERROR_MESSAGE})
            return HeaderOutcome.ERROR, None

        if not value:
            self.logger.warning(
                "Required header %s missing, responding %d", name, missing_status
            )
            emitter.emit(missing_status, {"error": missing_message})
            return HeaderOutcome.MISSING, None

        self.logger.debug("extract found %s", name)
        return HeaderOutcome.PRESENT, value
