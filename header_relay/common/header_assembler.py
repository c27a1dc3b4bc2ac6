"""
Forwarded Header Assembly

Builds the header set sent upstream from the headers a client sent us:
blacklisted routing/CDN headers are stripped and Content-Length is reconciled
with the body that will actually be forwarded.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from header_relay.common.content_length import ContentLengthCalculator, is_empty_body
from header_relay.common.errors import InternalProcessingError, InvalidInputError
from header_relay.common.header_names import CONTENT_LENGTH, HeaderBlacklist, remove_header
from header_relay.common.sanitizer import sanitize_headers


class HeaderAssembler:
    """
    Header Assembler

    Each call works on a private copy of the inbound headers, so one instance can be
    shared across concurrent requests.

    Failure policy: an unexpected fault after cloning returns the cloned, unmodified
    headers (fail-open) unless fail_closed is set, in which case the fault is raised
    as InternalProcessingError.
    """

    def __init__(
        self,
        blacklist: Optional[HeaderBlacklist] = None,
        calculator: Optional[ContentLengthCalculator] = None,
        logger: Optional[logging.Logger] = None,
        fail_closed: bool = False,
    ):
        """
        Initialize assembler

        Args:
            blacklist: Header names never forwarded, defaults to the built-in blacklist
            calculator: Content-Length calculator
            logger: Diagnostics logger
            fail_closed: Raise instead of falling back on internal faults
        """
        self.logger = logger or logging.getLogger(__name__)
        self.blacklist = blacklist if blacklist is not None else HeaderBlacklist()
        self.calculator = calculator or ContentLengthCalculator(logger=self.logger)
        self.fail_closed = fail_closed

    def assemble(
        self,
        headers: Optional[Mapping[str, Any]],
        method: Any,
        body: Any = None,
    ) -> dict[str, Any]:
        """
        Assemble headers for forwarding

        Args:
            headers: Inbound headers (any casing); None is treated as empty
            method: HTTP method, compared case-insensitively; non-strings are treated as GET
            body: Body that will be forwarded

        Returns:
            dict: New header dictionary

        Raises:
            InvalidInputError: headers is not a mapping
            InternalProcessingError: Internal fault while fail_closed is set
        """
        self.logger.debug("assemble running with method %r", method)

        cloned = self._clone(headers)

        try:
            assembled = dict(cloned)
            removed: list[str] = []
            for name in self.blacklist:
                removed.extend(remove_header(assembled, name))

            if is_empty_body(body) or self._is_get(method):
                remove_header(assembled, CONTENT_LENGTH)
            else:
                length = self.calculator.compute_length(body)
                remove_header(assembled, CONTENT_LENGTH)
                assembled[CONTENT_LENGTH] = length
        except Exception as e:
            if self.fail_closed:
                self.logger.error("assemble failed, rejecting request: %s", e, exc_info=True)
                raise InternalProcessingError(
                    message="Failed to assemble forwarded headers",
                    code="header_assembly_failed",
                    details={"method": str(method)},
                ) from e
            self.logger.error(
                "assemble failed, forwarding unmodified headers: %s", e, exc_info=True
            )
            return dict(cloned)

        self.logger.debug(
            "assemble removed %s, returning %s", removed or "none", sanitize_headers(assembled)
        )
        return assembled

    @staticmethod
    def _clone(headers: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        if headers is None:
            return {}
        if not isinstance(headers, Mapping):
            raise InvalidInputError(
                message="Headers must be a mapping",
                details={"headers_type": type(headers).__name__},
            )
        return dict(headers.items())

    @staticmethod
    def _is_get(method: Any) -> bool:
        if not isinstance(method, str):
            return True
        return method.strip().upper() == "GET"
