"""
Header Normalization Core

Header sanitization, content-length calculation, required-header extraction and
JSON envelope emission.
"""

from header_relay.common.content_length import UNSET, ContentLengthCalculator, serialize_body
from header_relay.common.errors import (
    AppError,
    InternalProcessingError,
    InvalidInputError,
    ResponseAlreadySentError,
)
from header_relay.common.header_assembler import HeaderAssembler
from header_relay.common.header_names import DEFAULT_HEADER_BLACKLIST, HeaderBlacklist
from header_relay.common.required_header import HeaderOutcome, RequiredHeaderExtractor
from header_relay.common.responses import JSONResponseEmitter, ResponseEmitter

__all__ = [
    "UNSET",
    "AppError",
    "ContentLengthCalculator",
    "DEFAULT_HEADER_BLACKLIST",
    "HeaderAssembler",
    "HeaderBlacklist",
    "HeaderOutcome",
    "InternalProcessingError",
    "InvalidInputError",
    "JSONResponseEmitter",
    "RequiredHeaderExtractor",
    "ResponseAlreadySentError",
    "ResponseEmitter",
    "serialize_body",
]
