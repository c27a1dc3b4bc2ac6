"""
Header Relay

Request/response normalization layer for HTTP intermediaries.
"""

__version__ = "0.1.0"
