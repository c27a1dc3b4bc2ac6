"""
API Router Module Initialization
"""

from header_relay.api.relay import router as relay_router

__all__ = [
    "relay_router",
]
