"""
API Dependency Injection Module

Provides the dependencies required by FastAPI routes.
"""

from typing import Annotated

from fastapi import Depends

from header_relay.common.header_assembler import HeaderAssembler
from header_relay.common.header_names import HeaderBlacklist
from header_relay.common.required_header import RequiredHeaderExtractor
from header_relay.config import Settings, get_settings


def get_app_settings() -> Settings:
    """Get application settings"""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_header_assembler(settings: SettingsDep) -> HeaderAssembler:
    """
    Get header assembler

    Blacklist and failure policy come from settings.
    """
    return HeaderAssembler(
        blacklist=HeaderBlacklist.from_settings(settings),
        fail_closed=settings.HEADER_ASSEMBLY_FAIL_CLOSED,
    )


def get_required_header_extractor() -> RequiredHeaderExtractor:
    """Get required header extractor"""
    return RequiredHeaderExtractor()


# Dependency type aliases
HeaderAssemblerDep = Annotated[HeaderAssembler, Depends(get_header_assembler)]
RequiredHeaderExtractorDep = Annotated[
    RequiredHeaderExtractor, Depends(get_required_header_extractor)
]
