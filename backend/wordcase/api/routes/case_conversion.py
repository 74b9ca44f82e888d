"""Case Conversion — HTTP surface over the pure core converters.

Invariants:
    - Routes never contain conversion logic (delegate to core.convert_case)
    - Core errors propagate to the global WordCaseError handler (400 envelope)
    - Length limit enforced before conversion, from settings

Design Decisions:
    - /case/{style} takes style as str so unknown names surface as
      UNSUPPORTED_CASING instead of a generic validation error
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from wordcase.config import Settings, get_settings
from wordcase.core.convert_case import convert_case, resolve_policy
from wordcase.core.domain_types import CasingPolicy
from wordcase.core.errors import InputTooLongError
from wordcase.schemas.conversion import (
    ConversionRequest, ConversionResponse, StyledConversionRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/case", tags=["case"])


def _convert(text: Any, policy: CasingPolicy, settings: Settings) -> ConversionResponse:
    if isinstance(text, str) and len(text) > settings.max_input_length:
        raise InputTooLongError(len(text), settings.max_input_length)
    result = convert_case(text, policy)
    logger.debug("Converted input", extra={"style": policy.value})
    return ConversionResponse(input=text, style=policy, result=result)


@router.post("/convert", response_model=ConversionResponse)
async def convert(
    body: ConversionRequest, settings: Settings = Depends(get_settings),
):
    """Convert text to the casing named in the body."""
    return _convert(body.text, body.style, settings)


@router.post("/{style}", response_model=ConversionResponse)
async def convert_to_style(
    style: str,
    body: StyledConversionRequest,
    settings: Settings = Depends(get_settings),
):
    """Convert text to the casing named in the path."""
    return _convert(body.text, resolve_policy(style), settings)
