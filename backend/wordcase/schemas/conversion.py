"""Conversion Schemas — request and response bodies for the case endpoints.

Invariants:
    - text is typed Any: None and non-str values must reach the core so they
      surface as NULL_OR_UNDEFINED_INPUT / NOT_A_STRING, not a generic 400
    - style is restricted to CasingPolicy values by Pydantic
"""

from typing import Any

from pydantic import BaseModel

from wordcase.core.domain_types import CasingPolicy


class StyledConversionRequest(BaseModel):
    """Body for POST /case/{style} — the style comes from the path."""
    text: Any = None


class ConversionRequest(StyledConversionRequest):
    """Body for POST /case/convert."""
    style: CasingPolicy


class ConversionResponse(BaseModel):
    input: str
    style: CasingPolicy
    result: str
