from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Party(str, Enum):
    brand = "brand"
    competitor = "competitor"


class BrandProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    logo_url: str | None = None
    primary_color: str | None = Field(default=None, description="Accent colour, used for buttons and icons only")
    secondary_color: str | None = Field(default=None, description="Secondary accent for accent icons")
    tagline: str | None = None


class CompetitorProfile(BaseModel):
    """Competitor facts.

    Colours are accepted so callers can pass the same shape for both parties,
    but renderers never read them: competitor elements are always neutral gray.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    logo_url: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    tagline: str | None = None


class CallToAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    url: str = "/"


__all__ = ["BrandProfile", "CallToAction", "CompetitorProfile", "Party"]
