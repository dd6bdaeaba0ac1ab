from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Target:
    """One library domain under one provider, resolved to a request URL."""

    provider: str
    domain: str
    url: str


class ExtractedRecord(BaseModel):
    library: str
    # provider payload, passed through untouched (object, array or scalar)
    data: Any = Field(default_factory=dict)


class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overdrive: list[ExtractedRecord] = Field(
        default_factory=list, serialization_alias="Overdrive"
    )
    # Cloud Library placeholder; never populated or serialized
    cloudlibrary: list[ExtractedRecord] | None = Field(default=None, exclude=True)
