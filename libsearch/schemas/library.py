from __future__ import annotations

from pydantic import BaseModel


class CatalogServiceOut(BaseModel):
    key: str
    name: str
    url_template: str
    domains: list[str]
