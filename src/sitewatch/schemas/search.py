"""Global search result schema."""

from typing import Literal

from sitewatch.schemas.base import CamelModel

SearchResultType = Literal["site", "switch", "ap"]


class SearchResult(CamelModel):
    """One hit from the global search."""

    id: int
    type: SearchResultType
    name: str
    detail: str
    site_id: int
