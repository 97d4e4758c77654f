"""Pydantic schemas for validation and serialization."""

from sitewatch.schemas.access_point import (
    AccessPointBundleItem,
    AccessPointCreate,
    AccessPointResponse,
    AccessPointUpdate,
)
from sitewatch.schemas.search import SearchResult
from sitewatch.schemas.site import (
    SiteBundleCreate,
    SiteCreate,
    SiteDetail,
    SiteResponse,
    SiteUpdate,
    SwitchDetail,
)
from sitewatch.schemas.switch import SwitchBundleItem, SwitchCreate, SwitchResponse, SwitchUpdate

__all__ = [
    "SiteCreate",
    "SiteUpdate",
    "SiteBundleCreate",
    "SiteResponse",
    "SiteDetail",
    "SwitchBundleItem",
    "SwitchCreate",
    "SwitchUpdate",
    "SwitchResponse",
    "SwitchDetail",
    "AccessPointBundleItem",
    "AccessPointCreate",
    "AccessPointUpdate",
    "AccessPointResponse",
    "SearchResult",
]
