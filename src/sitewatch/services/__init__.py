"""Business logic services."""

from sitewatch.services.access_point_service import AccessPointService
from sitewatch.services.search_service import MIN_QUERY_LENGTH, SEARCH_LIMIT_PER_TYPE, SearchService
from sitewatch.services.seed_service import SeedService
from sitewatch.services.site_service import SiteService
from sitewatch.services.switch_service import SwitchService

__all__ = [
    "SiteService",
    "SwitchService",
    "AccessPointService",
    "SearchService",
    "SeedService",
    "MIN_QUERY_LENGTH",
    "SEARCH_LIMIT_PER_TYPE",
]
