"""HTTP routers."""

from sitewatch.routers.access_points import router as access_points_router
from sitewatch.routers.search import router as search_router
from sitewatch.routers.sites import router as sites_router
from sitewatch.routers.switches import router as switches_router

__all__ = ["sites_router", "switches_router", "access_points_router", "search_router"]
