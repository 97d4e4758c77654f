"""Global search across sites, switches and access points."""

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from sitewatch.models import AccessPoint, Site, Switch
from sitewatch.schemas import SearchResult

# Maximum hits returned per entity type
SEARCH_LIMIT_PER_TYPE = 5

# Queries shorter than this are answered with no results by the API
MIN_QUERY_LENGTH = 2


class SearchService:
    """Case-insensitive substring search over the inventory."""

    def __init__(self, db: AsyncSession, limit: int = SEARCH_LIMIT_PER_TYPE):
        self.db = db
        self.limit = limit

    @staticmethod
    def _matches(query: str, *columns):
        """Build an OR of case-insensitive substring matches.

        LIKE wildcards in the query are escaped so they match literally.
        """
        return or_(*(column.icontains(query, autoescape=True) for column in columns))

    async def search(self, query: str) -> list[SearchResult]:
        """Search all entity types.

        Sites come first, then switches, then access points, each in storage
        order and capped at ``limit`` hits.
        """
        results: list[SearchResult] = []

        sites = await self.db.execute(
            select(Site)
            .where(self._matches(query, Site.name, Site.address, Site.router_ip, Site.router_mac))
            .order_by(Site.id)
            .limit(self.limit)
        )
        for site in sites.scalars():
            results.append(
                SearchResult(id=site.id, type="site", name=site.name, detail=site.address, site_id=site.id)
            )

        switches = await self.db.execute(
            select(Switch)
            .where(self._matches(query, Switch.name, Switch.ip, Switch.mac))
            .order_by(Switch.id)
            .limit(self.limit)
        )
        for switch in switches.scalars():
            results.append(
                SearchResult(
                    id=switch.id, type="switch", name=switch.name, detail=switch.ip, site_id=switch.site_id
                )
            )

        access_points = await self.db.execute(
            select(AccessPoint)
            .where(self._matches(query, AccessPoint.name, AccessPoint.ip, AccessPoint.mac))
            .order_by(AccessPoint.id)
            .limit(self.limit)
        )
        for ap in access_points.scalars():
            results.append(
                SearchResult(id=ap.id, type="ap", name=ap.name, detail=ap.ip, site_id=ap.site_id)
            )

        return results
