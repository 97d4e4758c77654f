"""Site service for managing sites and assembling site details."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from sitewatch.models import AccessPoint, Site, Switch
from sitewatch.schemas import (
    AccessPointResponse,
    SiteBundleCreate,
    SiteCreate,
    SiteDetail,
    SiteResponse,
    SiteUpdate,
    SwitchDetail,
    SwitchResponse,
)

logger = logging.getLogger(__name__)


class SiteService:
    """Service for site CRUD operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_all(self) -> list[Site]:
        """Get all sites in storage order."""
        result = await self.db.execute(select(Site).order_by(Site.id))
        return list(result.scalars().all())

    async def get_by_id(self, site_id: int) -> Site | None:
        """Get a site by ID."""
        result = await self.db.execute(select(Site).where(Site.id == site_id))
        return result.scalar_one_or_none()

    async def get_details(self, site_id: int) -> SiteDetail | None:
        """Get a site with its switches and access points.

        Each switch carries the site's access points whose switch_id matches
        it. ``access_points`` lists every access point with this site_id, so
        an access point wired to another site's switch only shows up there.
        """
        site = await self.get_by_id(site_id)
        if not site:
            return None

        switch_result = await self.db.execute(
            select(Switch).where(Switch.site_id == site_id).order_by(Switch.id)
        )
        ap_result = await self.db.execute(
            select(AccessPoint).where(AccessPoint.site_id == site_id).order_by(AccessPoint.id)
        )

        access_points = [AccessPointResponse.model_validate(ap) for ap in ap_result.scalars()]
        switches = [
            SwitchDetail(
                **SwitchResponse.model_validate(sw).model_dump(),
                access_points=[ap for ap in access_points if ap.switch_id == sw.id],
            )
            for sw in switch_result.scalars()
        ]

        return SiteDetail(
            **SiteResponse.model_validate(site).model_dump(),
            switches=switches,
            access_points=access_points,
        )

    async def create(self, data: SiteCreate) -> Site:
        """Create a new site."""
        site = Site(**data.model_dump())
        self.db.add(site)
        await self.db.flush()
        logger.info(f"Created site {site.id} ({site.name})")
        return site

    async def create_with_devices(self, data: SiteBundleCreate) -> Site:
        """Create a site, its switches and its access points in one go.

        Switches are inserted in array order so that each access point's
        switch_index resolves to the switch created at that position.
        """
        site = await self.create(data.site)

        created_switches: list[Switch] = []
        for item in data.switches:
            switch = Switch(site_id=site.id, **item.model_dump())
            self.db.add(switch)
            await self.db.flush()
            created_switches.append(switch)

        for item in data.access_points:
            fields = item.model_dump(exclude={"switch_index"})
            ap = AccessPoint(
                site_id=site.id,
                switch_id=created_switches[item.switch_index].id,
                **fields,
            )
            self.db.add(ap)
            await self.db.flush()

        logger.info(
            f"Site {site.id} created with {len(created_switches)} switches "
            f"and {len(data.access_points)} access points"
        )
        return site

    async def update(self, site_id: int, data: SiteUpdate) -> Site | None:
        """Update an existing site, changing only the supplied fields."""
        site = await self.get_by_id(site_id)
        if not site:
            return None

        update_data = data.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            setattr(site, field, value)

        await self.db.flush()
        return site

    async def delete(self, site_id: int) -> bool:
        """Delete a site with its access points and switches.

        Returns False, without touching anything, if the site does not exist.
        """
        site = await self.get_by_id(site_id)
        if not site:
            return False

        await self.db.execute(delete(AccessPoint).where(AccessPoint.site_id == site_id))
        await self.db.execute(delete(Switch).where(Switch.site_id == site_id))
        await self.db.delete(site)
        await self.db.flush()
        logger.info(f"Deleted site {site_id}")
        return True
