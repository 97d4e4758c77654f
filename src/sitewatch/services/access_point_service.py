"""Access point service for managing access points."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sitewatch.models import AccessPoint, Switch
from sitewatch.schemas import AccessPointCreate, AccessPointUpdate

logger = logging.getLogger(__name__)


class AccessPointService:
    """Service for access point CRUD operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, ap_id: int) -> AccessPoint | None:
        """Get an access point by ID."""
        result = await self.db.execute(select(AccessPoint).where(AccessPoint.id == ap_id))
        return result.scalar_one_or_none()

    async def _get_switch(self, switch_id: int) -> Switch:
        switch = await self.db.get(Switch, switch_id)
        if switch is None:
            raise ValueError(f"Switch {switch_id} does not exist")
        return switch

    async def create(self, data: AccessPointCreate) -> AccessPoint:
        """Create a new access point under a switch.

        The access point's site is the switch's site.

        Raises:
            ValueError: If the switch does not exist, or a supplied site_id
                disagrees with the switch's site
        """
        switch = await self._get_switch(data.switch_id)

        if data.site_id is not None and data.site_id != switch.site_id:
            raise ValueError(
                f"siteId {data.site_id} does not match site {switch.site_id} of switch {switch.id}"
            )

        ap = AccessPoint(**data.model_dump(exclude={"site_id"}), site_id=switch.site_id)
        self.db.add(ap)
        await self.db.flush()
        logger.info(f"Created access point {ap.id} ({ap.name}) on switch {ap.switch_id}")
        return ap

    async def update(self, ap_id: int, data: AccessPointUpdate) -> AccessPoint | None:
        """Update an existing access point.

        Re-parenting to another switch also takes that switch's site.

        Raises:
            ValueError: If the new switch does not exist
        """
        ap = await self.get_by_id(ap_id)
        if not ap:
            return None

        update_data = data.model_dump(exclude_unset=True)

        if "switch_id" in update_data:
            switch = await self._get_switch(update_data["switch_id"])
            update_data["site_id"] = switch.site_id

        for field, value in update_data.items():
            setattr(ap, field, value)

        await self.db.flush()
        return ap

    async def delete(self, ap_id: int) -> bool:
        """Delete an access point. Returns False if it does not exist."""
        ap = await self.get_by_id(ap_id)
        if not ap:
            return False

        await self.db.delete(ap)
        await self.db.flush()
        logger.info(f"Deleted access point {ap_id}")
        return True
