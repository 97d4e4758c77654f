"""Switch service for managing switches."""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from sitewatch.models import AccessPoint, Site, Switch
from sitewatch.schemas import SwitchCreate, SwitchUpdate

logger = logging.getLogger(__name__)


class SwitchService:
    """Service for switch CRUD operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, switch_id: int) -> Switch | None:
        """Get a switch by ID."""
        result = await self.db.execute(select(Switch).where(Switch.id == switch_id))
        return result.scalar_one_or_none()

    async def _require_site(self, site_id: int) -> None:
        if await self.db.get(Site, site_id) is None:
            raise ValueError(f"Site {site_id} does not exist")

    async def create(self, data: SwitchCreate) -> Switch:
        """Create a new switch.

        Raises:
            ValueError: If the referenced site does not exist
        """
        await self._require_site(data.site_id)

        switch = Switch(**data.model_dump())
        self.db.add(switch)
        await self.db.flush()
        logger.info(f"Created switch {switch.id} ({switch.name}) on site {switch.site_id}")
        return switch

    async def update(self, switch_id: int, data: SwitchUpdate) -> Switch | None:
        """Update an existing switch.

        Moving a switch to another site moves its access points with it.

        Raises:
            ValueError: If the new site does not exist
        """
        switch = await self.get_by_id(switch_id)
        if not switch:
            return None

        update_data = data.model_dump(exclude_unset=True)

        new_site_id = update_data.get("site_id")
        if new_site_id is not None and new_site_id != switch.site_id:
            await self._require_site(new_site_id)
            await self.db.execute(
                update(AccessPoint)
                .where(AccessPoint.switch_id == switch_id)
                .values(site_id=new_site_id)
                .execution_options(synchronize_session="fetch")
            )

        for field, value in update_data.items():
            setattr(switch, field, value)

        await self.db.flush()
        return switch

    async def delete(self, switch_id: int) -> bool:
        """Delete a switch and its access points.

        Returns False, without touching anything, if the switch does not exist.
        """
        switch = await self.get_by_id(switch_id)
        if not switch:
            return False

        await self.db.execute(delete(AccessPoint).where(AccessPoint.switch_id == switch_id))
        await self.db.delete(switch)
        await self.db.flush()
        logger.info(f"Deleted switch {switch_id}")
        return True
