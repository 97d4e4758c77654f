"""FastAPI dependencies for database sessions and services."""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from sitewatch.core.database import get_session
from sitewatch.schemas.base import MAX_ROW_ID
from sitewatch.services import AccessPointService, SiteService, SwitchService

# Type aliases for dependency injection
DbSession = Annotated[AsyncSession, Depends(get_session)]

# Row id taken from the URL path
PathId = Annotated[int, Path(le=MAX_ROW_ID)]


# Service dependencies
def get_site_service(db: DbSession) -> SiteService:
    """Get SiteService instance."""
    return SiteService(db)


def get_switch_service(db: DbSession) -> SwitchService:
    """Get SwitchService instance."""
    return SwitchService(db)


def get_access_point_service(db: DbSession) -> AccessPointService:
    """Get AccessPointService instance."""
    return AccessPointService(db)


SiteServiceDep = Annotated[SiteService, Depends(get_site_service)]
SwitchServiceDep = Annotated[SwitchService, Depends(get_switch_service)]
AccessPointServiceDep = Annotated[AccessPointService, Depends(get_access_point_service)]
