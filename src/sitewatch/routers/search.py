"""Global search router."""

from fastapi import APIRouter

from sitewatch.core.dependencies import DbSession
from sitewatch.schemas import SearchResult
from sitewatch.services import MIN_QUERY_LENGTH, SearchService

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=list[SearchResult])
async def search(db: DbSession, q: str = "") -> list[SearchResult]:
    """Search sites, switches and access points by name, IP or MAC."""
    if len(q) < MIN_QUERY_LENGTH:
        return []

    return await SearchService(db).search(q)
