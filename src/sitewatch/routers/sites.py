"""Sites router: listing, details and site CRUD."""

from typing import Any

from fastapi import APIRouter, Body, HTTPException, Response, status
from pydantic import TypeAdapter

from sitewatch.core.dependencies import PathId, SiteServiceDep
from sitewatch.schemas import SiteBundleCreate, SiteCreate, SiteDetail, SiteResponse, SiteUpdate

router = APIRouter(prefix="/api/sites", tags=["sites"])

# Plain and composite create bodies, with the models they reference
_create_body_schema = TypeAdapter(SiteCreate | SiteBundleCreate).json_schema(
    by_alias=True,
    ref_template="#/components/schemas/{model}",
)
CREATE_SITE_SCHEMAS: dict = _create_body_schema.get("$defs", {})


@router.get("", response_model=list[SiteResponse])
async def list_sites(site_service: SiteServiceDep) -> list[SiteResponse]:
    """List all sites."""
    sites = await site_service.get_all()
    return [SiteResponse.model_validate(site) for site in sites]


@router.get("/{site_id}", response_model=SiteDetail)
async def get_site(site_id: PathId, site_service: SiteServiceDep) -> SiteDetail:
    """Get a site with its switches and access points."""
    site = await site_service.get_details(site_id)

    if not site:
        raise HTTPException(status_code=404, detail="Site not found")

    return site


@router.post(
    "",
    response_model=SiteResponse,
    status_code=status.HTTP_201_CREATED,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": {"anyOf": _create_body_schema["anyOf"]}}},
        }
    },
)
async def create_site(
    site_service: SiteServiceDep,
    payload: dict[str, Any] = Body(...),
) -> SiteResponse:
    """Create a site.

    Accepts either plain site fields or ``{site, switches, accessPoints}``
    to create the site together with its devices.
    """
    if "site" in payload:
        site = await site_service.create_with_devices(SiteBundleCreate.model_validate(payload))
    else:
        site = await site_service.create(SiteCreate.model_validate(payload))

    return SiteResponse.model_validate(site)


@router.patch("/{site_id}", response_model=SiteResponse)
async def update_site(
    site_id: PathId,
    data: SiteUpdate,
    site_service: SiteServiceDep,
) -> SiteResponse:
    """Update some fields of a site."""
    site = await site_service.update(site_id, data)

    if not site:
        raise HTTPException(status_code=404, detail="Site not found")

    return SiteResponse.model_validate(site)


@router.delete("/{site_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_site(site_id: PathId, site_service: SiteServiceDep) -> Response:
    """Delete a site with all its switches and access points."""
    await site_service.delete(site_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
