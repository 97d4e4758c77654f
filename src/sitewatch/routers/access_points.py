"""Access points router."""

from fastapi import APIRouter, HTTPException, Response, status

from sitewatch.core.dependencies import AccessPointServiceDep, PathId
from sitewatch.schemas import AccessPointCreate, AccessPointResponse, AccessPointUpdate

router = APIRouter(prefix="/api/access-points", tags=["access-points"])


@router.get("/{ap_id}", response_model=AccessPointResponse)
async def get_access_point(ap_id: PathId, ap_service: AccessPointServiceDep) -> AccessPointResponse:
    """Get an access point by ID."""
    ap = await ap_service.get_by_id(ap_id)

    if not ap:
        raise HTTPException(status_code=404, detail="Access point not found")

    return AccessPointResponse.model_validate(ap)


@router.post("", response_model=AccessPointResponse, status_code=status.HTTP_201_CREATED)
async def create_access_point(
    data: AccessPointCreate,
    ap_service: AccessPointServiceDep,
) -> AccessPointResponse:
    """Create an access point under an existing switch."""
    try:
        ap = await ap_service.create(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AccessPointResponse.model_validate(ap)


@router.patch("/{ap_id}", response_model=AccessPointResponse)
async def update_access_point(
    ap_id: PathId,
    data: AccessPointUpdate,
    ap_service: AccessPointServiceDep,
) -> AccessPointResponse:
    """Update some fields of an access point."""
    try:
        ap = await ap_service.update(ap_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not ap:
        raise HTTPException(status_code=404, detail="Access point not found")

    return AccessPointResponse.model_validate(ap)


@router.delete("/{ap_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_access_point(ap_id: PathId, ap_service: AccessPointServiceDep) -> Response:
    """Delete an access point."""
    await ap_service.delete(ap_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
