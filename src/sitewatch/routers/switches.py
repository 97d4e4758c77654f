"""Switches router."""

from fastapi import APIRouter, HTTPException, Response, status

from sitewatch.core.dependencies import PathId, SwitchServiceDep
from sitewatch.schemas import SwitchCreate, SwitchResponse, SwitchUpdate

router = APIRouter(prefix="/api/switches", tags=["switches"])


@router.get("/{switch_id}", response_model=SwitchResponse)
async def get_switch(switch_id: PathId, switch_service: SwitchServiceDep) -> SwitchResponse:
    """Get a switch by ID."""
    switch = await switch_service.get_by_id(switch_id)

    if not switch:
        raise HTTPException(status_code=404, detail="Switch not found")

    return SwitchResponse.model_validate(switch)


@router.post("", response_model=SwitchResponse, status_code=status.HTTP_201_CREATED)
async def create_switch(data: SwitchCreate, switch_service: SwitchServiceDep) -> SwitchResponse:
    """Create a switch on an existing site."""
    try:
        switch = await switch_service.create(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SwitchResponse.model_validate(switch)


@router.patch("/{switch_id}", response_model=SwitchResponse)
async def update_switch(
    switch_id: PathId,
    data: SwitchUpdate,
    switch_service: SwitchServiceDep,
) -> SwitchResponse:
    """Update some fields of a switch."""
    try:
        switch = await switch_service.update(switch_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not switch:
        raise HTTPException(status_code=404, detail="Switch not found")

    return SwitchResponse.model_validate(switch)


@router.delete("/{switch_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_switch(switch_id: PathId, switch_service: SwitchServiceDep) -> Response:
    """Delete a switch and its access points."""
    await switch_service.delete(switch_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
