"""Access point schemas for validation and responses."""

from pydantic import ConfigDict, Field

from sitewatch.models import DeviceStatus
from sitewatch.schemas.base import CamelModel, PartialUpdate, RowId, Text


class AccessPointFields(CamelModel):
    """Base access point fields."""

    name: Text
    ip: Text
    mac: Text
    model: Text
    status: DeviceStatus = DeviceStatus.ONLINE


class AccessPointCreate(AccessPointFields):
    """Access point creation data.

    site_id is taken from the switch. A supplied siteId must agree with it.
    """

    switch_id: RowId
    site_id: RowId | None = None


class AccessPointBundleItem(AccessPointFields):
    """Access point inside a composite site payload."""

    switch_index: int = Field(..., ge=0, strict=True)


class AccessPointUpdate(PartialUpdate):
    """Access point update data (all fields optional)."""

    switch_id: RowId | None = None
    name: Text | None = None
    ip: Text | None = None
    mac: Text | None = None
    model: Text | None = None
    status: DeviceStatus | None = None


class AccessPointResponse(CamelModel):
    """Access point response data."""

    id: int
    switch_id: int
    site_id: int
    name: str
    ip: str
    mac: str
    model: str
    status: DeviceStatus

    model_config = ConfigDict(from_attributes=True)
