"""Switch schemas for validation and responses."""

from pydantic import ConfigDict

from sitewatch.models import DeviceStatus
from sitewatch.schemas.base import CamelModel, PartialUpdate, RowId, Text


class SwitchBundleItem(CamelModel):
    """Switch fields as given inside a composite site payload."""

    name: Text
    ip: Text
    mac: Text
    model: Text
    status: DeviceStatus = DeviceStatus.ONLINE


class SwitchCreate(SwitchBundleItem):
    """Switch creation data."""

    site_id: RowId


class SwitchUpdate(PartialUpdate):
    """Switch update data (all fields optional)."""

    site_id: RowId | None = None
    name: Text | None = None
    ip: Text | None = None
    mac: Text | None = None
    model: Text | None = None
    status: DeviceStatus | None = None


class SwitchResponse(CamelModel):
    """Switch response data."""

    id: int
    site_id: int
    name: str
    ip: str
    mac: str
    model: str
    status: DeviceStatus

    model_config = ConfigDict(from_attributes=True)
