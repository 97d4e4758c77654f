"""Site schemas for validation and responses."""

from pydantic import ConfigDict, Field, model_validator

from sitewatch.models import DeviceStatus
from sitewatch.schemas.access_point import AccessPointBundleItem, AccessPointResponse
from sitewatch.schemas.base import CamelModel, Coordinate, PartialUpdate, Text
from sitewatch.schemas.switch import SwitchBundleItem, SwitchResponse


class SiteBase(CamelModel):
    """Base site fields."""

    name: Text
    region: Text
    city: Text
    address: Text
    lat: Coordinate
    lng: Coordinate
    router_ip: Text
    router_mac: Text
    router_model: Text


class SiteCreate(SiteBase):
    """Site creation data."""

    status: DeviceStatus = DeviceStatus.ONLINE


class SiteUpdate(PartialUpdate):
    """Site update data (all fields optional)."""

    name: Text | None = None
    region: Text | None = None
    city: Text | None = None
    address: Text | None = None
    lat: Coordinate | None = None
    lng: Coordinate | None = None
    router_ip: Text | None = None
    router_mac: Text | None = None
    router_model: Text | None = None
    status: DeviceStatus | None = None


class SiteBundleCreate(CamelModel):
    """A site together with its switches and access points.

    Access points name their switch by position in ``switches``.
    """

    site: SiteCreate
    switches: list[SwitchBundleItem] = Field(default_factory=list)
    access_points: list[AccessPointBundleItem] = Field(default_factory=list)

    @model_validator(mode="after")
    def switch_indexes_in_range(self) -> "SiteBundleCreate":
        """Validate that every switchIndex points into the switches array."""
        for position, ap in enumerate(self.access_points):
            if ap.switch_index >= len(self.switches):
                raise ValueError(
                    f"accessPoints.{position}.switchIndex {ap.switch_index} is out of range "
                    f"for {len(self.switches)} switches"
                )
        return self


class SiteResponse(SiteBase):
    """Site response data."""

    id: int
    status: DeviceStatus

    model_config = ConfigDict(from_attributes=True)


class SwitchDetail(SwitchResponse):
    """Switch with the site's access points uplinked to it."""

    access_points: list[AccessPointResponse] = Field(default_factory=list)


class SiteDetail(SiteResponse):
    """Site with its switches and a flat list of its access points."""

    switches: list[SwitchDetail] = Field(default_factory=list)
    access_points: list[AccessPointResponse] = Field(default_factory=list)
