"""SQLAlchemy ORM models."""

from sitewatch.models.access_point import AccessPoint
from sitewatch.models.base import Base, DeviceStatus
from sitewatch.models.site import Site
from sitewatch.models.switch import Switch

__all__ = [
    "Base",
    "DeviceStatus",
    "Site",
    "Switch",
    "AccessPoint",
]
