"""Base model and shared column types."""

from enum import Enum

from sitewatch.core.database import Base


class DeviceStatus(str, Enum):
    """Operational state shared by sites, switches and access points."""

    ONLINE = "online"
    OFFLINE = "offline"
    WARNING = "warning"


__all__ = ["Base", "DeviceStatus"]
