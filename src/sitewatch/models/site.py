"""Site model for physical network locations."""

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sitewatch.models.base import Base, DeviceStatus


class Site(Base):
    """A physical network location with one router."""

    __tablename__ = "sites"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    region: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)

    # Geographic coordinates
    lat: Mapped[float] = mapped_column(Float, nullable=False)
    lng: Mapped[float] = mapped_column(Float, nullable=False)

    # Router info (not validated as real IP/MAC formats)
    router_ip: Mapped[str] = mapped_column(String(45), nullable=False)
    router_mac: Mapped[str] = mapped_column(String(50), nullable=False)
    router_model: Mapped[str] = mapped_column(String(255), nullable=False)

    status: Mapped[DeviceStatus] = mapped_column(
        String(20), default=DeviceStatus.ONLINE, nullable=False
    )

    # Relationships (deletes are cascaded explicitly by SiteService)
    switches: Mapped[list["Switch"]] = relationship(  # noqa: F821
        "Switch", back_populates="site", passive_deletes=True
    )
    access_points: Mapped[list["AccessPoint"]] = relationship(  # noqa: F821
        "AccessPoint", back_populates="site", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Site {self.id}: {self.name}>"
