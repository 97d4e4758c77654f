"""Switch model for network switches under a site."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sitewatch.models.base import Base, DeviceStatus


class Switch(Base):
    """Network switch belonging to one site."""

    __tablename__ = "switches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    site_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sites.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    ip: Mapped[str] = mapped_column(String(45), nullable=False)
    mac: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[DeviceStatus] = mapped_column(
        String(20), default=DeviceStatus.ONLINE, nullable=False
    )

    site: Mapped["Site"] = relationship("Site", back_populates="switches")  # noqa: F821
    access_points: Mapped[list["AccessPoint"]] = relationship(  # noqa: F821
        "AccessPoint", back_populates="switch", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Switch {self.id}: {self.name} ({self.ip})>"
