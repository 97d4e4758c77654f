"""Access point model for Wi-Fi radios."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sitewatch.models.base import Base, DeviceStatus


class AccessPoint(Base):
    """Wi-Fi access point uplinked to a switch.

    site_id duplicates the owning switch's site_id so a site's access points
    can be listed without a join. It is set from the switch on every write
    that touches switch_id.
    """

    __tablename__ = "access_points"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    switch_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("switches.id"), nullable=False, index=True
    )
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

    switch: Mapped["Switch"] = relationship("Switch", back_populates="access_points")  # noqa: F821
    site: Mapped["Site"] = relationship("Site", back_populates="access_points")  # noqa: F821

    def __repr__(self) -> str:
        return f"<AccessPoint {self.id}: {self.name} ({self.ip})>"
