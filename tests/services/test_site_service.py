"""Tests for the SiteService."""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sitewatch.models import AccessPoint, DeviceStatus, Site, Switch
from sitewatch.schemas import SiteBundleCreate, SiteCreate, SiteUpdate
from sitewatch.services import SiteService


class TestSiteServiceCRUD:
    """Tests for SiteService CRUD operations."""

    async def test_get_all_empty(self, db: AsyncSession):
        """No sites is an empty list, not an error."""
        service = SiteService(db)

        assert await service.get_all() == []

    async def test_create_site(self, db: AsyncSession, site_data):
        """Test creating a new site."""
        service = SiteService(db)

        site = await service.create(SiteCreate.model_validate(site_data()))

        assert site.id is not None
        assert site.name == "HQ - New York"
        assert site.router_ip == "10.0.0.1"
        assert site.lat == pytest.approx(40.7128)
        assert site.status == DeviceStatus.ONLINE

    async def test_get_all_in_storage_order(self, db: AsyncSession, site_data):
        """Sites are listed in the order they were created."""
        service = SiteService(db)
        first = await service.create(SiteCreate.model_validate(site_data(name="Zeta")))
        second = await service.create(SiteCreate.model_validate(site_data(name="Alpha")))

        sites = await service.get_all()

        assert [s.id for s in sites] == [first.id, second.id]

    async def test_update_site_changes_only_given_fields(self, db: AsyncSession, site_data):
        """Test updating a site's status leaves everything else alone."""
        service = SiteService(db)
        site = await service.create(SiteCreate.model_validate(site_data()))

        updated = await service.update(site.id, SiteUpdate(status=DeviceStatus.WARNING))

        assert updated is not None
        assert updated.status == DeviceStatus.WARNING
        assert updated.name == "HQ - New York"
        assert updated.address == "1 World Trade Center, NY"
        assert updated.router_mac == "00:1A:2B:3C:4D:5E"

    async def test_update_not_found(self, db: AsyncSession):
        """Updating a nonexistent site returns None."""
        service = SiteService(db)

        assert await service.update(99999, SiteUpdate(name="Nowhere")) is None

    async def test_delete_not_found_is_noop(self, db: AsyncSession):
        """Deleting a nonexistent site returns False."""
        service = SiteService(db)

        assert await service.delete(99999) is False


class TestSiteDetails:
    """Tests for the nested site view."""

    async def test_details_not_found(self, db: AsyncSession):
        service = SiteService(db)

        assert await service.get_details(99999) is None

    async def test_details_nests_access_points_under_switches(self, db: AsyncSession, seeded_site):
        """Each switch lists its access points; the flat list has all of them."""
        service = SiteService(db)

        details = await service.get_details(seeded_site["site_id"])

        assert details is not None
        assert len(details.switches) == 2
        assert all(sw.site_id == details.id for sw in details.switches)
        assert all(ap.site_id == details.id for ap in details.access_points)

        core, access = details.switches
        assert [ap.name for ap in core.access_points] == ["AP-Lobby-01", "AP-Lobby-02"]
        assert [ap.name for ap in access.access_points] == ["AP-Office-24A"]

        nested_ids = {ap.id for sw in details.switches for ap in sw.access_points}
        assert nested_ids == {ap.id for ap in details.access_points}

    async def test_details_excludes_other_sites(self, db: AsyncSession, seeded_site):
        service = SiteService(db)

        details = await service.get_details(seeded_site["other_site_id"])

        assert details is not None
        assert details.switches == []
        assert details.access_points == []

    async def test_access_point_on_foreign_switch_only_in_flat_list(
        self, db: AsyncSession, seeded_site
    ):
        """An access point whose switch lives on another site is not nested."""
        other_site_id = seeded_site["other_site_id"]
        db.add(
            AccessPoint(
                switch_id=seeded_site["switch_ids"][0],
                site_id=other_site_id,
                name="AP-Stray",
                ip="10.9.9.9",
                mac="DE:AD:BE:EF:00:01",
                model="Ubiquiti",
            )
        )
        await db.flush()

        details = await SiteService(db).get_details(other_site_id)

        assert [ap.name for ap in details.access_points] == ["AP-Stray"]
        assert details.switches == []


class TestSiteBundleCreate:
    """Tests for creating a site with its devices."""

    async def test_switch_index_resolves_in_creation_order(
        self, db: AsyncSession, site_data, device_data
    ):
        service = SiteService(db)
        bundle = SiteBundleCreate.model_validate(
            {
                "site": site_data(),
                "switches": [
                    device_data("SW-A", "10.0.0.2", "00:00:00:00:00:0A"),
                    device_data("SW-B", "10.0.0.3", "00:00:00:00:00:0B"),
                ],
                "accessPoints": [
                    device_data("AP-1", "10.0.0.11", "00:00:00:00:01:01", switchIndex=1),
                    device_data("AP-2", "10.0.0.12", "00:00:00:00:01:02", switchIndex=0),
                    device_data("AP-3", "10.0.0.13", "00:00:00:00:01:03", switchIndex=1),
                ],
            }
        )

        site = await service.create_with_devices(bundle)

        switches = (
            await db.execute(select(Switch).where(Switch.site_id == site.id).order_by(Switch.id))
        ).scalars().all()
        assert [sw.name for sw in switches] == ["SW-A", "SW-B"]
        by_name = {sw.name: sw.id for sw in switches}

        aps = (
            await db.execute(
                select(AccessPoint).where(AccessPoint.site_id == site.id).order_by(AccessPoint.id)
            )
        ).scalars().all()
        assert [(ap.name, ap.switch_id) for ap in aps] == [
            ("AP-1", by_name["SW-B"]),
            ("AP-2", by_name["SW-A"]),
            ("AP-3", by_name["SW-B"]),
        ]

    async def test_bundle_without_devices(self, db: AsyncSession, site_data):
        service = SiteService(db)

        site = await service.create_with_devices(SiteBundleCreate.model_validate({"site": site_data()}))

        details = await service.get_details(site.id)
        assert details.switches == []
        assert details.access_points == []


class TestSiteDelete:
    """Tests for cascading site deletion."""

    async def test_delete_removes_switches_and_access_points(self, db: AsyncSession, seeded_site):
        service = SiteService(db)
        site_id = seeded_site["site_id"]

        assert await service.delete(site_id) is True

        assert await service.get_details(site_id) is None
        switches = (await db.execute(select(Switch).where(Switch.site_id == site_id))).all()
        aps = (await db.execute(select(AccessPoint).where(AccessPoint.site_id == site_id))).all()
        assert switches == []
        assert aps == []

    async def test_delete_leaves_other_sites(self, db: AsyncSession, seeded_site):
        service = SiteService(db)

        await service.delete(seeded_site["site_id"])

        remaining = (await db.execute(select(Site.id))).scalars().all()
        assert remaining == [seeded_site["other_site_id"]]
