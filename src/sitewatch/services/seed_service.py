"""Demo data seeding for an empty inventory."""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from sitewatch.models import Site
from sitewatch.schemas import SiteBundleCreate
from sitewatch.services.site_service import SiteService

logger = logging.getLogger(__name__)


DEMO_SITES: list[dict] = [
    {
        "site": {
            "name": "HQ - New York",
            "region": "North America",
            "city": "New York",
            "address": "1 World Trade Center, NY",
            "lat": 40.7128,
            "lng": -74.0060,
            "routerIp": "10.0.0.1",
            "routerMac": "00:1A:2B:3C:4D:5E",
            "routerModel": "Cisco ISR 4451",
            "status": "online",
        },
        "switches": [
            {"name": "Core Switch 01", "ip": "10.0.0.2", "mac": "00:1A:2B:3C:4D:5F", "model": "Cisco Catalyst 9300"},
            {"name": "Access Switch 01 (Floor 24)", "ip": "10.0.0.3", "mac": "00:1A:2B:3C:4D:60", "model": "Cisco Catalyst 9200"},
        ],
        "accessPoints": [
            {"switchIndex": 0, "name": "AP-Lobby-01", "ip": "10.0.0.101", "mac": "AA:BB:CC:00:00:01", "model": "Meraki MR46"},
            {"switchIndex": 0, "name": "AP-Lobby-02", "ip": "10.0.0.102", "mac": "AA:BB:CC:00:00:02", "model": "Meraki MR46"},
            {"switchIndex": 1, "name": "AP-Office-24A", "ip": "10.0.0.103", "mac": "AA:BB:CC:00:00:03", "model": "Meraki MR56"},
            {"switchIndex": 1, "name": "AP-Office-24B", "ip": "10.0.0.104", "mac": "AA:BB:CC:00:00:04", "model": "Meraki MR56", "status": "warning"},
            {"switchIndex": 1, "name": "AP-ConfRoom-A", "ip": "10.0.0.105", "mac": "AA:BB:CC:00:00:05", "model": "Meraki MR56"},
        ],
    },
    {
        "site": {
            "name": "Branch - London",
            "region": "Europe",
            "city": "London",
            "address": "30 St Mary Axe, London",
            "lat": 51.5145,
            "lng": -0.0803,
            "routerIp": "172.16.0.1",
            "routerMac": "00:50:56:C0:00:01",
            "routerModel": "Juniper SRX340",
            "status": "online",
        },
        "switches": [
            {"name": "Main Switch", "ip": "172.16.0.2", "mac": "00:50:56:C0:00:02", "model": "Juniper EX2300"},
        ],
        "accessPoints": [
            {"switchIndex": 0, "name": "AP-LDN-01", "ip": "172.16.0.101", "mac": "BB:CC:DD:11:11:11", "model": "Ubiquiti U6-Pro"},
            {"switchIndex": 0, "name": "AP-LDN-02", "ip": "172.16.0.102", "mac": "BB:CC:DD:11:11:12", "model": "Ubiquiti U6-Pro", "status": "offline"},
        ],
    },
    {
        "site": {
            "name": "Branch - Tokyo",
            "region": "Asia Pacific",
            "city": "Tokyo",
            "address": "Roppongi Hills Mori Tower",
            "lat": 35.6605,
            "lng": 139.7292,
            "routerIp": "192.168.50.1",
            "routerMac": "00:0C:29:AB:CD:EF",
            "routerModel": "Cisco ISR 1100",
            "status": "warning",
        },
        "switches": [
            {"name": "SW-Floor-10", "ip": "192.168.50.2", "mac": "00:0C:29:AB:CD:F0", "model": "Cisco Catalyst 1000"},
        ],
        "accessPoints": [
            {"switchIndex": 0, "name": "AP-TKY-101", "ip": "192.168.50.10", "mac": "CC:DD:EE:22:22:01", "model": "Cisco Aironet 1850"},
        ],
    },
]


class SeedService:
    """Populates an empty database with example sites."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.site_service = SiteService(db)

    async def seed_if_empty(self, bundles: list[dict] | None = None) -> int:
        """Create the demo sites if no site exists yet.

        Returns:
            Number of sites created (0 when the database already had data)
        """
        count_result = await self.db.execute(select(func.count(Site.id)))
        if count_result.scalar_one() > 0:
            return 0

        if bundles is None:
            bundles = DEMO_SITES

        logger.info("Seeding database with network data...")
        for bundle in bundles:
            await self.site_service.create_with_devices(SiteBundleCreate.model_validate(bundle))

        logger.info(f"Seeded {len(bundles)} sites")
        return len(bundles)
