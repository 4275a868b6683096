"""Pytest fixtures for Partsman tests."""

from decimal import Decimal

import pytest

from partsman.conf import reset_catalog_backend
from partsman.models import CatalogItem
from partsman.protocols import ItemInfo


@pytest.fixture(autouse=True)
def _reset_backend():
    reset_catalog_backend()
    yield
    reset_catalog_backend()


# ═══════════════════════════════════════════════════════════════════
# In-memory items (query engine)
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def alpha_pc():
    return ItemInfo(
        id="alpha",
        name="Alpha PC",
        category="gaming-pc",
        description="Entry level gaming",
        price=Decimal("800"),
        specifications={"cpu": "Intel i5"},
        stock=3,
    )


@pytest.fixture
def beta_pc():
    return ItemInfo(
        id="beta",
        name="Beta PC",
        category="gaming-pc",
        description="Streaming workstation",
        price=Decimal("1200"),
        specifications={"cpu": "AMD Ryzen 7"},
        stock=0,
    )


@pytest.fixture
def pcs(alpha_pc, beta_pc):
    return [alpha_pc, beta_pc]


@pytest.fixture
def ready_made(alpha_pc, beta_pc):
    """Ready-made PCs with inconsistently named spec keys."""
    office = ItemInfo(
        id="office",
        name="office mini",
        category="office-pc",
        description="Quiet desktop",
        price=Decimal("499.99"),
        specifications={
            "Processor": "Intel i3",
            "Memory": "16GB DDR4",
            "Storage": "512GB SSD; 1TB HDD",
        },
        stock=7,
    )
    gamer = ItemInfo(
        id="gamer",
        name="Gamer X",
        category="gaming-pc",
        description="RGB everything",
        price=Decimal("1999.99"),
        specifications={
            "CPU": "AMD Ryzen 9",
            "Graphics Card": "RTX 4080",
            "RAM": "32GB DDR5",
            "Cooling": "AIO 360mm",
        },
        stock=1,
    )
    streamer = ItemInfo(
        id="streamer",
        name="Streamer Pro",
        category="workstation",
        description="Capture and encode",
        price=Decimal("1499"),
        specifications={
            "GPU": "RX 7900 XT",
            "ram": "64GB DDR5",
            "power supply": "850W Gold",
        },
        stock=2,
    )
    return [alpha_pc, beta_pc, office, gamer, streamer]


@pytest.fixture
def cpus():
    """Configurator CPU components."""
    return [
        ItemInfo(
            id="i5",
            name="Intel Core i5-13600K",
            category="cpu",
            price=Decimal("319.99"),
            specifications={"manufacturer": "Intel", "socket": "LGA1700", "cores": "14", "frequency": "3.5 GHz"},
            stock=25,
        ),
        ItemInfo(
            id="r7",
            name="AMD Ryzen 7 7800X3D",
            category="cpu",
            price=Decimal("449.99"),
            specifications={"manufacturer": "AMD", "socket": "AM5", "cores": "8", "frequency": "4.2 GHz"},
            stock=12,
        ),
        ItemInfo(
            id="r9",
            name="AMD Ryzen 9 7950X",
            category="cpu",
            price=Decimal("599.00"),
            specifications={"manufacturer": "AMD", "socket": "AM5", "cores": "16", "frequency": "4.5 GHz"},
            stock=5,
        ),
    ]


# ═══════════════════════════════════════════════════════════════════
# Database items
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def cpu_item(db):
    item = CatalogItem.objects.create(
        name="AMD Ryzen 7 7800X3D",
        category="cpu",
        description="8-core gaming processor",
        price=Decimal("449.99"),
        stock=12,
        specifications={"manufacturer": "AMD", "socket": "AM5", "cores": 8},
    )
    item.keywords.add("amd", "ryzen")
    return item


@pytest.fixture
def gpu_item(db):
    return CatalogItem.objects.create(
        name="NVIDIA GeForce RTX 4070",
        category="gpu",
        description="Graphics card for 1440p",
        price=Decimal("599.99"),
        stock=0,
        specifications={"manufacturer": "NVIDIA", "vram": "12 GB"},
    )


@pytest.fixture
def gaming_pc(db):
    return CatalogItem.objects.create(
        name="Ultimate Gaming Beast",
        category="gaming-pc",
        description="High-end build",
        price=Decimal("2499.99"),
        stock=2,
        specifications={"CPU": "AMD Ryzen 7", "Graphics Card": "RTX 4070"},
        image_url="/images/beast.png",
    )


@pytest.fixture
def office_pc(db):
    return CatalogItem.objects.create(
        name="Office Productivity PC",
        category="office-pc",
        price=Decimal("649.99"),
        stock=0,
        specifications={"cpu": "Intel Core i5"},
    )


@pytest.fixture
def hidden_item(db):
    return CatalogItem.objects.create(
        name="Discontinued Case",
        category="case",
        price=Decimal("59.99"),
        is_published=False,
    )
