"""Static demo catalog used by the `seed_catalog` command."""

from decimal import Decimal

from partsman.exceptions import CatalogError

SEED_ITEMS: list[dict] = [
    # CPUs
    {
        "name": "Intel Core i5-13600K",
        "category": "cpu",
        "description": "14-core desktop processor for gaming and productivity.",
        "price": Decimal("319.99"),
        "stock": 25,
        "specifications": {
            "manufacturer": "Intel",
            "socket": "LGA1700",
            "cores": "14",
            "threads": "20",
            "frequency": "3.5 GHz",
            "boost_clock": "5.1 GHz",
            "max_ram": "192 GB",
            "ram_frequency": "5600 MHz",
            "tech_process": "10nm",
            "tdp": "125 W",
        },
        "keywords": ["intel", "raptor lake"],
    },
    {
        "name": "AMD Ryzen 7 7800X3D",
        "category": "cpu",
        "description": "8-core gaming processor with 3D V-Cache.",
        "price": Decimal("449.99"),
        "stock": 12,
        "specifications": {
            "manufacturer": "AMD",
            "socket": "AM5",
            "cores": "8",
            "threads": "16",
            "frequency": "4.2 GHz",
            "boost_clock": "5.0 GHz",
            "max_ram": "128 GB",
            "ram_frequency": "5200 MHz",
            "tech_process": "5nm",
            "tdp": "120 W",
        },
        "keywords": ["amd", "ryzen", "x3d"],
    },
    # GPUs
    {
        "name": "NVIDIA GeForce RTX 4070",
        "category": "gpu",
        "description": "Ada Lovelace graphics card for 1440p gaming.",
        "price": Decimal("599.99"),
        "stock": 8,
        "specifications": {
            "manufacturer": "NVIDIA",
            "chipset": "AD104",
            "vram": "12 GB",
            "memory_type": "GDDR6X",
            "cooling": "dual-fan",
        },
        "keywords": ["nvidia", "rtx"],
    },
    {
        "name": "AMD Radeon RX 7800 XT",
        "category": "gpu",
        "description": "RDNA 3 graphics card with 16 GB of memory.",
        "price": Decimal("529.99"),
        "stock": 0,
        "specifications": {
            "manufacturer": "AMD",
            "chipset": "Navi 32",
            "vram": "16 GB",
            "memory_type": "GDDR6",
            "cooling": "triple-fan",
        },
        "keywords": ["amd", "radeon"],
    },
    # RAM
    {
        "name": "Corsair Vengeance RGB 32GB DDR5-6000",
        "category": "ram",
        "description": "2x16GB DDR5 kit with RGB lighting.",
        "price": Decimal("129.99"),
        "stock": 40,
        "specifications": {
            "manufacturer": "Corsair",
            "memory_type": "DDR5",
            "capacity": "32 GB",
            "frequency": "6000 MHz",
            "rgb": "RGB",
        },
        "keywords": ["corsair", "ddr5"],
    },
    # Storage
    {
        "name": "Samsung 990 PRO 2TB",
        "category": "storage",
        "description": "PCIe 4.0 NVMe M.2 SSD.",
        "price": Decimal("179.99"),
        "stock": 30,
        "specifications": {
            "manufacturer": "Samsung",
            "capacity": "2000 GB",
            "interface": "PCIe 4.0",
            "nvme": "NVMe",
        },
        "keywords": ["samsung", "ssd", "nvme"],
    },
    # Motherboards
    {
        "name": "MSI MAG B650 TOMAHAWK WIFI",
        "category": "motherboard",
        "description": "AM5 ATX motherboard with Wi-Fi 6E.",
        "price": Decimal("219.99"),
        "stock": 10,
        "specifications": {
            "manufacturer": "MSI",
            "socket": "AM5",
            "format": "ATX",
            "memory_type": "DDR5",
            "cpu_support": "AMD",
            "memory_slots": "4",
            "max_ram": "192 GB",
            "ram_frequency": "6000 MHz",
            "gpu_slots": "1",
            "sata_ports": "4",
            "m2_slots": "3",
            "features": "wifi-bt, nvme",
        },
        "keywords": ["msi", "am5"],
    },
    # PSU
    {
        "name": "Seasonic Focus GX-850",
        "category": "psu",
        "description": "850 W 80+ Gold fully modular power supply.",
        "price": Decimal("139.99"),
        "stock": 15,
        "specifications": {"manufacturer": "Seasonic", "wattage": "850 W"},
        "keywords": ["seasonic"],
    },
    # Case
    {
        "name": "Fractal Design North",
        "category": "case",
        "description": "Mid-tower ATX case with wooden front panel.",
        "price": Decimal("139.99"),
        "stock": 6,
        "specifications": {"manufacturer": "Fractal", "watercooling": "water-cooling"},
        "keywords": ["fractal"],
    },
    # Cooling
    {
        "name": "Noctua NH-D15",
        "category": "cooling",
        "description": "Dual-tower air cooler.",
        "price": Decimal("109.99"),
        "stock": 18,
        "specifications": {"manufacturer": "Noctua", "tdp": "250 W", "heatpipes": "6"},
        "keywords": ["noctua"],
    },
    # Services
    {
        "name": "PC Assembly and Windows Setup",
        "category": "additional-services",
        "description": "Professional assembly, cable management and Windows installation.",
        "price": Decimal("79.99"),
        "stock": 100,
        "specifications": {"services": "assembly, windows"},
        "keywords": ["assembly", "service"],
    },
    # Ready-made PCs
    {
        "name": "Budget Gaming PC",
        "category": "gaming-pc",
        "description": "Entry-level 1080p gaming build.",
        "price": Decimal("899.99"),
        "stock": 4,
        "specifications": {
            "Processor": "Intel Core i5-13600K",
            "Graphics Card": "AMD Radeon RX 7800 XT",
            "Memory": "32GB DDR5",
            "Storage": "Samsung 990 PRO 2TB",
            "Power Supply": "Seasonic Focus GX-850",
        },
        "keywords": ["gaming", "budget"],
    },
    {
        "name": "Ultimate Gaming Beast",
        "category": "gaming-pc",
        "description": "High-end build for 4K gaming and streaming.",
        "price": Decimal("2499.99"),
        "stock": 2,
        "specifications": {
            "CPU": "AMD Ryzen 7 7800X3D",
            "GPU": "NVIDIA GeForce RTX 4070",
            "RAM": "32GB DDR5; RGB",
            "Motherboard": "MSI MAG B650 TOMAHAWK WIFI",
            "Cooling": "Noctua NH-D15",
            "Case": "Fractal Design North",
        },
        "keywords": ["gaming", "high-end"],
    },
    {
        "name": "Office Productivity PC",
        "category": "office-pc",
        "description": "Quiet everyday machine for office work.",
        "price": Decimal("649.99"),
        "stock": 0,
        "specifications": {
            "cpu": "Intel Core i5-13600K",
            "ram": "16GB DDR5",
            "storage": "Samsung 990 PRO 2TB",
        },
        "keywords": ["office"],
    },
]

SEED_CATEGORIES: tuple[str, ...] = tuple(dict.fromkeys(item["category"] for item in SEED_ITEMS))


def select_seed_items(only=None) -> list[dict]:
    """
    Seed records, restricted to the `only` categories when given.

    Raises:
        CatalogError: INVALID_CATEGORY if a category has no seed records
    """
    if not only:
        return list(SEED_ITEMS)
    unknown = [category for category in only if category not in SEED_CATEGORIES]
    if unknown:
        raise CatalogError("INVALID_CATEGORY", categories=unknown)
    return [data for data in SEED_ITEMS if data["category"] in only]
