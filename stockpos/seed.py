"""Demo catalog for trying the application."""

from decimal import Decimal

from stockpos.models.inventory import ItemDraft
from stockpos.state.manager import AppState

DEMO_ITEMS = [
    ItemDraft(
        name="Surgical Gloves (Box)",
        barcode="4800000000011",
        sku="GLV-100",
        category="Medical Supplies",
        price=Decimal("350.00"),
        cost=Decimal("240.00"),
        qty=40,
        min_qty=10,
        location="Warehouse",
    ),
    ItemDraft(
        name="Face Masks (50 pcs)",
        barcode="4800000000028",
        sku="MSK-050",
        category="Medical Supplies",
        price=Decimal("180.00"),
        cost=Decimal("110.00"),
        qty=6,
        min_qty=15,
        location="Store Front",
    ),
    ItemDraft(
        name="Alcohol 70% 500ml",
        barcode="4800000000035",
        sku="ALC-500",
        category="Sanitizers",
        price=Decimal("95.00"),
        cost=Decimal("60.00"),
        qty=0,
        min_qty=12,
        location="Store Front",
    ),
    ItemDraft(
        name="Digital Thermometer",
        barcode="4800000000042",
        sku="THM-001",
        category="Equipment",
        price=Decimal("450.00"),
        cost=Decimal("300.00"),
        qty=18,
        min_qty=5,
        location="Warehouse",
    ),
]

DEMO_SUPPLIERS = [
    ("MedSupply Co.", "09123456789", "contact@medsupply.com"),
    ("Clinic Source", "09234567890", "info@clinicsource.com"),
    ("Health Plus", "09345678901", "sales@healthplus.com"),
]

DEMO_CATEGORIES = ["First Aid", "Personal Care"]


def seed_demo_data(state: AppState) -> None:
    """Fill an application state with demo items, suppliers and categories."""
    for draft in DEMO_ITEMS:
        state.inventory.add_item(draft)

    for name, contact, email in DEMO_SUPPLIERS:
        state.suppliers.add_supplier(name, contact, email)

    for name in DEMO_CATEGORIES:
        state.categories.add_category(name)
