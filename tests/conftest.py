"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from stockpos.config import Settings
from stockpos.models.inventory import InventoryItem, ItemDraft
from stockpos.state.manager import AppState
from stockpos.utils.logging import setup_logging
from stockpos.utils.tracing import ActionTracer


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, log_level="WARNING", log_format="text")


@pytest.fixture(scope="session", autouse=True)
def configure_logging(settings: Settings) -> None:
    """Keep store debug logging quiet during tests."""
    setup_logging(settings)


@pytest.fixture
def state(settings: Settings) -> AppState:
    """Create a fresh application state."""
    app_state = AppState(settings)
    app_state.start()
    return app_state


@pytest.fixture
def tracer() -> ActionTracer:
    """Create a test action tracer."""
    return ActionTracer(max_events=50)


# Sample data fixtures


@pytest.fixture
def gloves_draft() -> ItemDraft:
    """A well stocked item."""
    return ItemDraft(
        name="Surgical Gloves",
        barcode="4800000000011",
        sku="GLV-100",
        category="Medical Supplies",
        price=Decimal("50.00"),
        cost=Decimal("30.00"),
        qty=20,
        min_qty=5,
    )


@pytest.fixture
def masks_draft() -> ItemDraft:
    """An item below its reorder threshold."""
    return ItemDraft(
        name="Face Masks",
        barcode="4800000000028",
        sku="MSK-050",
        category="Medical Supplies",
        price=Decimal("25.00"),
        cost=Decimal("10.00"),
        qty=3,
        min_qty=10,
    )


@pytest.fixture
def gloves(state: AppState, gloves_draft: ItemDraft) -> InventoryItem:
    """Create the gloves item in the test state."""
    return state.inventory.add_item(gloves_draft)


@pytest.fixture
def masks(state: AppState, masks_draft: ItemDraft) -> InventoryItem:
    """Create the masks item in the test state."""
    return state.inventory.add_item(masks_draft)
