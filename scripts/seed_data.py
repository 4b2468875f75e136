"""Seed demo data into a fresh application state and print the dashboard."""

import json

from stockpos.actions.alerts import AlertActions
from stockpos.main import lifespan
from stockpos.reports import dashboard_stats, low_stock_report
from stockpos.seed import seed_demo_data


def main() -> None:
    """Seed the demo catalog and show what it looks like."""
    print("Seeding demo inventory...")

    with lifespan() as state:
        seed_demo_data(state)
        alerts = AlertActions(state).scan_inventory()

        print(f"✓ Seeded {state.inventory.total_items()} items")
        print(f"✓ Seeded {len(state.suppliers.suppliers)} suppliers")
        print(f"✓ Raised {len(alerts)} stock alerts\n")

        for item in low_stock_report(state):
            print(f"  {item.status.value:<8} {item.name} ({item.qty} left)")

        print(json.dumps(dashboard_stats(state).model_dump(mode="json"), indent=2))


if __name__ == "__main__":
    main()
