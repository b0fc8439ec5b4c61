"""
Create the schema (if missing) and load the sample customers and orders.

Seeding is skipped when the customers table already has rows.

Usage:
  python scripts/seed_sample_data.py --database-url sqlite:///./customer_management.db
"""

from __future__ import annotations

import argparse

from customer_mgmt.core.flow_logging import configure_logging
from customer_mgmt.db.seed import seed_sample_data
from customer_mgmt.db.session import build_engine, init_db, make_session_factory, unit_of_work


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Create tables and seed the sample customer/order dataset."
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Overrides DATABASE_URL for this run.",
    )
    args = parser.parse_args()

    configure_logging()
    engine = build_engine(args.database_url)
    init_db(engine)

    print(f"Using database: {engine.url.render_as_string(hide_password=True)}")
    with unit_of_work(make_session_factory(engine)) as uow:
        created = seed_sample_data(uow)
    print("Seed complete." if created else "Database already seeded; nothing to do.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
