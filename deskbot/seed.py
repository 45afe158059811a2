"""Load sample payroll and order data into a fresh database."""

from __future__ import annotations

import logging

from deskbot.config import load_settings
from deskbot.db import Database
from deskbot.models import OrderRecord, PayrollRecord

LOGGER = logging.getLogger(__name__)

SAMPLE_AGENT_ID = 1

SAMPLE_PAYROLL = [
    PayrollRecord(SAMPLE_AGENT_ID, 1200.00, "2024-01-01", "2024-01-07", "2024-01-08"),
    PayrollRecord(SAMPLE_AGENT_ID, 4800.00, "2024-01-01", "2024-01-31", "2024-02-01"),
    PayrollRecord(SAMPLE_AGENT_ID, 57600.00, "2024-01-01", "2024-12-31", "2024-12-31"),
    PayrollRecord(SAMPLE_AGENT_ID, 4800.00, "2023-12-01", "2023-12-31", "2024-01-01"),
    PayrollRecord(SAMPLE_AGENT_ID, 2400.00, "2024-01-08", "2024-01-14", "2024-01-15"),
    PayrollRecord(SAMPLE_AGENT_ID, 3600.00, "2024-01-15", "2024-01-21", "2024-01-22"),
]

SAMPLE_ORDERS = [
    OrderRecord("John Smith", "Website Redesign", "2024-01-15", 2500.00, "Completed",
                "Complete website overhaul for Smith Corp"),
    OrderRecord("John Smith", "Logo Design", "2024-01-10", 500.00, "Completed",
                "New logo design for Smith Corp"),
    OrderRecord("Sarah Johnson", "Marketing Campaign", "2024-01-20", 1800.00, "In Progress",
                "Q1 marketing campaign for Johnson LLC"),
    OrderRecord("Mike Wilson", "Brand Guidelines", "2024-01-12", 1200.00, "Completed",
                "Brand style guide for Wilson Industries"),
    OrderRecord("Emily Davis", "Social Media Management", "2024-01-18", 900.00, "In Progress",
                "Monthly social media management"),
    OrderRecord("David Brown", "Print Materials", "2024-01-05", 750.00, "Completed",
                "Business cards and brochures"),
]


def seed_database(db: Database) -> bool:
    """Insert sample rows unless data already exists.

    Returns True when rows were inserted.
    """

    if db.count_rows("payroll") or db.count_rows("orders"):
        LOGGER.info("Seed data already exists, skipping")
        return False
    for record in SAMPLE_PAYROLL:
        db.add_payroll(record)
    for order in SAMPLE_ORDERS:
        db.add_order(order)
    LOGGER.info("Inserted %d payroll rows and %d orders", len(SAMPLE_PAYROLL), len(SAMPLE_ORDERS))
    return True


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level.upper())

    db = Database(settings.database_path)
    db.initialize()
    seed_database(db)


if __name__ == "__main__":
    main()
